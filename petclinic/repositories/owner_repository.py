"""Module: owner_repository.

Owners are the aggregate root for pets and visits. Loading an owner always
loads the full graph, and saving one writes owner, pets and visits in a
single transaction.
"""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petclinic.core.exceptions import ConstraintViolationError, NotFoundError
from petclinic.core.logging import get_logger
from petclinic.db.models.owner import OwnerRow
from petclinic.db.models.pet import PetRow
from petclinic.db.models.pet_type import PetTypeRow
from petclinic.db.models.visit import VisitRow
from petclinic.domain.identity import Assigned
from petclinic.domain.owners import Owner, PersonName, Pet, PetType, Visit
from petclinic.repositories.pagination import Page, page_offset

logger = get_logger(__name__)


def _required(value, column: str):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConstraintViolationError(f"{column} may not be empty")
    return value


class OwnerRepository:
    def __init__(self, db: Session):
        self.db = db

    # -------------------------
    # Writes
    # -------------------------
    def save(self, owner: Owner) -> Owner:
        """Insert or update ``owner`` together with every pet and visit it holds.

        Either the whole graph commits or nothing does. Identities for newly
        inserted records are handed out only after the commit succeeds, so a
        failed save leaves the in-memory graph exactly as it was.
        """
        assigned = []
        try:
            owner_id = self._write_owner(owner)
            assigned.append((owner, owner_id))
            for pet in owner.pets:
                pet_id = self._write_pet(pet, owner_id)
                assigned.append((pet, pet_id))
                for visit in pet.visits:
                    assigned.append((visit, self._write_visit(visit, pet_id)))
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.error("owner_save_rejected", owner_id=owner.id_value, error=str(exc.orig))
            raise ConstraintViolationError(str(exc.orig)) from exc
        except Exception:
            self.db.rollback()
            raise

        for record, value in assigned:
            record.assign_identity(value)
        logger.info("owner_saved", owner_id=owner_id, pets=len(owner.pets))
        return owner

    def _write_owner(self, owner: Owner) -> int:
        values = {
            "first_name": _required(owner.first_name, "owners.first_name"),
            "last_name": _required(owner.last_name, "owners.last_name"),
            "address": _required(owner.address, "owners.address"),
            "city": _required(owner.city, "owners.city"),
            "telephone": _required(owner.telephone, "owners.telephone"),
        }
        if owner.is_new:
            return self.db.execute(insert(OwnerRow).values(**values)).inserted_primary_key[0]
        result = self.db.execute(update(OwnerRow).where(OwnerRow.id == owner.id_value).values(**values))
        if result.rowcount == 0:
            raise NotFoundError("Owner", owner.id_value)
        return owner.id_value

    def _write_pet(self, pet: Pet, owner_id: int) -> int:
        pet_type = _required(pet.type, "pets.type_id")
        values = {
            "name": _required(pet.name, "pets.name"),
            "birth_date": _required(pet.birth_date, "pets.birth_date"),
            "type_id": _required(pet_type.id_value, "pets.type_id"),
            "owner_id": owner_id,
        }
        if pet.is_new:
            return self.db.execute(insert(PetRow).values(**values)).inserted_primary_key[0]
        self.db.execute(update(PetRow).where(PetRow.id == pet.id_value).values(**values))
        return pet.id_value

    def _write_visit(self, visit: Visit, pet_id: int) -> int:
        values = {
            "pet_id": pet_id,
            "visit_date": _required(visit.date, "visits.visit_date"),
            "description": _required(visit.description, "visits.description"),
        }
        if visit.is_new:
            return self.db.execute(insert(VisitRow).values(**values)).inserted_primary_key[0]
        self.db.execute(update(VisitRow).where(VisitRow.id == visit.id_value).values(**values))
        return visit.id_value

    # -------------------------
    # Reads
    # -------------------------
    def find_by_id(self, owner_id: int) -> Owner:
        row = self.db.execute(select(OwnerRow).where(OwnerRow.id == owner_id)).scalar_one_or_none()
        if row is None:
            raise NotFoundError("Owner", owner_id)
        return self._to_owners([row])[0]

    def find_by_last_name_prefix(self, prefix: str, page: int = 1, size: int = 5) -> Page[Owner]:
        condition = OwnerRow.last_name.startswith(prefix or "", autoescape=True)
        total = self.db.execute(select(func.count(OwnerRow.id)).where(condition)).scalar_one()
        if total == 0:
            return Page(items=[], number=page, size=size, total_items=0)

        rows = self.db.execute(
            select(OwnerRow)
            .where(condition)
            .order_by(OwnerRow.last_name, OwnerRow.id)
            .offset(page_offset(page, size))
            .limit(size)
        ).scalars().all()
        return Page(items=self._to_owners(rows), number=page, size=size, total_items=total)

    def _to_owners(self, rows) -> list[Owner]:
        pets_by_owner = self._load_pets([r.id for r in rows])
        return [
            Owner(
                name=PersonName(r.first_name, r.last_name),
                address=r.address,
                city=r.city,
                telephone=r.telephone,
                pets=pets_by_owner.get(r.id, []),
                id=Assigned(r.id),
            )
            for r in rows
        ]

    def _load_pets(self, owner_ids: list[int]) -> dict[int, list[Pet]]:
        if not owner_ids:
            return {}
        rows = self.db.execute(
            select(PetRow, PetTypeRow)
            .join(PetTypeRow, PetTypeRow.id == PetRow.type_id)
            .where(PetRow.owner_id.in_(owner_ids))
            .order_by(PetRow.name, PetRow.id)
        ).all()

        visits_by_pet: dict[int, list[Visit]] = defaultdict(list)
        pet_ids = [pet_row.id for pet_row, _ in rows]
        if pet_ids:
            visit_rows = self.db.execute(
                select(VisitRow)
                .where(VisitRow.pet_id.in_(pet_ids))
                .order_by(VisitRow.visit_date, VisitRow.id)
            ).scalars().all()
            for v in visit_rows:
                visits_by_pet[v.pet_id].append(
                    Visit(description=v.description, date=v.visit_date, id=Assigned(v.id))
                )

        pets: dict[int, list[Pet]] = defaultdict(list)
        for pet_row, type_row in rows:
            pets[pet_row.owner_id].append(
                Pet(
                    name=pet_row.name,
                    birth_date=pet_row.birth_date,
                    type=PetType(type_row.name, id=Assigned(type_row.id)),
                    visits=visits_by_pet.get(pet_row.id, []),
                    id=Assigned(pet_row.id),
                )
            )
        return pets
