"""Module: vet_repository."""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petclinic.core.exceptions import ConstraintViolationError
from petclinic.db.models.specialty import SpecialtyRow
from petclinic.db.models.vet import VetRow, vet_specialties
from petclinic.domain.identity import Assigned
from petclinic.domain.owners import PersonName
from petclinic.domain.vets import Specialty, Vet
from petclinic.repositories.pagination import Page, page_offset


class VetRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Vet]:
        rows = self.db.execute(select(VetRow).order_by(VetRow.id)).scalars().all()
        return self._to_vets(rows)

    def find_page(self, page: int = 1, size: int = 5) -> Page[Vet]:
        total = self.db.execute(select(func.count(VetRow.id))).scalar_one()
        rows = self.db.execute(
            select(VetRow).order_by(VetRow.id).offset(page_offset(page, size)).limit(size)
        ).scalars().all()
        return Page(items=self._to_vets(rows), number=page, size=size, total_items=total)

    def _to_vets(self, rows) -> list[Vet]:
        specialties: dict[int, list[Specialty]] = defaultdict(list)
        vet_ids = [r.id for r in rows]
        if vet_ids:
            links = self.db.execute(
                select(vet_specialties.c.vet_id, SpecialtyRow)
                .join(SpecialtyRow, SpecialtyRow.id == vet_specialties.c.specialty_id)
                .where(vet_specialties.c.vet_id.in_(vet_ids))
                .order_by(SpecialtyRow.name)
            ).all()
            for vet_id, s in links:
                specialties[vet_id].append(Specialty(s.name, id=Assigned(s.id)))
        return [
            Vet(
                name=PersonName(r.first_name, r.last_name),
                specialties=specialties.get(r.id, []),
                id=Assigned(r.id),
            )
            for r in rows
        ]

    # Vets are reference data: only seeding and tests write them.
    def save(self, vet: Vet) -> Vet:
        if not vet.is_new:
            return vet
        try:
            spec_ids = [(s, self._specialty_id(s)) for s in vet.specialties]
            vet_id = self.db.execute(
                insert(VetRow).values(first_name=vet.first_name, last_name=vet.last_name)
            ).inserted_primary_key[0]
            for _, spec_id in spec_ids:
                self.db.execute(insert(vet_specialties).values(vet_id=vet_id, specialty_id=spec_id))
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConstraintViolationError(str(exc.orig)) from exc
        vet.assign_identity(vet_id)
        for specialty, spec_id in spec_ids:
            specialty.assign_identity(spec_id)
        return vet

    def _specialty_id(self, specialty: Specialty) -> int:
        if not specialty.is_new:
            return specialty.id_value
        existing = self.db.execute(
            select(SpecialtyRow.id).where(SpecialtyRow.name == specialty.name)
        ).scalar_one_or_none()
        if existing is None:
            existing = self.db.execute(
                insert(SpecialtyRow).values(name=specialty.name)
            ).inserted_primary_key[0]
        return existing
