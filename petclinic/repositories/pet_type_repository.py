"""Module: pet_type_repository."""

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from petclinic.db.models.pet_type import PetTypeRow
from petclinic.domain.identity import Assigned
from petclinic.domain.owners import PetType


class PetTypeRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all_ordered_by_name(self) -> list[PetType]:
        rows = self.db.execute(select(PetTypeRow).order_by(PetTypeRow.name)).scalars().all()
        return [PetType(r.name, id=Assigned(r.id)) for r in rows]

    def find_by_name(self, name: str) -> PetType | None:
        row = self.db.execute(select(PetTypeRow).where(PetTypeRow.name == name)).scalar_one_or_none()
        if row is None:
            return None
        return PetType(row.name, id=Assigned(row.id))

    def save(self, pet_type: PetType) -> PetType:
        # Lookup rows are seeded once and never edited.
        if pet_type.is_new:
            new_id = self.db.execute(insert(PetTypeRow).values(name=pet_type.name)).inserted_primary_key[0]
            self.db.commit()
            pet_type.assign_identity(new_id)
        return pet_type
