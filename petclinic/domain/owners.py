"""Owner aggregate: owners, their pets, and the pets' visits."""

from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt

from petclinic.core.exceptions import NotFoundError
from petclinic.domain.identity import UNASSIGNED, Identity, IdentityMixin


@dataclass
class PersonName:
    first_name: str = ""
    last_name: str = ""


@dataclass
class PetType(IdentityMixin):
    name: str
    id: Identity = field(default=UNASSIGNED, kw_only=True)


@dataclass
class Visit(IdentityMixin):
    description: str = ""
    date: dt.date = field(default_factory=dt.date.today)
    id: Identity = field(default=UNASSIGNED, kw_only=True)


@dataclass
class Pet(IdentityMixin):
    name: str = ""
    birth_date: dt.date | None = None
    type: PetType | None = None
    visits: list[Visit] = field(default_factory=list)
    id: Identity = field(default=UNASSIGNED, kw_only=True)

    def add_visit(self, visit: Visit) -> None:
        self.visits.append(visit)

    def sorted_visits(self) -> list[Visit]:
        return sorted(self.visits, key=lambda v: v.date)


@dataclass
class Owner(IdentityMixin):
    name: PersonName = field(default_factory=PersonName)
    address: str = ""
    city: str = ""
    telephone: str = ""
    pets: list[Pet] = field(default_factory=list)
    id: Identity = field(default=UNASSIGNED, kw_only=True)

    @property
    def first_name(self) -> str:
        return self.name.first_name

    @property
    def last_name(self) -> str:
        return self.name.last_name

    def add_pet(self, pet: Pet) -> None:
        # Persisted pets are already in the collection; only new ones get appended.
        if pet.is_new:
            self.pets.append(pet)

    def get_pet(self, name: str, ignore_new: bool = False) -> Pet | None:
        """Find a pet by name, ignoring case.

        With ``ignore_new`` set, pets that have not been saved yet are skipped,
        so a freshly attached form object does not collide with itself.
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name and pet.name.lower() == wanted:
                return pet
        return None

    def get_pet_by_id(self, pet_id: int) -> Pet | None:
        for pet in self.pets:
            if pet.id_value == pet_id:
                return pet
        return None

    def add_visit(self, pet_id: int, visit: Visit) -> None:
        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            raise NotFoundError("Pet", pet_id)
        pet.add_visit(visit)

    def sorted_pets(self) -> list[Pet]:
        return sorted(self.pets, key=lambda p: p.name)
