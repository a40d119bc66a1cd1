"""Vets and their specialties; near-static reference data."""

from __future__ import annotations

from dataclasses import dataclass, field

from petclinic.domain.identity import UNASSIGNED, Identity, IdentityMixin
from petclinic.domain.owners import PersonName


@dataclass
class Specialty(IdentityMixin):
    name: str
    id: Identity = field(default=UNASSIGNED, kw_only=True)


@dataclass
class Vet(IdentityMixin):
    name: PersonName = field(default_factory=PersonName)
    specialties: list[Specialty] = field(default_factory=list)
    id: Identity = field(default=UNASSIGNED, kw_only=True)

    @property
    def first_name(self) -> str:
        return self.name.first_name

    @property
    def last_name(self) -> str:
        return self.name.last_name

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        self.specialties.append(specialty)

    def sorted_specialties(self) -> list[Specialty]:
        return sorted(self.specialties, key=lambda s: s.name)
