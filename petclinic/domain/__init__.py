from petclinic.domain.identity import UNASSIGNED, Assigned, Identity, Unassigned
from petclinic.domain.owners import Owner, PersonName, Pet, PetType, Visit
from petclinic.domain.vets import Specialty, Vet

__all__ = [
    "UNASSIGNED",
    "Assigned",
    "Identity",
    "Unassigned",
    "Owner",
    "PersonName",
    "Pet",
    "PetType",
    "Visit",
    "Specialty",
    "Vet",
]
