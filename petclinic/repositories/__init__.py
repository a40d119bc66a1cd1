from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.repositories.pagination import Page
from petclinic.repositories.pet_type_repository import PetTypeRepository
from petclinic.repositories.vet_repository import VetRepository

__all__ = ["OwnerRepository", "Page", "PetTypeRepository", "VetRepository"]
