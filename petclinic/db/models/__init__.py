# petclinic/db/models/__init__.py

from petclinic.db.models.owner import OwnerRow
from petclinic.db.models.pet import PetRow
from petclinic.db.models.pet_type import PetTypeRow
from petclinic.db.models.visit import VisitRow
from petclinic.db.models.vet import VetRow, vet_specialties
from petclinic.db.models.specialty import SpecialtyRow
