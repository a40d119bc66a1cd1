from petclinic.validation.binding import BindingResult, FieldError
from petclinic.validation.forms import OwnerForm, PetForm, VisitForm, bind_form
from petclinic.validation.pet_validator import validate_new_pet

__all__ = [
    "BindingResult",
    "FieldError",
    "OwnerForm",
    "PetForm",
    "VisitForm",
    "bind_form",
    "validate_new_pet",
]
