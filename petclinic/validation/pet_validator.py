"""Module: pet_validator."""

from petclinic.domain.owners import Pet
from petclinic.validation.binding import REQUIRED, BindingResult


def validate_new_pet(pet: Pet, errors: BindingResult) -> None:
    """Cross-field rules for a pet: name, type (when new) and birth date.

    A field that already carries an error (e.g. an unparseable date) is not
    reported twice.
    """
    if (not pet.name or not pet.name.strip()) and not errors.has_field_errors("name"):
        errors.reject_value("name", REQUIRED)

    if pet.is_new and pet.type is None and not errors.has_field_errors("type"):
        errors.reject_value("type", REQUIRED)

    if pet.birth_date is None and not errors.has_field_errors("birthDate"):
        errors.reject_value("birthDate", REQUIRED)
