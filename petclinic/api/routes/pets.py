"""Module: pets.

Pets are edited through their owner: every write loads the owner graph,
changes the pet inside it and saves the owner again.
"""

from datetime import date

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from petclinic.api.views import flash, redirect, render
from petclinic.api.routes.deps import get_db
from petclinic.core.exceptions import NotFoundError
from petclinic.domain.owners import Owner, Pet, PetType
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.repositories.pet_type_repository import PetTypeRepository
from petclinic.validation.binding import DUPLICATE, FUTURE_DATE, NOT_FOUND, BindingResult
from petclinic.validation.forms import PetForm, bind_form
from petclinic.validation.pet_validator import validate_new_pet

router = APIRouter(prefix="/owners/{owner_id}")

PET_FORM = "pets/create_or_update_pet_form.html"


# -------------------------
# Helpers
# -------------------------
def _pet_values(pet: Pet) -> dict:
    return {
        "id": pet.id_value,
        "name": pet.name,
        "birthDate": pet.birth_date.isoformat() if pet.birth_date else "",
        "type": pet.type.name if pet.type else "",
    }


def _find_pet(owner: Owner, pet_id: int) -> Pet:
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        raise NotFoundError("Pet", pet_id)
    return pet


def _submitted(form: PetForm | None, data: dict) -> tuple[str, date | None, str]:
    # An unparseable date leaves no bound form; name and type still come from the raw input.
    if form is not None:
        return form.name or "", form.birth_date, form.type or ""
    return str(data.get("name") or "").strip(), None, str(data.get("type") or "").strip()


def _resolve_type(db: Session, type_name: str, errors: BindingResult) -> PetType | None:
    if not type_name:
        return None
    pet_type = PetTypeRepository(db).find_by_name(type_name)
    if pet_type is None:
        errors.reject_value("type", NOT_FOUND)
    return pet_type


def _check_birth_date(birth_date: date | None, errors: BindingResult) -> None:
    if birth_date is not None and birth_date > date.today():
        errors.reject_value("birthDate", FUTURE_DATE)


def _form_page(request: Request, db: Session, owner: Owner, values: dict, errors: BindingResult, is_new: bool):
    return render(
        request,
        PET_FORM,
        {
            "owner": owner,
            "values": values,
            "errors": errors,
            "is_new": is_new,
            "types": PetTypeRepository(db).find_all_ordered_by_name(),
        },
    )


# -------------------------
# Create
# -------------------------
@router.get("/pets/new", summary="Pet creation form")
def init_creation_form(owner_id: int, request: Request, db: Session = Depends(get_db)):
    owner = OwnerRepository(db).find_by_id(owner_id)
    pet = Pet()
    owner.add_pet(pet)
    return _form_page(request, db, owner, _pet_values(pet), BindingResult(), is_new=True)


@router.post("/pets/new", summary="Create pet")
async def process_creation_form(owner_id: int, request: Request, db: Session = Depends(get_db)):
    repo = OwnerRepository(db)
    owner = repo.find_by_id(owner_id)
    data = dict(await request.form())
    form, errors = bind_form(PetForm, data)

    name, birth_date, type_name = _submitted(form, data)
    pet = Pet(name=name, birth_date=birth_date, type=_resolve_type(db, type_name, errors))
    if pet.name and owner.get_pet(pet.name, ignore_new=True) is not None:
        errors.reject_value("name", DUPLICATE)
    _check_birth_date(pet.birth_date, errors)
    validate_new_pet(pet, errors)

    if errors.has_errors:
        return _form_page(request, db, owner, data, errors, is_new=True)

    owner.add_pet(pet)
    repo.save(owner)
    flash(request, "New Pet has been Added")
    return redirect(f"/owners/{owner_id}")


# -------------------------
# Edit
# -------------------------
@router.get("/pets/{pet_id}/edit", summary="Pet edit form")
def init_update_form(owner_id: int, pet_id: int, request: Request, db: Session = Depends(get_db)):
    owner = OwnerRepository(db).find_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    return _form_page(request, db, owner, _pet_values(pet), BindingResult(), is_new=False)


@router.post("/pets/{pet_id}/edit", summary="Update pet")
async def process_update_form(owner_id: int, pet_id: int, request: Request, db: Session = Depends(get_db)):
    repo = OwnerRepository(db)
    owner = repo.find_by_id(owner_id)
    pet = _find_pet(owner, pet_id)
    data = dict(await request.form())
    form, errors = bind_form(PetForm, data)

    name, birth_date, type_name = _submitted(form, data)
    pet_type = _resolve_type(db, type_name, errors)

    # Renaming onto another pet of the same owner is a duplicate; keeping its own name is not.
    other = owner.get_pet(name) if name else None
    if other is not None and other.id_value != pet_id:
        errors.reject_value("name", DUPLICATE)
    _check_birth_date(birth_date, errors)
    # The pet is persisted here, so the type clause never fires and the old type is kept.
    validate_new_pet(Pet(name=name, birth_date=birth_date, type=pet_type, id=pet.id), errors)

    if errors.has_errors:
        return _form_page(request, db, owner, data, errors, is_new=False)

    pet.name = name
    pet.birth_date = birth_date
    if pet_type is not None:
        pet.type = pet_type
    repo.save(owner)
    flash(request, "Pet details has been edited")
    return redirect(f"/owners/{owner_id}")
