"""Module: visits."""

from datetime import date

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db
from petclinic.api.views import flash, redirect, render
from petclinic.core.exceptions import NotFoundError
from petclinic.domain.owners import Owner, Pet, Visit
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.validation.binding import BindingResult
from petclinic.validation.forms import VisitForm, bind_form

router = APIRouter(prefix="/owners/{owner_id}/pets/{pet_id}")

VISIT_FORM = "pets/create_or_update_visit_form.html"


def _load(db: Session, owner_id: int, pet_id: int) -> tuple[Owner, Pet]:
    owner = OwnerRepository(db).find_by_id(owner_id)
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        raise NotFoundError("Pet", pet_id)
    return owner, pet


@router.get("/visits/new", summary="Visit booking form")
def init_new_visit_form(owner_id: int, pet_id: int, request: Request, db: Session = Depends(get_db)):
    owner, pet = _load(db, owner_id, pet_id)
    values = {"date": date.today().isoformat(), "description": ""}
    return render(
        request,
        VISIT_FORM,
        {"owner": owner, "pet": pet, "values": values, "errors": BindingResult()},
    )


@router.post("/visits/new", summary="Book visit")
async def process_new_visit_form(owner_id: int, pet_id: int, request: Request, db: Session = Depends(get_db)):
    owner, pet = _load(db, owner_id, pet_id)
    data = dict(await request.form())
    form, errors = bind_form(VisitForm, data)
    if errors.has_errors:
        return render(
            request,
            VISIT_FORM,
            {"owner": owner, "pet": pet, "values": data, "errors": errors},
        )

    owner.add_visit(pet_id, Visit(description=form.description, date=form.date or date.today()))
    OwnerRepository(db).save(owner)
    flash(request, "Your visit has been booked")
    return redirect(f"/owners/{owner_id}")
