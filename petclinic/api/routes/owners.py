"""Module: owners."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db, get_settings
from petclinic.api.views import flash, flash_error, redirect, render
from petclinic.core.config import Settings
from petclinic.core.logging import get_logger
from petclinic.domain.owners import Owner, PersonName
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.validation.binding import NOT_FOUND, BindingResult
from petclinic.validation.forms import OwnerForm, bind_form

router = APIRouter()
logger = get_logger(__name__)

OWNER_FORM = "owners/create_or_update_owner_form.html"
FIND_FORM = "owners/find_owners.html"


def _owner_values(owner: Owner) -> dict:
    return {
        "id": owner.id_value,
        "firstName": owner.first_name,
        "lastName": owner.last_name,
        "address": owner.address,
        "city": owner.city,
        "telephone": owner.telephone,
    }


def _owner_from_form(form: OwnerForm) -> Owner:
    return Owner(
        name=PersonName(form.first_name, form.last_name),
        address=form.address,
        city=form.city,
        telephone=form.telephone,
    )


def _form_page(request: Request, values: dict, errors: BindingResult, is_new: bool):
    return render(request, OWNER_FORM, {"values": values, "errors": errors, "is_new": is_new})


# -------------------------
# Create
# -------------------------
@router.get("/owners/new", summary="Owner creation form")
def init_creation_form(request: Request):
    return _form_page(request, {}, BindingResult(), is_new=True)


@router.post("/owners/new", summary="Create owner")
async def process_creation_form(request: Request, db: Session = Depends(get_db)):
    data = dict(await request.form())
    form, errors = bind_form(OwnerForm, data)
    if errors.has_errors:
        flash_error(request, "There was an error in creating the owner.")
        return _form_page(request, data, errors, is_new=True)

    owner = OwnerRepository(db).save(_owner_from_form(form))
    flash(request, "New Owner Created")
    return redirect(f"/owners/{owner.id_value}")


# -------------------------
# Search
# -------------------------
@router.get("/owners/find", summary="Owner search form")
def init_find_form(request: Request):
    return render(request, FIND_FORM, {"values": {}, "errors": BindingResult()})


@router.get("/owners", summary="Search owners by last name prefix")
def process_find_form(
    request: Request,
    page: int = 1,
    last_name: str = Query(default="", alias="lastName"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    page = max(page, 1)
    repo = OwnerRepository(db)
    results = repo.find_by_last_name_prefix(last_name, page, settings.owners_page_size)

    if results.total_items == 0:
        errors = BindingResult()
        errors.reject_value("lastName", NOT_FOUND)
        return render(request, FIND_FORM, {"values": {"lastName": last_name}, "errors": errors})

    if results.total_items == 1:
        # A page number past the single match still lands on that owner.
        single = results.items or repo.find_by_last_name_prefix(last_name, 1, settings.owners_page_size).items
        return redirect(f"/owners/{single[0].id_value}")

    return render(
        request,
        "owners/owners_list.html",
        {
            "list_owners": results.items,
            "last_name": last_name,
            "current_page": results.number,
            "total_pages": results.total_pages,
            "total_items": results.total_items,
        },
    )


# -------------------------
# Edit
# -------------------------
@router.get("/owners/{owner_id}/edit", summary="Owner edit form")
def init_update_owner_form(owner_id: int, request: Request, db: Session = Depends(get_db)):
    owner = OwnerRepository(db).find_by_id(owner_id)
    return _form_page(request, _owner_values(owner), BindingResult(), is_new=False)


@router.post("/owners/{owner_id}/edit", summary="Update owner")
async def process_update_owner_form(owner_id: int, request: Request, db: Session = Depends(get_db)):
    data = dict(await request.form())
    form, errors = bind_form(OwnerForm, data)
    if errors.has_errors:
        flash_error(request, "There was an error in updating the owner.")
        return _form_page(request, data, errors, is_new=False)

    if form.id is not None and form.id != owner_id:
        logger.warning("owner_id_mismatch", path_id=owner_id, form_id=form.id)
        flash_error(request, "Owner ID mismatch. Please try again.")
        return redirect(f"/owners/{owner_id}/edit")

    owner = _owner_from_form(form)
    # The path decides which row is updated, never a hidden form field.
    owner.assign_identity(owner_id)
    OwnerRepository(db).save(owner)
    flash(request, "Owner Values Updated")
    return redirect(f"/owners/{owner_id}")


# -------------------------
# Detail
# -------------------------
@router.get("/owners/{owner_id}", summary="Owner detail")
def show_owner(owner_id: int, request: Request, db: Session = Depends(get_db)):
    owner = OwnerRepository(db).find_by_id(owner_id)
    return render(request, "owners/owner_details.html", {"owner": owner})
