"""Module: vets.

Both listings read through the process-wide vet cache.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db, get_settings, get_vet_cache
from petclinic.api.views import render
from petclinic.cache import VetCache
from petclinic.core.config import Settings
from petclinic.domain.vets import Vet
from petclinic.repositories.vet_repository import VetRepository

router = APIRouter()


def _vet_payload(vet: Vet) -> dict:
    return {
        "id": vet.id_value,
        "firstName": vet.first_name,
        "lastName": vet.last_name,
        "specialties": [{"id": s.id_value, "name": s.name} for s in vet.sorted_specialties()],
    }


@router.get("/vets.html", summary="Vet list page")
def show_vet_list(
    request: Request,
    page: int = 1,
    db: Session = Depends(get_db),
    cache: VetCache = Depends(get_vet_cache),
    settings: Settings = Depends(get_settings),
):
    page = max(page, 1)
    vets = cache.vet_page(page, settings.vets_page_size, VetRepository(db).find_page)
    return render(
        request,
        "vets/vet_list.html",
        {
            "list_vets": vets.items,
            "current_page": vets.number,
            "total_pages": vets.total_pages,
            "total_items": vets.total_items,
        },
    )


@router.get("/vets", summary="All vets as data")
def show_resources_vet_list(db: Session = Depends(get_db), cache: VetCache = Depends(get_vet_cache)):
    vets = cache.all_vets(VetRepository(db).find_all)
    return {"vetList": [_vet_payload(v) for v in vets]}
