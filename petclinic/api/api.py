"""Module: api."""

from fastapi import APIRouter

from petclinic.api.routes.owners import router as owners_router
from petclinic.api.routes.pets import router as pets_router
from petclinic.api.routes.system import router as system_router
from petclinic.api.routes.vets import router as vets_router
from petclinic.api.routes.visits import router as visits_router

api_router = APIRouter()

api_router.include_router(system_router, tags=["system"])
# Owner routes first: /owners/new and /owners/find must win over /owners/{owner_id}.
api_router.include_router(owners_router, tags=["owners"])
api_router.include_router(pets_router, tags=["pets"])
api_router.include_router(visits_router, tags=["visits"])
api_router.include_router(vets_router, tags=["vets"])
