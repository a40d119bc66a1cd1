"""Module: deps."""

from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from petclinic.cache import VetCache
from petclinic.core.config import Settings


# Dependency provider: one DB session per request lifecycle.
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# Process-wide, shared by every request.
def get_vet_cache(request: Request) -> VetCache:
    return request.app.state.vet_cache
