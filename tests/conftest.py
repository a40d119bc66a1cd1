"""Shared fixtures: an in-memory database, a session on it, and an app/client pair bound to it."""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from petclinic.core.config import Settings
from petclinic.db.init_db import init_db
from petclinic.db.session import build_engine, build_session_factory
from petclinic.domain.owners import Owner, PersonName, Pet, PetType
from petclinic.main import create_app
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.scripts.seed_data import seed_reference_data


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", secret_key="test-secret", log_level="WARNING", environment="test")


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    db = build_session_factory(engine)()
    yield db
    db.close()


@pytest.fixture
def pet_types(session) -> dict[str, PetType]:
    """Seeds pet types, specialties and the six reference vets."""
    return seed_reference_data(session)


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app, pet_types):
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def make_owner(session, pet_types):
    """Persist an owner directly through the repository."""

    def _make(last_name="Franklin", first_name="George", pets=()):
        owner = Owner(
            name=PersonName(first_name, last_name),
            address="110 W. Liberty St.",
            city="Madison",
            telephone="6085551023",
        )
        for name, type_name in pets:
            owner.add_pet(Pet(name=name, birth_date=date(2010, 9, 7), type=pet_types[type_name]))
        return OwnerRepository(session).save(owner)

    return _make
