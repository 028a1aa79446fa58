"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database. ``StaticPool`` keeps a
single connection alive so the schema survives across sessions, and the
API's ``get_db`` dependency is overridden to hand out sessions bound to it.
"""

import os
from datetime import date

# Settings are read at import time, so the environment must be ready first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vetclinic.api.routes.deps import get_db
from vetclinic.db.base import Base
from vetclinic.db.models.owner import Owner
from vetclinic.db.models.pet import Pet, PetType
from vetclinic.db.models.vaccination import VaccineType
from vetclinic.main import app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def lookups(db_session):
    """Pet and vaccine types with ids 1..3."""
    db_session.add_all([PetType(name="Dog"), PetType(name="Cat"), PetType(name="Bird")])
    db_session.add_all([VaccineType(name="Rabies"), VaccineType(name="Distemper"), VaccineType(name="Parvovirus")])
    db_session.commit()
    return {"dog": 1, "cat": 2, "bird": 3}


@pytest.fixture
def owner_with_pets(db_session, lookups):
    owner = Owner(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        telephone="0400000000",
        address="1 Analytical St",
        city="London",
    )
    db_session.add(owner)
    db_session.flush()
    pets = [
        Pet(name="Rex", type_id=lookups["dog"], breed="Kelpie", gender="male", owner_id=owner.id,
            date_of_birth=date(2020, 5, 1)),
        Pet(name="Tom", type_id=lookups["cat"], gender="unknown", owner_id=owner.id),
    ]
    db_session.add_all(pets)
    db_session.commit()
    return {"owner_id": owner.id, "pet_ids": [p.id for p in pets]}
