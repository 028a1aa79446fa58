"""Module: deps."""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from vetclinic.core.config import settings
from vetclinic.db.session import SessionLocal
from vetclinic.services.owner_service import OwnerService
from vetclinic.services.pet_service import PetService
from vetclinic.services.vaccination_service import VaccinationService


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Handlers receive their session at construction; none of them reach for a global one.
def get_owner_service(db: Session = Depends(get_db)) -> OwnerService:
    return OwnerService(db)


def get_pet_service(db: Session = Depends(get_db)) -> PetService:
    return PetService(
        db,
        delete_missing_is_not_found=settings.pet_delete_missing_is_not_found,
        lookup_requires_owner=settings.pet_lookup_requires_owner,
    )


def get_vaccination_service(db: Session = Depends(get_db)) -> VaccinationService:
    return VaccinationService(db, update_mode=settings.vaccination_update_mode)
