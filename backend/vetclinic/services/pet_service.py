"""Module: pet_service."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, desc, select, update

from vetclinic.core.exceptions import NotFoundError, ValidationError
from vetclinic.db.models.owner import Owner
from vetclinic.db.models.pet import PET_GENDERS, Pet, PetType
from vetclinic.schemas.pet import PetPayload
from vetclinic.services.base import BaseService, missing_id, row_to_dict

logger = logging.getLogger(__name__)

PET_ID_KEYS = ("id", "type_id", "owner_id")
MUTABLE_FIELDS = ("name", "type_id", "breed", "date_of_birth", "gender", "owner_id", "notes")


def _check_gender(gender: str | None) -> None:
    if gender is not None and gender not in PET_GENDERS:
        raise ValidationError(f"gender must be one of: {', '.join(PET_GENDERS)}", field="gender")


class PetService(BaseService):
    def __init__(self, db, delete_missing_is_not_found: bool = False, lookup_requires_owner: bool = True):
        super().__init__(db)
        self.delete_missing_is_not_found = delete_missing_is_not_found
        self.lookup_requires_owner = lookup_requires_owner

    def list(self) -> list[dict[str, Any]]:
        stmt = (
            select(
                Pet.id,
                Pet.name,
                Pet.type_id,
                PetType.name.label("type_name"),
                Pet.breed,
                Pet.date_of_birth,
                Pet.gender,
                Pet.owner_id,
                Owner.first_name.label("owner_name"),
                Owner.email.label("owner_email"),
                Pet.created_at,
            )
            .select_from(Pet)
            .join(Owner, Owner.id == Pet.owner_id)
            .outerjoin(PetType, PetType.id == Pet.type_id)
            .order_by(desc(Pet.created_at), desc(Pet.id))
        )
        with self.store_errors("fetching pets"):
            rows = self.db.execute(stmt).mappings().all()
        return [row_to_dict(r, PET_ID_KEYS) for r in rows]

    def get_by_id(self, pet_id: str) -> dict[str, Any]:
        raw_id = str(pet_id)
        # ASCII only: "²" passes isdigit() but int() rejects it.
        if not (raw_id.isascii() and raw_id.isdigit()):
            raise ValidationError("Invalid pet ID", field="id")

        stmt = (
            select(
                *Pet.__table__.c,
                (Owner.first_name + " " + Owner.last_name).label("owner_name"),
                PetType.name.label("type_name"),
            )
            .select_from(Pet)
            .outerjoin(PetType, PetType.id == Pet.type_id)
            .where(Pet.id == int(raw_id))
        )
        if self.lookup_requires_owner:
            stmt = stmt.join(Owner, Owner.id == Pet.owner_id)
        else:
            stmt = stmt.outerjoin(Owner, Owner.id == Pet.owner_id)

        with self.store_errors("fetching pet"):
            row = self.db.execute(stmt).mappings().first()
        if not row:
            raise NotFoundError("Pet")
        return row_to_dict(row, PET_ID_KEYS)

    def create(self, payload: PetPayload) -> int:
        if not payload.name or missing_id(payload.type_id) or missing_id(payload.owner_id):
            raise ValidationError("Required fields: name, type_id, owner_id")
        _check_gender(payload.gender)

        values = payload.model_dump(include=set(MUTABLE_FIELDS))
        values["gender"] = payload.gender or "unknown"
        pet = Pet(**values)
        with self.store_errors("creating pet"):
            self.db.add(pet)
            self.db.flush()
            pet_id = pet.id
            self.db.commit()
        logger.info("Pet %s created for owner %s", pet_id, payload.owner_id)
        return pet_id

    def update(self, pet_id: int, payload: PetPayload) -> None:
        # Same full-overwrite contract as owners; concurrent writers race and
        # the statement committed last wins.
        _check_gender(payload.gender)
        values = {field: getattr(payload, field) for field in MUTABLE_FIELDS}
        values["gender"] = payload.gender or "unknown"
        with self.store_errors("updating pet"):
            self.db.execute(update(Pet).where(Pet.id == pet_id).values(**values))
            self.db.commit()

    def delete(self, pet_id: int) -> None:
        with self.store_errors("deleting pet"):
            removed = self.db.execute(delete(Pet).where(Pet.id == pet_id)).rowcount
            if removed == 0 and self.delete_missing_is_not_found:
                self.db.rollback()
                raise NotFoundError("Pet")
            self.db.commit()

    def list_types(self) -> list[dict[str, Any]]:
        with self.store_errors("fetching pet types"):
            rows = self.db.execute(select(PetType.id, PetType.name).order_by(PetType.id)).mappings().all()
        if not rows:
            logger.warning("No pet types found in the database")
            raise NotFoundError("Pet type", message="No pet types found.")
        return [row_to_dict(r, ("id",)) for r in rows]
