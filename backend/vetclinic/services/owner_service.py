"""Module: owner_service."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, desc, func, select, update

from vetclinic.core.exceptions import NotFoundError, ValidationError
from vetclinic.db.models.owner import Owner
from vetclinic.db.models.pet import Pet
from vetclinic.schemas.owner import OwnerPayload
from vetclinic.services.base import BaseService, row_to_dict

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "email")
MUTABLE_FIELDS = ("first_name", "last_name", "email", "telephone", "address", "city")


class OwnerService(BaseService):
    def list(self) -> list[dict[str, Any]]:
        pets_count = (
            select(func.count(Pet.id))
            .where(Pet.owner_id == Owner.id)
            .correlate(Owner)
            .scalar_subquery()
        )
        stmt = (
            select(
                *Owner.__table__.c,
                (Owner.first_name + " " + Owner.last_name).label("name"),
                pets_count.label("pets_count"),
            )
            .order_by(desc(Owner.created_at), desc(Owner.id))
        )
        with self.store_errors("fetching owners"):
            rows = self.db.execute(stmt).mappings().all()
        return [row_to_dict(r, ("id",)) for r in rows]

    def get_by_id(self, owner_id: int) -> dict[str, Any]:
        with self.store_errors("fetching owner"):
            row = self.db.execute(select(Owner.__table__).where(Owner.id == owner_id)).mappings().first()
        if not row:
            raise NotFoundError("Owner")
        return row_to_dict(row, ("id",))

    def list_pets(self, owner_id: int) -> list[dict[str, Any]]:
        # No owner existence check: an unknown owner simply has no pets.
        stmt = select(Pet.__table__).where(Pet.owner_id == owner_id).order_by(Pet.id)
        with self.store_errors("fetching owner pets"):
            rows = self.db.execute(stmt).mappings().all()
        return [row_to_dict(r, ("id", "type_id", "owner_id")) for r in rows]

    def create(self, payload: OwnerPayload) -> int:
        if any(not getattr(payload, field) for field in REQUIRED_FIELDS):
            raise ValidationError("Required fields: first_name, last_name, email")

        owner = Owner(**payload.model_dump(include=set(MUTABLE_FIELDS)))
        with self.store_errors("creating owner"):
            self.db.add(owner)
            self.db.flush()
            owner_id = owner.id
            self.db.commit()
        logger.info("Owner %s created", owner_id)
        return owner_id

    def update(self, owner_id: int, payload: OwnerPayload) -> None:
        # Full overwrite: fields missing from the body are written as NULL.
        # Updating an id that does not exist is not an error.
        values = {field: getattr(payload, field) for field in MUTABLE_FIELDS}
        with self.store_errors("updating owner"):
            self.db.execute(update(Owner).where(Owner.id == owner_id).values(**values))
            self.db.commit()

    def delete(self, owner_id: int) -> None:
        """
        Delete an owner together with their pets.

        Both statements share one transaction: if the owner row is missing or
        either statement fails, the pet delete is rolled back as well.
        """
        with self.store_errors("deleting owner"):
            pets_removed = self.db.execute(delete(Pet).where(Pet.owner_id == owner_id)).rowcount
            owner_removed = self.db.execute(delete(Owner).where(Owner.id == owner_id)).rowcount
            if owner_removed == 0:
                self.db.rollback()
                raise NotFoundError("Owner")
            self.db.commit()
        logger.info("Owner %s deleted with %d pet(s)", owner_id, pets_removed)
