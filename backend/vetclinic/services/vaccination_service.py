"""Module: vaccination_service."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Literal

from sqlalchemy import delete, desc, select, update

from vetclinic.core.exceptions import InternalError, NotFoundError, ValidationError
from vetclinic.db.models.vaccination import Vaccination
from vetclinic.schemas.vaccination import COLUMN_TO_FIELD, VaccinationPayload
from vetclinic.services.base import BaseService, format_date, missing_id, row_to_dict

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("pet_id", "administered_date", "vaccine_type_id")
MUTABLE_COLUMNS = (
    "pet_id",
    "vaccine_type_id",
    "administered_date",
    "administered_by",
    "temperature",
    "dose",
    "batch_number",
    "expiry_date",
    "notes",
)
DATE_FIELDS = ("date", "expiryDate")
TEXT_COLUMNS = ("administered_by", "temperature", "dose", "batch_number", "notes")

# Every query selects the columns already renamed to their API keys.
_API_COLUMNS = [Vaccination.__table__.c[col].label(field) for col, field in COLUMN_TO_FIELD.items()]


def _is_blank(col: str, value) -> bool:
    if col == "administered_date":
        return value is None
    return missing_id(value)


def to_api(row) -> dict[str, Any]:
    d = row_to_dict(row, ("id", "petId", "vaccineTypeId"))
    for key in DATE_FIELDS:
        d[key] = format_date(d.get(key))
    return d


class VaccinationService(BaseService):
    def __init__(self, db, update_mode: Literal["replace", "coalesce"] = "replace"):
        super().__init__(db)
        self.update_mode = update_mode

    def list(self) -> list[dict[str, Any]]:
        with self.store_errors("fetching vaccinations"):
            rows = self.db.execute(select(*_API_COLUMNS).order_by(desc(Vaccination.id))).mappings().all()
        logger.debug("Fetched %d vaccinations", len(rows))
        return [to_api(r) for r in rows]

    def get_by_id(self, vaccination_id: int) -> dict[str, Any]:
        with self.store_errors("fetching vaccination"):
            row = self.db.execute(select(*_API_COLUMNS).where(Vaccination.id == vaccination_id)).mappings().first()
        if not row:
            raise NotFoundError("Vaccination")
        return to_api(row)

    def create(self, payload: VaccinationPayload) -> dict[str, Any]:
        if any(_is_blank(col, getattr(payload, col)) for col in REQUIRED_COLUMNS):
            raise ValidationError("Pet ID, administered date, and vaccine type are required")

        values = {col: getattr(payload, col) for col in MUTABLE_COLUMNS}
        # A new record stores blank optional text as NULL.
        for col in TEXT_COLUMNS:
            if isinstance(values[col], str) and not values[col].strip():
                values[col] = None
        vaccination = Vaccination(**values)
        with self.store_errors("creating vaccination record"):
            self.db.add(vaccination)
            self.db.flush()
            vaccination_id = vaccination.id
            self.db.commit()
        logger.info("Vaccination %s created for pet %s", vaccination_id, payload.pet_id)
        return self.get_by_id(vaccination_id)

    def update(self, vaccination_id: int, payload: VaccinationPayload) -> dict[str, Any]:
        with self.store_errors("updating vaccination record"):
            existing = self.db.execute(
                select(Vaccination.__table__).where(Vaccination.id == vaccination_id)
            ).mappings().first()
        if not existing:
            raise NotFoundError("Vaccination")

        values = self._merge(existing, payload)
        values["updated_at"] = datetime.utcnow()
        with self.store_errors("updating vaccination record"):
            self.db.execute(update(Vaccination).where(Vaccination.id == vaccination_id).values(**values))
            self.db.commit()
        return self.get_by_id(vaccination_id)

    def _merge(self, existing, payload: VaccinationPayload) -> dict[str, Any]:
        if self.update_mode == "coalesce":
            # Legacy rule: any falsy value ("", 0, null) keeps the stored value.
            return {col: getattr(payload, col) or existing[col] for col in MUTABLE_COLUMNS}

        sent = payload.model_fields_set & set(MUTABLE_COLUMNS)
        values = {col: getattr(payload, col) for col in sent}
        cleared = [COLUMN_TO_FIELD[col] for col in REQUIRED_COLUMNS if col in values and _is_blank(col, values[col])]
        if cleared:
            raise ValidationError(f"Required fields cannot be cleared: {', '.join(cleared)}")
        return values

    def delete(self, vaccination_id: int) -> dict[str, Any]:
        with self.store_errors("deleting vaccination record"):
            found = self.db.execute(
                select(Vaccination.id).where(Vaccination.id == vaccination_id)
            ).scalar_one_or_none()
            if found is None:
                raise NotFoundError("Vaccination")

            removed = self.db.execute(delete(Vaccination).where(Vaccination.id == vaccination_id)).rowcount
            if removed == 0:
                # Someone else deleted it between the check and the delete.
                self.db.rollback()
                logger.error("Failed to delete vaccination %s", vaccination_id)
                raise InternalError("Failed to delete vaccination")
            self.db.commit()
        return {"message": "Vaccination deleted successfully", "id": str(vaccination_id)}
