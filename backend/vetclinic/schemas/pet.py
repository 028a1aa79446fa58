"""Module: pet schemas."""

from datetime import date

from pydantic import BaseModel, field_validator


class PetPayload(BaseModel):
    name: str | None = None
    type_id: int | None = None
    breed: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    owner_id: int | None = None
    notes: str | None = None

    # HTML forms post "" for an untouched select or date input.
    @field_validator("type_id", "owner_id", "date_of_birth", "gender", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PetCreated(BaseModel):
    id: str
    message: str = "Pet created successfully"
