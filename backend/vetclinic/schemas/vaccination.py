"""
Module: vaccination schemas.

The API speaks camelCase (``petId``, ``date``, ``temp``) while the table uses
snake_case columns. Field names here are the column names; aliases are the
wire names. ``model_fields_set`` tells the handler which fields the caller
actually sent, so an explicit ``""`` can be told apart from an omitted field.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

# column name -> response key
COLUMN_TO_FIELD = {
    "id": "id",
    "pet_id": "petId",
    "vaccine_type_id": "vaccineTypeId",
    "administered_date": "date",
    "administered_by": "administeredBy",
    "temperature": "temp",
    "dose": "dose",
    "batch_number": "batchNumber",
    "expiry_date": "expiryDate",
    "notes": "notes",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


class VaccinationPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pet_id: int | None = Field(default=None, alias="petId")
    vaccine_type_id: int | None = Field(default=None, alias="vaccineTypeId")
    administered_date: date | None = Field(default=None, alias="date")
    administered_by: str | None = Field(default=None, alias="administeredBy")
    temperature: str | None = Field(default=None, alias="temp")
    dose: str | None = None
    batch_number: str | None = Field(default=None, alias="batchNumber")
    expiry_date: date | None = Field(default=None, alias="expiryDate")
    notes: str | None = None

    @field_validator("pet_id", "vaccine_type_id", "administered_date", "expiry_date", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    # Thermometer readings and doses often arrive as JSON numbers.
    @field_validator("temperature", "dose", mode="before")
    @classmethod
    def _number_to_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
