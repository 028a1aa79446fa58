"""Module: owner schemas."""

from pydantic import BaseModel


# Every field is optional at the schema level so missing required fields
# surface as the handler's own 400 message rather than a generic schema error.
class OwnerPayload(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    telephone: str | None = None
    address: str | None = None
    city: str | None = None


class OwnerCreated(BaseModel):
    id: str
    message: str = "Owner created successfully"
