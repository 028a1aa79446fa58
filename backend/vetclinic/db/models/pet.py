"""Module: pet."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vetclinic.db.base import Base

PET_GENDERS = ("male", "female", "unknown")


# Static species lookup (dog, cat, ...). The application never writes to it.
class PetType(Base):
    __tablename__ = "pet_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


# Core pet profile; owner deletion removes dependent pets explicitly.
class Pet(Base):
    __tablename__ = "pets"

    # Primary Key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic Info
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type_id: Mapped[int] = mapped_column(Integer, ForeignKey("pet_types.id"), nullable=False)
    breed: Mapped[str] = mapped_column(String(100), nullable=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False, default="unknown")
    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("owners.id"), nullable=False)

    # Optional Info
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=True)

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow
    )
