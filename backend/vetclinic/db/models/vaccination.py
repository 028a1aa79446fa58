"""Module: vaccination."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vetclinic.db.base import Base


class VaccineType(Base):
    __tablename__ = "vaccine_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class Vaccination(Base):
    __tablename__ = "vaccinations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    pet_id: Mapped[int] = mapped_column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False)
    vaccine_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("vaccine_types.id"), nullable=False)

    administered_date: Mapped[date] = mapped_column(Date, nullable=False)
    administered_by: Mapped[str] = mapped_column(String(100), nullable=True)
    # Free text as entered at the clinic ("38.5"), not a numeric column.
    temperature: Mapped[str] = mapped_column(String(20), nullable=True)
    dose: Mapped[str] = mapped_column(String(50), nullable=True)
    batch_number: Mapped[str] = mapped_column(String(100), nullable=True)
    expiry_date: Mapped[date] = mapped_column(Date, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )
