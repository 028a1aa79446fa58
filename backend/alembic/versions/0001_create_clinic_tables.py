"""create clinic tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

PET_TYPES = ["Dog", "Cat", "Bird", "Rabbit", "Reptile", "Other"]
VACCINE_TYPES = ["Rabies", "Distemper", "Parvovirus", "Leptospirosis", "Feline Leukemia", "Bordetella"]


def upgrade() -> None:
    pet_types = op.create_table(
        "pet_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )
    vaccine_types = op.create_table(
        "vaccine_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("telephone", sa.String(50)),
        sa.Column("address", sa.String(255)),
        sa.Column("city", sa.String(100)),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type_id", sa.Integer(), sa.ForeignKey("pet_types.id"), nullable=False),
        sa.Column("breed", sa.String(100)),
        sa.Column("gender", sa.String(10), nullable=False, server_default="unknown"),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
        sa.Column("date_of_birth", sa.Date()),
        sa.Column("notes", sa.Text()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("idx_pets_owner_id", "pets", ["owner_id"])
    op.create_table(
        "vaccinations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("pet_id", sa.Integer(), sa.ForeignKey("pets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("vaccine_type_id", sa.Integer(), sa.ForeignKey("vaccine_types.id"), nullable=False),
        sa.Column("administered_date", sa.Date(), nullable=False),
        sa.Column("administered_by", sa.String(100)),
        sa.Column("temperature", sa.String(20)),
        sa.Column("dose", sa.String(50)),
        sa.Column("batch_number", sa.String(100)),
        sa.Column("expiry_date", sa.Date()),
        sa.Column("notes", sa.Text()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.bulk_insert(pet_types, [{"name": name} for name in PET_TYPES])
    op.bulk_insert(vaccine_types, [{"name": name} for name in VACCINE_TYPES])


def downgrade() -> None:
    op.drop_table("vaccinations")
    op.drop_index("idx_pets_owner_id", table_name="pets")
    op.drop_table("pets")
    op.drop_table("owners")
    op.drop_table("vaccine_types")
    op.drop_table("pet_types")
