"""Module: seed_data."""

import argparse
import logging
import random
from datetime import date, timedelta

from faker import Faker
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from vetclinic.core.logging import configure_logging
from vetclinic.db.init_db import init_db
from vetclinic.db.models.owner import Owner
from vetclinic.db.models.pet import PET_GENDERS, Pet, PetType
from vetclinic.db.models.vaccination import Vaccination, VaccineType
from vetclinic.db.session import SessionLocal

logger = logging.getLogger(__name__)

fake = Faker()

PET_TYPES = ["Dog", "Cat", "Bird", "Rabbit", "Reptile", "Other"]
VACCINE_TYPES = ["Rabies", "Distemper", "Parvovirus", "Leptospirosis", "Feline Leukemia", "Bordetella"]
BREEDS = {
    "Dog": ["Labrador", "Beagle", "Border Collie", "Kelpie", "Poodle"],
    "Cat": ["Siamese", "Ragdoll", "Maine Coon", "Domestic Shorthair"],
    "Bird": ["Budgerigar", "Cockatiel"],
    "Rabbit": ["Lop", "Rex"],
}
VETS = ["Dr. Smith", "Dr. Nguyen", "Dr. Patel", "Dr. Garcia"]


def seed_lookups(db: Session) -> None:
    # Lookups are only filled when empty; existing ids are never renumbered.
    if not db.execute(select(func.count(PetType.id))).scalar_one():
        db.add_all(PetType(name=name) for name in PET_TYPES)
    if not db.execute(select(func.count(VaccineType.id))).scalar_one():
        db.add_all(VaccineType(name=name) for name in VACCINE_TYPES)
    db.commit()


def _fake_vaccination(pet: Pet, vaccine_type_ids: list[int]) -> Vaccination:
    administered = fake.date_between(start_date="-2y", end_date="today")
    return Vaccination(
        pet_id=pet.id,
        vaccine_type_id=random.choice(vaccine_type_ids),
        administered_date=administered,
        administered_by=random.choice(VETS),
        temperature=f"{random.uniform(37.5, 39.5):.1f}",
        dose="1 ml",
        batch_number=fake.bothify("??-####").upper(),
        expiry_date=administered + timedelta(days=365),
        notes=random.choice([None, "No reaction observed", "Mild lethargy reported"]),
    )


def seed_demo_data(db: Session, owners: int = 20) -> None:
    pet_types = {t.name: t.id for t in db.execute(select(PetType)).scalars()}
    vaccine_type_ids = list(db.execute(select(VaccineType.id)).scalars())

    for _ in range(owners):
        owner = Owner(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            email=fake.unique.email(),
            telephone=fake.phone_number(),
            address=fake.street_address(),
            city=fake.city(),
        )
        db.add(owner)
        db.flush()

        for _ in range(random.randint(0, 3)):
            type_name = random.choice(list(pet_types))
            pet = Pet(
                name=fake.first_name(),
                type_id=pet_types[type_name],
                breed=random.choice(BREEDS.get(type_name, [None])),
                gender=random.choice(PET_GENDERS),
                owner_id=owner.id,
                date_of_birth=date.today() - timedelta(days=random.randint(60, 15 * 365)),
            )
            db.add(pet)
            db.flush()
            for _ in range(random.randint(0, 2)):
                db.add(_fake_vaccination(pet, vaccine_type_ids))

    db.commit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the clinic database with lookups and demo records.")
    parser.add_argument("--owners", type=int, default=20, help="number of demo owners to create")
    parser.add_argument("--lookups-only", action="store_true", help="only fill pet and vaccine types")
    args = parser.parse_args()

    configure_logging()
    init_db()
    db = SessionLocal()
    try:
        seed_lookups(db)
        if not args.lookups_only:
            seed_demo_data(db, owners=args.owners)
        logger.info("Seed complete")
    finally:
        db.close()


if __name__ == "__main__":
    main()
