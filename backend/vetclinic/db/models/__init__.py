# backend/vetclinic/db/models/__init__.py

from vetclinic.db.models.owner import Owner
from vetclinic.db.models.pet import Pet, PetType
from vetclinic.db.models.vaccination import Vaccination, VaccineType
