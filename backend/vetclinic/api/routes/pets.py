"""Module: pets."""

from fastapi import APIRouter, Depends

from vetclinic.api.routes.deps import get_pet_service
from vetclinic.schemas.pet import PetCreated, PetPayload
from vetclinic.services.pet_service import PetService

router = APIRouter()


# -------------------------
# Endpoints
# -------------------------

@router.get("", summary="List pets (with owner info)")
def list_pets(service: PetService = Depends(get_pet_service)):
    return service.list()


@router.post("", status_code=201, response_model=PetCreated, summary="Create pet for an owner")
def create_pet(payload: PetPayload, service: PetService = Depends(get_pet_service)):
    pet_id = service.create(payload)
    return PetCreated(id=str(pet_id))


# Declared before /{pet_id} so "pet-types" is not captured as an id.
@router.get("/pet-types", summary="List pet types")
def list_pet_types(service: PetService = Depends(get_pet_service)):
    return service.list_types()


@router.get("/{pet_id}", summary="Get pet detail")
def get_pet(pet_id: str, service: PetService = Depends(get_pet_service)):
    return service.get_by_id(pet_id)


@router.put("/{pet_id}", summary="Update pet details")
def update_pet(pet_id: int, payload: PetPayload, service: PetService = Depends(get_pet_service)):
    service.update(pet_id, payload)
    return {"message": "Pet updated successfully"}


@router.delete("/{pet_id}", summary="Delete pet")
def delete_pet(pet_id: int, service: PetService = Depends(get_pet_service)):
    service.delete(pet_id)
    return {"message": "Pet deleted successfully"}
