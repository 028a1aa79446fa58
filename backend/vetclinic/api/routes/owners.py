"""Module: owners."""

from fastapi import APIRouter, Depends

from vetclinic.api.routes.deps import get_owner_service
from vetclinic.schemas.owner import OwnerCreated, OwnerPayload
from vetclinic.services.owner_service import OwnerService

router = APIRouter()


# Endpoint: handles HTTP request/response mapping for this route.
@router.get("", summary="List owners with pet counts")
def list_owners(service: OwnerService = Depends(get_owner_service)):
    return service.list()


@router.post("", status_code=201, response_model=OwnerCreated, summary="Create owner")
def create_owner(payload: OwnerPayload, service: OwnerService = Depends(get_owner_service)):
    owner_id = service.create(payload)
    return OwnerCreated(id=str(owner_id))


@router.get("/{owner_id}/pets", summary="List pets for owner")
def list_owner_pets(owner_id: int, service: OwnerService = Depends(get_owner_service)):
    return service.list_pets(owner_id)


@router.get("/{owner_id}", summary="Get owner detail")
def get_owner(owner_id: int, service: OwnerService = Depends(get_owner_service)):
    return service.get_by_id(owner_id)


@router.put("/{owner_id}", summary="Update owner")
def update_owner(owner_id: int, payload: OwnerPayload, service: OwnerService = Depends(get_owner_service)):
    service.update(owner_id, payload)
    return {"message": "Owner updated successfully"}


@router.delete("/{owner_id}", summary="Delete owner and their pets")
def delete_owner(owner_id: int, service: OwnerService = Depends(get_owner_service)):
    service.delete(owner_id)
    return {"message": "Owner deleted successfully"}
