"""Module: vaccinations."""

from fastapi import APIRouter, Depends

from vetclinic.api.routes.deps import get_vaccination_service
from vetclinic.schemas.vaccination import VaccinationPayload
from vetclinic.services.vaccination_service import VaccinationService

router = APIRouter()


@router.get("", summary="List vaccinations")
def list_vaccinations(service: VaccinationService = Depends(get_vaccination_service)):
    return service.list()


@router.post("", status_code=201, summary="Record a vaccination")
def create_vaccination(payload: VaccinationPayload, service: VaccinationService = Depends(get_vaccination_service)):
    return service.create(payload)


@router.get("/{vaccination_id}", summary="Get vaccination detail")
def get_vaccination(vaccination_id: int, service: VaccinationService = Depends(get_vaccination_service)):
    return service.get_by_id(vaccination_id)


@router.put("/{vaccination_id}", summary="Update vaccination")
def update_vaccination(
    vaccination_id: int,
    payload: VaccinationPayload,
    service: VaccinationService = Depends(get_vaccination_service),
):
    return service.update(vaccination_id, payload)


@router.delete("/{vaccination_id}", summary="Delete vaccination")
def delete_vaccination(vaccination_id: int, service: VaccinationService = Depends(get_vaccination_service)):
    return service.delete(vaccination_id)
