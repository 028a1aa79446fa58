"""Module: api."""

# backend/vetclinic/api/api.py
from fastapi import APIRouter

# Operational routes.
from vetclinic.api.routes.health import router as health_router

# Clinic resources used by the front end pages.
from vetclinic.api.routes.owners import router as owners_router
from vetclinic.api.routes.pets import router as pets_router
from vetclinic.api.routes.vaccinations import router as vaccinations_router


api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, prefix="/health", tags=["health"])

# Register business/domain endpoints consumed by the application UI.
api_router.include_router(owners_router, prefix="/owners", tags=["owners"])
api_router.include_router(pets_router, prefix="/pets", tags=["pets"])
api_router.include_router(vaccinations_router, prefix="/vaccinations", tags=["vaccinations"])
