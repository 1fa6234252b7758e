"""Routes API / API routes."""

from fastapi import APIRouter

from fuel_tracker.api import auth, dashboard, fuel_records, options, vehicles

api_router = APIRouter(prefix="/api")

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
api_router.include_router(fuel_records.router, prefix="/fuel-records", tags=["fuel-records"])
api_router.include_router(options.fuel_types_router, prefix="/fuel-types", tags=["options"])
api_router.include_router(options.gas_stations_router, prefix="/gas-stations", tags=["options"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
