"""Routes Véhicules / Vehicle API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fuel_tracker.api.deps import get_store, not_found, require_session
from fuel_tracker.schemas.statistics import Statistics
from fuel_tracker.schemas.vehicle import Vehicle, VehicleCreate
from fuel_tracker.services.fuel_log_store import ConfirmationRequired, FuelLogStore, RecordNotFound

router = APIRouter(dependencies=[Depends(require_session)])


@router.get("/", response_model=list[Vehicle])
async def list_vehicles(store: FuelLogStore = Depends(get_store)):
    return await store.list_vehicles()


@router.post("/", response_model=Vehicle, status_code=201)
async def create_vehicle(data: VehicleCreate, store: FuelLogStore = Depends(get_store)):
    return await store.add_vehicle(data)


@router.get("/{vehicle_id}", response_model=Vehicle)
async def get_vehicle(vehicle_id: str, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.get_vehicle(vehicle_id)
    except RecordNotFound as exc:
        raise not_found(exc)


@router.put("/{vehicle_id}", response_model=Vehicle)
async def update_vehicle(vehicle_id: str, data: VehicleCreate, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.edit_vehicle(vehicle_id, data)
    except RecordNotFound as exc:
        raise not_found(exc)


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(
    vehicle_id: str,
    confirm: bool = Query(False, description="Confirmer la suppression des pleins / Confirm deleting all records"),
    store: FuelLogStore = Depends(get_store),
):
    """Suppression en cascade / Cascade delete (vehicle + records)."""
    try:
        await store.delete_vehicle(vehicle_id, confirm=confirm)
    except RecordNotFound as exc:
        raise not_found(exc)
    except ConfirmationRequired as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.get("/{vehicle_id}/statistics", response_model=Statistics)
async def vehicle_statistics(vehicle_id: str, store: FuelLogStore = Depends(get_store)):
    """Synthese du vehicule / Vehicle aggregate statistics."""
    try:
        await store.get_vehicle(vehicle_id)
    except RecordNotFound as exc:
        raise not_found(exc)
    return await store.statistics(vehicle_id)
