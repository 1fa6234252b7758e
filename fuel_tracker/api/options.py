"""Routes listes d'options / Option list routes (fuel types, gas stations).

Les pleins referencent les options par nom : supprimer ou renommer une option
ne modifie pas l'historique. Records reference options by name: deleting an
option leaves history untouched.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from fuel_tracker.api.deps import get_store, not_found, require_session
from fuel_tracker.schemas.option import Option, OptionCreate
from fuel_tracker.services.fuel_log_store import FuelLogStore, InvalidOption, RecordNotFound

fuel_types_router = APIRouter(dependencies=[Depends(require_session)])
gas_stations_router = APIRouter(dependencies=[Depends(require_session)])


@fuel_types_router.get("/", response_model=list[Option])
async def list_fuel_types(store: FuelLogStore = Depends(get_store)):
    return await store.list_fuel_types()


@fuel_types_router.post("/", response_model=Option, status_code=201)
async def create_fuel_type(data: OptionCreate, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.add_fuel_type(data.name)
    except InvalidOption as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@fuel_types_router.delete("/{option_id}", status_code=204)
async def delete_fuel_type(option_id: str, store: FuelLogStore = Depends(get_store)):
    try:
        await store.delete_fuel_type(option_id)
    except RecordNotFound as exc:
        raise not_found(exc)


@gas_stations_router.get("/", response_model=list[Option])
async def list_gas_stations(store: FuelLogStore = Depends(get_store)):
    return await store.list_gas_stations()


@gas_stations_router.post("/", response_model=Option, status_code=201)
async def create_gas_station(data: OptionCreate, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.add_gas_station(data.name)
    except InvalidOption as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@gas_stations_router.delete("/{option_id}", status_code=204)
async def delete_gas_station(option_id: str, store: FuelLogStore = Depends(get_store)):
    try:
        await store.delete_gas_station(option_id)
    except RecordNotFound as exc:
        raise not_found(exc)
