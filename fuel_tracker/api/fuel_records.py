"""Routes pleins de carburant / Fuel record API routes."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from fuel_tracker.api.deps import get_store, not_found, require_session
from fuel_tracker.schemas.form import (
    DerivedFieldsRead,
    DeriveRequest,
    FormUpdateRequest,
    FormUpdateResponse,
)
from fuel_tracker.schemas.fuel_record import FuelRecord, FuelRecordCreate
from fuel_tracker.services.derived_fields import DerivedFieldCalculator
from fuel_tracker.services.fuel_log_store import FuelLogStore, RecordNotFound
from fuel_tracker.services.image_service import ImageService
from fuel_tracker.services.record_form import FormValidationError, FuelRecordForm

router = APIRouter(dependencies=[Depends(require_session)])


# ─── Aides de saisie / Entry helpers ───

@router.post("/form", response_model=FormUpdateResponse)
async def update_form(data: FormUpdateRequest):
    """Appliquer un changement de champ et recalculer / Apply a field change and recompute."""
    form = FuelRecordForm.from_state(data.form)
    try:
        form.apply(data.field, data.value)
    except FormValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return FormUpdateResponse(form=form.to_state(), savings=form.savings, savings_display=form.savings_display)


@router.post("/derive", response_model=DerivedFieldsRead)
async def derive_fields(data: DeriveRequest):
    """Apercu des champs derives / Derived fields preview."""
    derived = DerivedFieldCalculator.derive(
        data.fuel_amount, data.cost, data.actual_payment, data.price_per_liter
    )
    return DerivedFieldsRead(
        price_per_liter=derived.price_per_liter,
        discounted_price_per_liter=derived.discounted_price_per_liter,
        savings=DerivedFieldCalculator.savings(data.cost, data.actual_payment),
        display_savings=DerivedFieldCalculator.display_savings(data.cost, data.actual_payment),
    )


# ─── CRUD ───

@router.get("/", response_model=list[FuelRecord])
async def list_records(vehicle_id: str | None = None, store: FuelLogStore = Depends(get_store)):
    return await store.list_records(vehicle_id)


@router.get("/last", response_model=FuelRecord | None)
async def last_record(vehicle_id: str, store: FuelLogStore = Depends(get_store)):
    """Dernier plein du vehicule / Vehicle's latest record."""
    return await store.last_record(vehicle_id)


@router.post("/", response_model=FuelRecord, status_code=201)
async def create_record(data: FuelRecordCreate, store: FuelLogStore = Depends(get_store)):
    return await store.add_record(data)


@router.get("/{record_id}", response_model=FuelRecord)
async def get_record(record_id: str, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.get_record(record_id)
    except RecordNotFound as exc:
        raise not_found(exc)


@router.put("/{record_id}", response_model=FuelRecord)
async def update_record(record_id: str, data: FuelRecordCreate, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.edit_record(record_id, data)
    except RecordNotFound as exc:
        raise not_found(exc)


@router.delete("/{record_id}", status_code=204)
async def delete_record(record_id: str, store: FuelLogStore = Depends(get_store)):
    try:
        await store.delete_record(record_id)
    except RecordNotFound as exc:
        raise not_found(exc)


# ─── Images ───

@router.post("/{record_id}/images", response_model=FuelRecord)
async def upload_images(
    record_id: str,
    files: list[UploadFile] = File(...),
    store: FuelLogStore = Depends(get_store),
):
    """Joindre des photos (data URL) / Attach photos (data URLs)."""
    try:
        await store.get_record(record_id)
    except RecordNotFound as exc:
        raise not_found(exc)
    images = await ImageService.ingest(files)
    return await store.add_record_images(record_id, images)


@router.delete("/{record_id}/images/{index}", response_model=FuelRecord)
async def delete_image(record_id: str, index: int, store: FuelLogStore = Depends(get_store)):
    try:
        return await store.remove_record_image(record_id, index)
    except RecordNotFound as exc:
        raise not_found(exc)
