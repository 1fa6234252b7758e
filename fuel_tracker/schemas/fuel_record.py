"""Schémas plein de carburant / Fuel record schemas."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FuelRecordBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    vehicle_id: str = Field(min_length=1)
    date: dt.date
    odometer: int = Field(ge=0)
    fuel_amount: float = Field(gt=0, allow_inf_nan=False)
    cost: float = Field(ge=0, allow_inf_nan=False)
    station: str = Field(min_length=1, max_length=100)
    location: str = ""
    fuel_type: str = Field(min_length=1, max_length=100)  # nom d'option, pas un id / option name, not an id
    notes: str | None = None
    images: list[str] = Field(default_factory=list)


class FuelRecordCreate(FuelRecordBase):
    """Saisie brute / Raw user input.

    price_per_liter est un forcage optionnel ; sinon derive de cost / fuel_amount.
    price_per_liter is an optional override; otherwise derived from cost / fuel_amount.
    """
    actual_payment: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    price_per_liter: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class FuelRecord(FuelRecordBase):
    """Plein persiste avec champs derives / Persisted record with derived fields."""
    id: str
    actual_payment: float
    price_per_liter: float
    discounted_price_per_liter: float
    created_at: str
