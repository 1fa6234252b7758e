"""Schémas formulaire de saisie / Entry form schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordFormState(BaseModel):
    """Etat brut du formulaire (chaines) / Raw form state (strings)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    vehicle_id: str = ""
    date: str = ""
    odometer: str = ""
    fuel_amount: str = ""
    cost: str = ""
    actual_payment: str = ""
    price_per_liter: str = ""
    discounted_price_per_liter: str = ""
    station: str = ""
    location: str = ""
    fuel_type: str = ""
    notes: str = ""
    images: list[str] = Field(default_factory=list)


class FormUpdateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    form: RecordFormState = Field(default_factory=RecordFormState)
    field: Literal["fuelAmount", "cost", "actualPayment"]
    value: str = ""


class FormUpdateResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    form: RecordFormState
    savings: float
    savings_display: str


class DeriveRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fuel_amount: float = Field(gt=0, allow_inf_nan=False)
    cost: float = Field(ge=0, allow_inf_nan=False)
    actual_payment: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    price_per_liter: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class DerivedFieldsRead(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    price_per_liter: float
    discounted_price_per_liter: float
    savings: float | None = None
    display_savings: float
