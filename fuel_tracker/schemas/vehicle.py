"""Schémas Véhicule / Vehicle schemas."""

import enum
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class VehicleFuelType(str, enum.Enum):
    """Energie du vehicule / Vehicle fuel type tag."""
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


# Libelles affiches / Display labels
FUEL_TYPE_LABELS = {
    VehicleFuelType.GASOLINE: "汽油",
    VehicleFuelType.DIESEL: "柴油",
    VehicleFuelType.ELECTRIC: "电动",
    VehicleFuelType.HYBRID: "混合动力",
}


class VehicleBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1, max_length=100)
    brand: str = Field(min_length=1, max_length=50)
    model: str = Field(min_length=1, max_length=50)
    year: int = Field(default_factory=lambda: date.today().year)
    license_plate: str = Field(min_length=1, max_length=20)
    fuel_type: VehicleFuelType = VehicleFuelType.GASOLINE
    tank_capacity: float = Field(default=50, ge=1, le=200)

    @field_validator("license_plate")
    @classmethod
    def upper_plate(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("year")
    @classmethod
    def check_year(cls, value: int) -> int:
        """Annee entre 1900 et l'an prochain / Year between 1900 and next year."""
        latest = date.today().year + 1
        if not 1900 <= value <= latest:
            raise ValueError(f"year must be between 1900 and {latest}")
        return value


class VehicleCreate(VehicleBase):
    pass


class Vehicle(VehicleBase):
    """Vehicule persiste / Persisted vehicle."""
    id: str
    created_at: str
