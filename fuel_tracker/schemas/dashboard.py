"""Schémas tableau de bord / Dashboard schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fuel_tracker.schemas.fuel_record import FuelRecord
from fuel_tracker.schemas.statistics import Statistics
from fuel_tracker.schemas.vehicle import Vehicle


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatCard(_CamelModel):
    title: str
    value: str
    subtitle: str | None = None


class RecentRecordRow(_CamelModel):
    record: FuelRecord
    date_display: str
    odometer_display: str
    fuel_display: str
    cost_display: str
    actual_payment_display: str
    image_count: int = 0


class DashboardResponse(_CamelModel):
    vehicles: list[Vehicle] = Field(default_factory=list)
    selected_vehicle_id: str | None = None
    vehicle: Vehicle | None = None
    statistics: Statistics
    cards: list[StatCard] = Field(default_factory=list)
    recent_records: list[RecentRecordRow] = Field(default_factory=list)
