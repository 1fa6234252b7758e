"""Schéma statistiques / Statistics schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Statistics(BaseModel):
    """Synthese d'un vehicule / Vehicle-level aggregate."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_cost: float = 0
    total_fuel: float = 0
    average_fuel_efficiency: float = 0
    average_cost_per_km: float = 0
    total_distance: int = 0
    record_count: int = 0
    total_savings: float = 0
