"""
Service des statistiques / Statistics aggregation service.
Reduit l'historique des pleins d'un vehicule en une synthese.
Reduces one vehicle's fuel history into an aggregate summary.
"""

from fuel_tracker.schemas.fuel_record import FuelRecord
from fuel_tracker.schemas.statistics import Statistics


class StatisticsService:
    """Fonctions pures sur une liste de pleins / Pure functions over a record list.

    L'appelant filtre par vehicule / The caller pre-filters by vehicle.
    """

    @staticmethod
    def sort_by_date(records: list[FuelRecord]) -> list[FuelRecord]:
        """Tri chronologique stable / Stable chronological sort."""
        return sorted(records, key=lambda record: record.date)

    @staticmethod
    def calculate_fuel_efficiency(records: list[FuelRecord]) -> float:
        """
        Distance pour 100 unites de carburant / Distance per 100 fuel units.
        Paires consecutives a delta positif seulement ; le carburant compte est celui
        du releve le plus recent. Only consecutive pairs with a positive delta count;
        the fuel attributed is the later reading's amount.
        """
        if len(records) < 2:
            return 0.0

        ordered = StatisticsService.sort_by_date(records)
        distance = 0
        fuel = 0.0
        for previous, current in zip(ordered, ordered[1:]):
            delta = current.odometer - previous.odometer
            if delta > 0:
                distance += delta
                fuel += current.fuel_amount

        return (distance / fuel) * 100 if fuel > 0 else 0.0

    @staticmethod
    def total_distance(records: list[FuelRecord]) -> int:
        """Ecart entre premier et dernier releve / First-to-last odometer delta."""
        if len(records) < 2:
            return 0
        ordered = StatisticsService.sort_by_date(records)
        return ordered[-1].odometer - ordered[0].odometer

    @staticmethod
    def calculate_statistics(records: list[FuelRecord]) -> Statistics:
        """Synthese complete / Full aggregate.

        Le cout au km utilise la distance aux extremites et le paiement reel,
        pas la distance filtree par paires de l'efficacite.
        Cost per km uses the endpoint distance and actual payments, not the
        pairwise-filtered distance used for efficiency.
        """
        if not records:
            return Statistics()

        total_cost = sum(record.cost for record in records)
        total_actual_payment = sum(record.actual_payment for record in records)
        total_fuel = sum(record.fuel_amount for record in records)
        total_distance = StatisticsService.total_distance(records)

        return Statistics(
            total_cost=total_cost,
            total_fuel=total_fuel,
            average_fuel_efficiency=StatisticsService.calculate_fuel_efficiency(records),
            average_cost_per_km=total_actual_payment / total_distance if total_distance > 0 else 0.0,
            total_distance=total_distance,
            record_count=len(records),
            total_savings=total_cost - total_actual_payment,
        )
