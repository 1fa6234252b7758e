"""
Service des champs derives / Derived field calculation service.
Prix au litre, prix remise et economies a partir de la saisie d'un plein.
Price per liter, discounted price and savings from one record's raw input.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DerivedFields:
    price_per_liter: float
    discounted_price_per_liter: float
    actual_payment: float
    savings: float | None


class DerivedFieldCalculator:
    """Calcul des champs derives d'un plein / Fuel record derived fields."""

    @staticmethod
    def _check_fuel_amount(fuel_amount: float) -> None:
        if not fuel_amount > 0:
            raise ValueError("fuel_amount must be greater than zero")

    @staticmethod
    def price_per_liter(cost: float, fuel_amount: float, override: float | None = None) -> float:
        """Prix standard au litre / Standard price per liter.

        Le forcage saisi l'emporte / An explicit override wins.
        """
        if override is not None:
            return override
        DerivedFieldCalculator._check_fuel_amount(fuel_amount)
        return cost / fuel_amount

    @staticmethod
    def discounted_price_per_liter(
        fuel_amount: float,
        price_per_liter: float,
        actual_payment: float | None = None,
    ) -> float:
        """Prix paye au litre / Discounted price per liter."""
        if actual_payment is None:
            return price_per_liter
        DerivedFieldCalculator._check_fuel_amount(fuel_amount)
        return actual_payment / fuel_amount

    @staticmethod
    def savings(cost: float | None, actual_payment: float | None) -> float | None:
        """Economie brute, non bornee / Raw savings, not clamped."""
        if cost is None or actual_payment is None:
            return None
        return cost - actual_payment

    @staticmethod
    def display_savings(cost: float | None, actual_payment: float | None) -> float:
        """Economie affichee : jamais negative / Displayed savings: never negative."""
        raw = DerivedFieldCalculator.savings(cost, actual_payment)
        if raw is None or raw < 0:
            return 0.0
        return raw

    @staticmethod
    def derive(
        fuel_amount: float,
        cost: float,
        actual_payment: float | None = None,
        price_per_liter: float | None = None,
    ) -> DerivedFields:
        """
        Calculer tous les champs derives / Compute every derived field.
        Sans paiement reel, on retient le cout (economie nulle).
        Without an actual payment, the cost is used (zero savings).
        """
        DerivedFieldCalculator._check_fuel_amount(fuel_amount)
        ppl = DerivedFieldCalculator.price_per_liter(cost, fuel_amount, price_per_liter)
        discounted = DerivedFieldCalculator.discounted_price_per_liter(fuel_amount, ppl, actual_payment)
        paid = cost if actual_payment is None else actual_payment
        return DerivedFields(
            price_per_liter=ppl,
            discounted_price_per_liter=discounted,
            actual_payment=paid,
            savings=DerivedFieldCalculator.savings(cost, paid),
        )
