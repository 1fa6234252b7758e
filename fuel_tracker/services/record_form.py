"""
Formulaire de saisie d'un plein / Fuel record entry form.
Garde prix au litre et prix remise coherents quand volume, cout ou paiement changent.
Keeps price per liter and discounted price consistent as amount, cost or payment change.
"""

from dataclasses import dataclass, field
from datetime import date

from pydantic import ValidationError

from fuel_tracker.schemas.fuel_record import FuelRecordCreate
from fuel_tracker.schemas.form import RecordFormState
from fuel_tracker.services.derived_fields import DerivedFieldCalculator


class FormValidationError(ValueError):
    """Saisie refusee a la frontiere du formulaire / Input rejected at the form boundary."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name


def _parse_float(value: str) -> float:
    return float(value.strip())


def _ratio(numerator: str, denominator: str) -> str | None:
    """Quotient formate a 2 decimales / Quotient formatted to 2 decimals."""
    try:
        divisor = _parse_float(denominator)
        result = _parse_float(numerator) / divisor
    except (ValueError, ZeroDivisionError):
        return None
    return f"{result:.2f}"


@dataclass
class FuelRecordForm:
    """Etat du formulaire, chaines brutes / Form state, raw strings."""

    vehicle_id: str = ""
    date: str = field(default_factory=lambda: date.today().isoformat())
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
    images: list[str] = field(default_factory=list)

    @classmethod
    def from_state(cls, state: RecordFormState) -> "FuelRecordForm":
        data = state.model_dump()
        if not data["date"]:
            data["date"] = date.today().isoformat()
        return cls(**data)

    def to_state(self) -> RecordFormState:
        return RecordFormState(**self.__dict__)

    # --- Chaine de recalcul / Recompute chain ---

    def set_fuel_amount(self, value: str) -> None:
        """Le volume alimente les deux prix / Amount feeds both prices."""
        self.fuel_amount = value
        if value and self.cost:
            ratio = _ratio(self.cost, value)
            if ratio is not None:
                self.price_per_liter = ratio
        if value and self.actual_payment:
            ratio = _ratio(self.actual_payment, value)
            if ratio is not None:
                self.discounted_price_per_liter = ratio

    def set_cost(self, value: str) -> None:
        self.cost = value
        if value and self.fuel_amount:
            ratio = _ratio(value, self.fuel_amount)
            if ratio is not None:
                self.price_per_liter = ratio

    def set_actual_payment(self, value: str) -> None:
        self.actual_payment = value
        if value and self.fuel_amount:
            ratio = _ratio(value, self.fuel_amount)
            if ratio is not None:
                self.discounted_price_per_liter = ratio

    def apply(self, field_name: str, value: str) -> None:
        """Appliquer un changement par nom camelCase / Apply a change by camelCase name."""
        setters = {
            "fuelAmount": self.set_fuel_amount,
            "cost": self.set_cost,
            "actualPayment": self.set_actual_payment,
        }
        if field_name not in setters:
            raise FormValidationError(field_name, "not a recomputed field")
        setters[field_name](value)

    # --- Economies / Savings ---

    @property
    def savings(self) -> float:
        if not (self.cost and self.actual_payment):
            return 0.0
        try:
            return _parse_float(self.cost) - _parse_float(self.actual_payment)
        except ValueError:
            return 0.0

    @property
    def savings_display(self) -> str:
        savings = self.savings
        return f"¥{savings:.2f}" if savings > 0 else "¥0.00"

    # --- Images ---

    def add_image(self, data_url: str) -> None:
        self.images.append(data_url)

    def remove_image(self, index: int) -> None:
        if not 0 <= index < len(self.images):
            raise IndexError(f"no image at index {index}")
        del self.images[index]

    # --- Soumission / Submission ---

    def _required_number(self, name: str, value: str, integer: bool = False) -> float | int:
        if not value.strip():
            raise FormValidationError(name, "is required")
        try:
            return int(float(value)) if integer else _parse_float(value)
        except (ValueError, OverflowError):
            raise FormValidationError(name, f"not a number: {value!r}") from None

    def _optional_number(self, name: str, value: str) -> float | None:
        if not value.strip():
            return None
        return self._required_number(name, value)

    def to_record_create(self) -> FuelRecordCreate:
        """Convertir en saisie validee / Convert to validated record input.

        Le prix au litre affiche (arrondi) sert de forcage s'il est renseigne.
        The displayed (rounded) price per liter is used as override when present.
        """
        fuel_amount = self._required_number("fuelAmount", self.fuel_amount)
        if not fuel_amount > 0:
            raise FormValidationError("fuelAmount", "must be greater than zero")
        cost = self._required_number("cost", self.cost)
        actual_payment = self._optional_number("actualPayment", self.actual_payment)
        override = self._optional_number("pricePerLiter", self.price_per_liter)
        odometer = self._required_number("odometer", self.odometer, integer=True)

        # Verifie le chemin de derivation avant construction / Check derivation path first
        DerivedFieldCalculator.derive(fuel_amount, cost, actual_payment, override)

        try:
            return FuelRecordCreate(
                vehicle_id=self.vehicle_id,
                date=self.date,
                odometer=odometer,
                fuel_amount=fuel_amount,
                cost=cost,
                actual_payment=actual_payment,
                price_per_liter=override,
                station=self.station,
                location=self.location,
                fuel_type=self.fuel_type,
                notes=self.notes or None,
                images=list(self.images),
            )
        except ValidationError as exc:
            first = exc.errors()[0]
            name = ".".join(str(part) for part in first.get("loc", ())) or "form"
            raise FormValidationError(name, first.get("msg", "invalid value")) from exc

    def reset_after_submit(self) -> None:
        """Vider le formulaire en gardant vehicule, station, lieu et carburant.
        Clear the form, keeping vehicle, station, location and fuel type."""
        self.date = date.today().isoformat()
        self.odometer = ""
        self.fuel_amount = ""
        self.cost = ""
        self.actual_payment = ""
        self.price_per_liter = ""
        self.discounted_price_per_liter = ""
        self.notes = ""
        self.images = []
