"""Tests du formulaire de saisie / Entry form tests."""

from datetime import date

import pytest

from fuel_tracker.services.record_form import FormValidationError, FuelRecordForm


def _filled_form() -> FuelRecordForm:
    form = FuelRecordForm(
        vehicle_id="v1",
        date="2024-03-01",
        odometer="12000",
        station="中石油",
        location="北京",
        fuel_type="95号汽油",
    )
    form.set_fuel_amount("40")
    form.set_cost("320")
    form.set_actual_payment("300")
    return form


def test_cost_change_recomputes_price():
    form = FuelRecordForm()
    form.set_fuel_amount("40")
    form.set_cost("300")
    assert form.price_per_liter == "7.50"
    assert form.discounted_price_per_liter == ""


def test_fuel_amount_change_recomputes_both_prices():
    form = _filled_form()
    assert form.price_per_liter == "8.00"
    assert form.discounted_price_per_liter == "7.50"
    form.set_fuel_amount("50")
    assert form.price_per_liter == "6.40"
    assert form.discounted_price_per_liter == "6.00"


def test_zero_fuel_amount_keeps_previous_prices():
    form = _filled_form()
    form.set_fuel_amount("0")
    assert form.price_per_liter == "8.00"


def test_savings_display():
    form = _filled_form()
    assert form.savings == 20
    assert form.savings_display == "¥20.00"
    form.set_actual_payment("350")
    assert form.savings == -30
    assert form.savings_display == "¥0.00"


def test_apply_by_field_name():
    form = FuelRecordForm()
    form.apply("cost", "100")
    form.apply("fuelAmount", "20")
    assert form.price_per_liter == "5.00"
    with pytest.raises(FormValidationError):
        form.apply("notes", "x")


def test_to_record_create_uses_displayed_price_as_override():
    form = _filled_form()
    form.set_cost("100")
    form.set_fuel_amount("30")
    data = form.to_record_create()
    assert data.price_per_liter == 3.33
    assert data.actual_payment == 300
    assert data.odometer == 12000


def test_to_record_create_without_actual_payment():
    form = _filled_form()
    form.actual_payment = ""
    assert form.to_record_create().actual_payment is None


def test_to_record_create_rejects_bad_numbers():
    form = _filled_form()
    form.fuel_amount = "abc"
    with pytest.raises(FormValidationError) as exc:
        form.to_record_create()
    assert exc.value.field_name == "fuelAmount"

    form = _filled_form()
    form.fuel_amount = "0"
    with pytest.raises(FormValidationError):
        form.to_record_create()

    form = _filled_form()
    form.odometer = ""
    with pytest.raises(FormValidationError):
        form.to_record_create()


def test_to_record_create_truncates_decimal_odometer():
    form = _filled_form()
    form.odometer = "12000.0"
    assert form.to_record_create().odometer == 12000

    form.odometer = "12000.7"
    assert form.to_record_create().odometer == 12000

    form.odometer = "inf"
    with pytest.raises(FormValidationError) as exc:
        form.to_record_create()
    assert exc.value.field_name == "odometer"


def test_images_add_and_remove():
    form = FuelRecordForm()
    form.add_image("data:image/png;base64,AAA")
    form.add_image("data:image/png;base64,BBB")
    form.remove_image(0)
    assert form.images == ["data:image/png;base64,BBB"]
    with pytest.raises(IndexError):
        form.remove_image(5)


def test_reset_after_submit_keeps_context():
    form = _filled_form()
    form.notes = "road trip"
    form.add_image("data:image/png;base64,AAA")
    form.reset_after_submit()
    assert form.vehicle_id == "v1"
    assert form.station == "中石油"
    assert form.location == "北京"
    assert form.fuel_type == "95号汽油"
    assert form.cost == form.fuel_amount == form.price_per_liter == ""
    assert form.images == []
    assert form.date == date.today().isoformat()
