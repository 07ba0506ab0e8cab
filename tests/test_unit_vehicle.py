"""
Unit tests for the vehicle models: refuel clamping, per-kind refuel policy,
and construction guards.
"""

import pytest

from fuel_station.exceptions import InvalidVehicleError
from fuel_station.models.vehicle import Vehicle, Car, Truck


def test_vehicle_is_abstract():
    with pytest.raises(TypeError):
        Vehicle("AAA-111", 10.0, 0.0)


def test_car_defaults():
    car = Car("ABC-123", 10.0)
    assert car.license_plate == "ABC-123"
    assert car.fuel_capacity == 50.0
    assert car.current_fuel_level == 10.0
    assert car.vehicle_type() == "Car (Fuel: Regular Unleaded)"


def test_truck_defaults_and_label():
    assert Truck("XYZ-987", 50.0, True).fuel_capacity == 200.0
    assert Truck("XYZ-987", 50.0, True).vehicle_type() == "Truck (Diesel: Yes)"
    assert Truck("XYZ-988", 50.0, False).vehicle_type() == "Truck (Diesel: No)"


@pytest.mark.parametrize("start, amount, expected", [
    (10.0, 15.0, 25.0),
    (10.0, 40.0, 50.0),
    (10.0, 100.0, 50.0),
])
def test_refuel_adds_then_clamps(start, amount, expected):
    car = Car("ABC-123", start)
    car.refuel(amount)
    assert car.current_fuel_level == expected


@pytest.mark.parametrize("amount", [0.0, -5.0])
def test_refuel_ignores_non_positive(amount, lines):
    car = Car("ABC-123", 10.0)
    assert car.refuel(amount, echo=lines.append) is False
    assert car.current_fuel_level == 10.0
    assert lines == []


def test_overfill_reports_tank_full(lines):
    truck = Truck("XYZ-987", 50.0, True)
    assert truck.refuel(200.0, echo=lines.append) is True
    assert truck.current_fuel_level == 200.0
    assert lines == ["Tank is now full!"]


def test_exact_fill_is_not_reported(lines):
    car = Car("ABC-123", 10.0)
    assert car.refuel(40.0, echo=lines.append) is False
    assert car.current_fuel_level == 50.0
    assert lines == []


def test_refuel_prints_to_stdout_by_default(capsys):
    Car("ABC-123", 45.0).refuel(10.0)
    assert capsys.readouterr().out == "Tank is now full!\n"


def test_car_refuel_amount_is_exact_top_off():
    assert Car("ABC-123", 10.0).calculate_refuel_amount() == 40.0
    assert Car("ABC-123", 12.3).calculate_refuel_amount() == 50.0 - 12.3
    assert Car("ABC-123", 50.0).calculate_refuel_amount() == 0.0


@pytest.mark.parametrize("level, expected", [
    (50.0, 200.0),   # needs 150 -> 200
    (100.0, 100.0),  # needs exactly 100
    (150.0, 100.0),  # needs 50 -> 100
    (199.5, 100.0),
    (0.0, 200.0),
    (200.0, 0.0),    # full tank asks for nothing
])
def test_truck_refuel_amount_rounds_up_to_hundreds(level, expected):
    amount = Truck("XYZ-987", level, True).calculate_refuel_amount()
    assert amount == expected
    assert amount % 100.0 == 0
    assert amount >= 200.0 - level


def test_calculate_refuel_amount_has_no_side_effects():
    truck = Truck("XYZ-987", 50.0, False)
    truck.calculate_refuel_amount()
    assert truck.current_fuel_level == 50.0


def test_fields_are_read_only():
    car = Car("ABC-123", 10.0)
    with pytest.raises(AttributeError):
        car.current_fuel_level = 50.0
    with pytest.raises(AttributeError):
        car.license_plate = "OTHER"


@pytest.mark.parametrize("plate, level", [
    ("", 10.0),
    ("   ", 10.0),
    ("ABC-123", -1.0),
    ("ABC-123", 50.1),
])
def test_invalid_car_rejected(plate, level):
    with pytest.raises(InvalidVehicleError):
        Car(plate, level)


def test_diesel_flag_is_read_only():
    truck = Truck("XYZ-987", 50.0, True)
    with pytest.raises(AttributeError):
        truck.is_diesel = False
    assert truck.is_diesel is True
