# fuel_station/utils/constants.py

"""
Global constants for vehicle kinds, capacities, and the demo's sample data.
These constants are imported by both models and services.
"""

# Litres
CAR_FUEL_CAPACITY = 50.0
TRUCK_FUEL_CAPACITY = 200.0
TRUCK_REFUEL_INCREMENT = 100.0

CAR_FUEL_TYPE = "Regular Unleaded"


class VehicleKind:
    CAR = "car"
    TRUCK = "truck"


ALLOWED_TYPES = {VehicleKind.CAR, VehicleKind.TRUCK}

# --- Demo data ---
SAMPLE_VEHICLES = [
    {"type": VehicleKind.CAR, "license_plate": "ABC-123", "current_fuel_level": 10.0},
    {"type": VehicleKind.TRUCK, "license_plate": "XYZ-987", "current_fuel_level": 50.0, "is_diesel": True},
]

SAMPLE_PUMPS = [
    {"pump_id": 1, "price_per_litre": 1.55, "initial_reserve": 500.0},
    {"pump_id": 2, "price_per_litre": 1.40, "initial_reserve": 50.0},
]

# (pump_id, license_plate), served in order
SAMPLE_TRANSACTIONS = [
    (1, "ABC-123"),
    (1, "XYZ-987"),
    (2, "ABC-123"),
]

# Vehicle reported in the closing summary line
SUMMARY_PLATE = "XYZ-987"
