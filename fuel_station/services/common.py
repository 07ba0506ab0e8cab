"""Shared service helpers and factories."""

from typing import Optional

from fuel_station.exceptions import UnknownVehicleTypeError
from fuel_station.models.pump import FuelPump
from fuel_station.models.vehicle import Vehicle, Car, Truck
from fuel_station.utils.constants import VehicleKind, ALLOWED_TYPES


def norm_type(value: Optional[str]) -> str:
    """Normalize vehicle type to lowercase; return '' if None."""
    return (value or "").strip().lower()


# -------- dict -> rich model mappers --------
def vehicle_from_dict(d: Optional[dict]) -> Optional[Vehicle]:
    """Map a vehicle record to a Car or Truck."""
    if not d:
        return None
    vtype = norm_type(d.get("type"))
    if vtype not in ALLOWED_TYPES:
        raise UnknownVehicleTypeError(f"Error: vehicle type '{d.get('type')}' is not supported")

    plate = d.get("license_plate") or ""
    level = float(d.get("current_fuel_level") or 0.0)
    if vtype == VehicleKind.TRUCK:
        return Truck(plate, level, bool(d.get("is_diesel")))
    return Car(plate, level)


def pump_from_dict(d: Optional[dict]) -> Optional[FuelPump]:
    """Map a pump record to a FuelPump."""
    if not d:
        return None
    return FuelPump(
        int(d.get("pump_id") or 0),
        float(d.get("price_per_litre") or 0.0),
        float(d.get("initial_reserve") or 0.0),
    )
