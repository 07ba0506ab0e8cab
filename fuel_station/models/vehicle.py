import logging
import math
from abc import ABC, abstractmethod

from ..exceptions import InvalidVehicleError
from ..utils.constants import (
    CAR_FUEL_CAPACITY,
    CAR_FUEL_TYPE,
    TRUCK_FUEL_CAPACITY,
    TRUCK_REFUEL_INCREMENT,
)

log = logging.getLogger(__name__)


class Vehicle(ABC):
    """
    Base vehicle model. The plate and capacity are fixed at creation; the fuel
    level only changes through refuel() and always stays within [0, capacity].
    Subclasses decide how much fuel they ask for and how they describe themselves.
    """

    def __init__(self, license_plate: str, fuel_capacity: float, current_fuel_level: float):
        plate = (license_plate or "").strip()
        if not plate:
            raise InvalidVehicleError("Error: license plate is required")
        if fuel_capacity <= 0:
            raise InvalidVehicleError(f"Error: fuel capacity must be positive, got {fuel_capacity}")
        if not 0 <= current_fuel_level <= fuel_capacity:
            raise InvalidVehicleError(
                f"Error: fuel level {current_fuel_level} outside 0..{fuel_capacity} for '{plate}'"
            )
        self._license_plate = plate
        self._fuel_capacity = float(fuel_capacity)
        self._current_fuel_level = float(current_fuel_level)

    @property
    def license_plate(self) -> str:
        return self._license_plate

    @property
    def fuel_capacity(self) -> float:
        return self._fuel_capacity

    @property
    def current_fuel_level(self) -> float:
        return self._current_fuel_level

    def refuel(self, amount: float, echo=print) -> bool:
        """
        Add `amount` litres to the tank. Non-positive amounts are ignored.
        Overflow is clamped to capacity and reported; returns True in that case.
        """
        if amount <= 0:
            return False

        self._current_fuel_level += amount
        log.debug("%s refuelled by %.2f L", self._license_plate, amount)
        if self._current_fuel_level > self._fuel_capacity:
            log.info("%s overfilled by %.2f L; clamping to capacity",
                     self._license_plate, self._current_fuel_level - self._fuel_capacity)
            self._current_fuel_level = self._fuel_capacity
            echo("Tank is now full!")
            return True
        return False

    @abstractmethod
    def calculate_refuel_amount(self) -> float:
        """Litres this vehicle asks for, before any pump reserve limit."""

    @abstractmethod
    def vehicle_type(self) -> str:
        """Human-readable kind, including kind-specific details."""

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self._license_plate!r}, "
                f"{self._current_fuel_level:.2f}/{self._fuel_capacity:.2f})")


class Car(Vehicle):
    """
    Cars are topped off exactly.
    """
    fuel_type = CAR_FUEL_TYPE

    def __init__(self, license_plate: str, current_fuel_level: float):
        super().__init__(license_plate, CAR_FUEL_CAPACITY, current_fuel_level)

    def calculate_refuel_amount(self) -> float:
        return self.fuel_capacity - self.current_fuel_level

    def vehicle_type(self) -> str:
        return f"Car (Fuel: {self.fuel_type})"


class Truck(Vehicle):
    """
    Trucks are refuelled in bulk: the shortfall is rounded up to the next
    multiple of TRUCK_REFUEL_INCREMENT, so the request can exceed the tank.
    """

    def __init__(self, license_plate: str, current_fuel_level: float, is_diesel: bool):
        super().__init__(license_plate, TRUCK_FUEL_CAPACITY, current_fuel_level)
        self._is_diesel = bool(is_diesel)

    @property
    def is_diesel(self) -> bool:
        return self._is_diesel

    def calculate_refuel_amount(self) -> float:
        needed = self.fuel_capacity - self.current_fuel_level
        return math.ceil(needed / TRUCK_REFUEL_INCREMENT) * TRUCK_REFUEL_INCREMENT

    def vehicle_type(self) -> str:
        return f"Truck (Diesel: {'Yes' if self.is_diesel else 'No'})"
