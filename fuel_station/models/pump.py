from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exceptions import InvalidPumpError
from ..utils.filters import fmt_cost, fmt_litres
from .vehicle import Vehicle

log = logging.getLogger(__name__)

SEPARATOR = "-------------------------------------------"


@dataclass(frozen=True)
class RefuelReceipt:
    """
    Outcome of one pump transaction. `requested` is what the vehicle asked for;
    `dispensed` is what actually left the pump (bounded by reserve).
    """
    pump_id: int
    license_plate: str
    vehicle_type: str
    level_before: float
    requested: float
    dispensed: float
    total_cost: float
    reserve_after: float
    level_after: float
    shortfall: bool = False  # reserve could not cover the request
    tank_full: bool = False  # vehicle refuel was clamped to capacity


class FuelPump:
    """
    A pump with a fixed unit price and a finite reserve.
    The reserve only changes through dispensing and never drops below zero.
    """

    def __init__(self, pump_id: int, price_per_litre: float, initial_reserve: float):
        if price_per_litre <= 0:
            raise InvalidPumpError(f"Error: price per litre must be positive, got {price_per_litre}")
        if initial_reserve < 0:
            raise InvalidPumpError(f"Error: initial reserve cannot be negative, got {initial_reserve}")
        self._pump_id = int(pump_id)
        self._price_per_litre = float(price_per_litre)
        self._fuel_reserve_in_litres = float(initial_reserve)

    @property
    def pump_id(self) -> int:
        return self._pump_id

    @property
    def price_per_litre(self) -> float:
        return self._price_per_litre

    @property
    def fuel_reserve_in_litres(self) -> float:
        return self._fuel_reserve_in_litres

    def start_refuel(self, vehicle: Vehicle, echo=print) -> RefuelReceipt:
        """
        Serve one vehicle: ask it how much it needs (polymorphic per kind),
        report the request, then dispense what the reserve allows.
        """
        echo("")
        echo(SEPARATOR)
        echo(f"Pump {self._pump_id} serving {vehicle.license_plate}")

        amount_needed = vehicle.calculate_refuel_amount()
        echo(f"Vehicle Type: {vehicle.vehicle_type()}")
        echo(f"Current Level: {fmt_litres(vehicle.current_fuel_level)} L. "
             f"Needs: {fmt_litres(amount_needed)} L.")

        return self._dispense_fuel(vehicle, amount_needed, echo)

    def _dispense_fuel(self, vehicle: Vehicle, amount: float, echo=print) -> RefuelReceipt:
        level_before = vehicle.current_fuel_level
        requested = amount
        amount = max(amount, 0.0)

        shortfall = amount > self._fuel_reserve_in_litres
        if shortfall:
            echo(f"ERROR: Not enough fuel! Only {fmt_litres(self._fuel_reserve_in_litres)} L left in pump.")
            log.info("Pump %d short: requested %.2f L, reserve %.2f L",
                     self._pump_id, amount, self._fuel_reserve_in_litres)
            amount = self._fuel_reserve_in_litres

        total_cost = amount * self._price_per_litre
        self._fuel_reserve_in_litres -= amount

        tank_full = vehicle.refuel(amount, echo=echo)

        echo(f"Dispensed {fmt_litres(amount)} L. Total Cost: {fmt_cost(total_cost)}")
        echo(f"Pump {self._pump_id} Reserve remaining: {fmt_litres(self._fuel_reserve_in_litres)} L")
        log.debug("Pump %d dispensed %.2f L to %s (reserve now %.2f L)",
                  self._pump_id, amount, vehicle.license_plate, self._fuel_reserve_in_litres)

        return RefuelReceipt(
            pump_id=self._pump_id,
            license_plate=vehicle.license_plate,
            vehicle_type=vehicle.vehicle_type(),
            level_before=level_before,
            requested=requested,
            dispensed=amount,
            total_cost=total_cost,
            reserve_after=self._fuel_reserve_in_litres,
            level_after=vehicle.current_fuel_level,
            shortfall=shortfall,
            tank_full=tank_full,
        )

    def __repr__(self) -> str:
        return (f"FuelPump({self._pump_id}, {self._price_per_litre:.2f}/L, "
                f"reserve={self._fuel_reserve_in_litres:.2f})")
