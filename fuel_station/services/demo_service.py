from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from fuel_station.models.pump import FuelPump, RefuelReceipt
from fuel_station.models.vehicle import Vehicle
from fuel_station.services.common import vehicle_from_dict, pump_from_dict
from fuel_station.utils.constants import (
    SAMPLE_PUMPS,
    SAMPLE_TRANSACTIONS,
    SAMPLE_VEHICLES,
    SUMMARY_PLATE,
)
from fuel_station.utils.filters import fmt_litres

log = logging.getLogger(__name__)

BANNER = "<<< FUEL STATION MANAGEMENT SYSTEM DEMO >>>"
FOOTER = "<<< DEMO COMPLETE >>>"


class DemoService:
    """Scripted station demo: build sample vehicles and pumps, serve them in order."""

    @staticmethod
    def build_vehicles(records: Iterable[dict] = SAMPLE_VEHICLES) -> Dict[str, Vehicle]:
        """Vehicles keyed by license plate."""
        fleet: Dict[str, Vehicle] = {}
        for rec in records:
            v = vehicle_from_dict(rec)
            if v is None:
                continue
            fleet[v.license_plate] = v
        return fleet

    @staticmethod
    def build_pumps(records: Iterable[dict] = SAMPLE_PUMPS) -> Dict[int, FuelPump]:
        """Pumps keyed by pump ID."""
        pumps: Dict[int, FuelPump] = {}
        for rec in records:
            p = pump_from_dict(rec)
            if p is None:
                continue
            pumps[p.pump_id] = p
        return pumps

    @staticmethod
    def run(echo=print) -> List[RefuelReceipt]:
        """
        Run the three scripted transactions and print the closing summary.
        Returns the receipts in the order they were issued.
        """
        echo(BANNER)

        fleet = DemoService.build_vehicles()
        pumps = DemoService.build_pumps()
        log.info("Demo started with %d vehicles and %d pumps", len(fleet), len(pumps))

        receipts: List[RefuelReceipt] = []
        for pump_id, plate in SAMPLE_TRANSACTIONS:
            receipts.append(pumps[pump_id].start_refuel(fleet[plate], echo=echo))

        echo("")
        echo(FOOTER)

        summary = fleet[SUMMARY_PLATE]
        echo(f"Final check: {type(summary).__name__} {summary.license_plate} "
             f"has {fmt_litres(summary.current_fuel_level)} L of fuel.")
        log.info("Demo complete: %d transactions", len(receipts))
        return receipts
