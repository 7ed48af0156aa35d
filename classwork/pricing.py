"""Vehicle classification and rental cost estimation for the fleet model.

Maps the interactive menu selector to a vehicle kind and computes rental
cost from per-day rates, a day count and the vehicle's capacity factor.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class VehicleKind(str, Enum):
    """Rentable vehicle kinds."""

    CAR = "car"
    SUV = "suv"
    TRUCK = "truck"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[VehicleKind, str] = {
    VehicleKind.CAR: "Car",
    VehicleKind.SUV: "SUV",
    VehicleKind.TRUCK: "Truck",
}

# Menu numbers shown by the fleet command
SELECTORS: dict[int, VehicleKind] = {
    1: VehicleKind.CAR,
    2: VehicleKind.SUV,
    3: VehicleKind.TRUCK,
}


def classify_selector(selector: int) -> Optional[VehicleKind]:
    """Classify a menu selector into a vehicle kind.

    Args:
        selector: Number typed at the menu (1=Car, 2=SUV, 3=Truck).

    Returns:
        VehicleKind, or None for anything outside the menu.
    """
    return SELECTORS.get(selector)


def selector_for(kind: VehicleKind) -> int:
    """Reverse lookup of the menu number for a kind."""
    for number, k in SELECTORS.items():
        if k is kind:
            return number
    raise KeyError(kind)


# Cost per day in the agency's currency
_RATES: dict[VehicleKind, float] = {
    VehicleKind.CAR: 20.0,
    VehicleKind.SUV: 30.0,
    VehicleKind.TRUCK: 50.0,
}

_KG_PER_TONNE = 1000


def daily_rate(kind: VehicleKind) -> float:
    return _RATES[kind]


def estimate_cost(kind: VehicleKind, days: int, factor: float) -> float:
    """Estimate the total rental cost for a vehicle kind.

    Days are not validated: zero days cost nothing and negative days give a
    negative total.

    Args:
        kind: Vehicle kind for rate lookup.
        days: Rental length in days.
        factor: Capacity multiplier (doors, seats, or tonnes of cargo).

    Returns:
        Total cost in the agency's currency.
    """
    return _RATES[kind] * days * factor


def tonnes(kilograms: float) -> float:
    """Convert a cargo weight in kilograms to tonnes."""
    return kilograms / _KG_PER_TONNE
