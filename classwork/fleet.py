"""Rental fleet: abstract Vehicle and its three variants.

Every variant is built with fixed defaults and overrides rental_cost() with
its own linear formula. Which variant gets priced is decided outside the
hierarchy, by the menu selector (see classwork.pricing.classify_selector).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from rich.console import Console

from classwork.models import RentalQuote
from classwork.pricing import VehicleKind, estimate_cost, tonnes
from classwork.render import render_quote


@dataclass
class Vehicle(ABC):
    """Base vehicle. Subclasses must provide their own rental_cost()."""

    make: str
    model: str
    year: int

    kind: ClassVar[VehicleKind]

    @abstractmethod
    def rental_cost(self, days: int) -> float:
        """Total cost for renting this vehicle for ``days`` days."""

    @property
    @abstractmethod
    def capacity(self) -> str:
        """Human-readable capacity attribute, for listings."""

    def quote(self, days: int, currency: str = "KES") -> RentalQuote:
        return RentalQuote(
            kind=self.kind, days=days, total=self.rental_cost(days), currency=currency
        )

    def calculate_rental_cost(
        self, days: int, console: Console, currency: str = "KES"
    ) -> None:
        """Print the rental cost report for ``days`` days."""
        render_quote(self.quote(days, currency), console)


@dataclass
class Car(Vehicle):
    make: str = "Toyota"
    model: str = "Corolla"
    year: int = 2020
    num_doors: int = 4

    kind: ClassVar[VehicleKind] = VehicleKind.CAR

    def rental_cost(self, days: int) -> float:
        # Door count scales the price
        return estimate_cost(self.kind, days, self.num_doors)

    @property
    def capacity(self) -> str:
        return f"{self.num_doors} doors"


@dataclass
class SUV(Vehicle):
    make: str = "Honda"
    model: str = "Pilot"
    year: int = 2022
    people_capacity: int = 7

    kind: ClassVar[VehicleKind] = VehicleKind.SUV

    def rental_cost(self, days: int) -> float:
        return estimate_cost(self.kind, days, self.people_capacity)

    @property
    def capacity(self) -> str:
        return f"{self.people_capacity} people"


@dataclass
class Truck(Vehicle):
    make: str = "Ford"
    model: str = "F-150"
    year: int = 2021
    cargo_capacity: float = 5000.0  # kilograms

    kind: ClassVar[VehicleKind] = VehicleKind.TRUCK

    def rental_cost(self, days: int) -> float:
        # Priced per tonne of cargo capacity
        return estimate_cost(self.kind, days, tonnes(self.cargo_capacity))

    @property
    def capacity(self) -> str:
        return f"{self.cargo_capacity:g} kg cargo"


_VARIANTS: dict[VehicleKind, type[Vehicle]] = {
    VehicleKind.CAR: Car,
    VehicleKind.SUV: SUV,
    VehicleKind.TRUCK: Truck,
}


def vehicle_for(kind: VehicleKind) -> Vehicle:
    """Build the default vehicle of the given kind."""
    return _VARIANTS[kind]()


def default_fleet() -> list[Vehicle]:
    """One default vehicle of every kind, in menu order."""
    return [vehicle_for(kind) for kind in VehicleKind]
