"""Vehicle attributes demo.

Each kind of vehicle is its own variant carrying only the fields relevant
to it; rendering dispatches on the variant with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rich.console import Console

from console_exercises.scanner import FieldScanner


@dataclass(frozen=True)
class Car:
    make: str
    model: str
    year: int
    doors: int
    fuel_type: str


@dataclass(frozen=True)
class Motorcycle:
    make: str
    model: str
    year: int
    wheels: int
    motorcycle_type: str


@dataclass(frozen=True)
class Truck:
    make: str
    model: str
    year: int
    cargo_capacity: float  # tons
    transmission: str


Vehicle = Union[Car, Motorcycle, Truck]


def kind_of(vehicle: Vehicle) -> str:
    return type(vehicle).__name__


def describe(vehicle: Vehicle) -> list[tuple[str, str]]:
    """Return the ``(label, value)`` lines displayed for ``vehicle``."""
    match vehicle:
        case Car(doors=doors, fuel_type=fuel_type):
            specific = [("Number of Doors", str(doors)), ("Fuel Type", fuel_type)]
        case Motorcycle(wheels=wheels, motorcycle_type=motorcycle_type):
            specific = [("Number of Wheels", str(wheels)), ("Motorcycle Type", motorcycle_type)]
        case Truck(cargo_capacity=capacity, transmission=transmission):
            specific = [("Cargo Capacity", f"{capacity} tons"), ("Transmission Type", transmission)]
        case _:
            raise TypeError(f"Unsupported vehicle: {vehicle!r}")
    return [
        ("Make", vehicle.make),
        ("Model", vehicle.model),
        ("Year of Manufacture", str(vehicle.year)),
        *specific,
    ]


def _read_common(scanner: FieldScanner) -> tuple[str, str, int]:
    make = scanner.read_text("Make: ")
    model = scanner.read_text("Model: ")
    year = scanner.read_int("Year of Manufacture: ", minimum=0)
    return make, model, year


def read_car(scanner: FieldScanner) -> Car:
    make, model, year = _read_common(scanner)
    doors = scanner.read_int("Number of Doors: ", minimum=1)
    fuel_type = scanner.read_text("Fuel Type (petrol/diesel/electric): ")
    return Car(make, model, year, doors, fuel_type)


def read_motorcycle(scanner: FieldScanner) -> Motorcycle:
    make, model, year = _read_common(scanner)
    wheels = scanner.read_int("Number of Wheels: ", minimum=1)
    motorcycle_type = scanner.read_text("Motorcycle Type (sport/cruiser/off-road): ")
    return Motorcycle(make, model, year, wheels, motorcycle_type)


def read_truck(scanner: FieldScanner) -> Truck:
    make, model, year = _read_common(scanner)
    cargo_capacity = scanner.read_float("Cargo Capacity (tons): ", minimum=0.0)
    transmission = scanner.read_text("Transmission Type (manual/automatic): ")
    return Truck(make, model, year, cargo_capacity, transmission)


def print_vehicle(vehicle: Vehicle, console: Console) -> None:
    console.print()
    console.print(f"{kind_of(vehicle)}:", style="bold")
    for label, value in describe(vehicle):
        console.print(f"{label}: {value}", markup=False)


def run_vehicle_demo(scanner: FieldScanner, console: Console) -> list[Vehicle]:
    """Collect one vehicle of each kind, then print their details."""
    vehicles: list[Vehicle] = []
    for kind, reader in (("Car", read_car), ("Motorcycle", read_motorcycle), ("Truck", read_truck)):
        console.print(f"Enter {kind} Details:", style="bold")
        vehicles.append(reader(scanner))

    console.print()
    console.print("Vehicle Details:", style="bold")
    for vehicle in vehicles:
        print_vehicle(vehicle, console)
    return vehicles
