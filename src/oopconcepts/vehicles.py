# src/oopconcepts/vehicles.py
"""
Inheritance: vehicles sharing a base class.

``start``/``stop`` are overridden per vehicle; ``print_info`` is sealed so
every vehicle reports itself the same way.
"""

from typing import Optional

from .config import ExampleConfig
from .contracts import Sealed, sealed
from .formatting import banner


class Vehicle(Sealed):
    """Base vehicle with a brand and a model year."""

    def __init__(self, brand: str, year: int):
        self._brand = brand
        self._year = year

    def start(self):
        print(f"{self._brand} vehicle starting...")

    def stop(self):
        print(f"{self._brand} vehicle stopping...")

    @sealed
    def print_info(self):
        print(f"Brand: {self._brand}, Year: {self._year}")


class Car(Vehicle):

    def __init__(self, brand: str, year: int, doors: int):
        super().__init__(brand, year)
        self._doors = doors

    def start(self):
        print(f"{self._brand} car with {self._doors} doors starting...")

    def stop(self):
        print(f"{self._brand} car is parking...")

    def open_trunk(self):
        print("Trunk opened")


class Motorcycle(Vehicle):

    def __init__(self, brand: str, year: int, has_sidecar: bool):
        super().__init__(brand, year)
        self._has_sidecar = has_sidecar

    @property
    def has_sidecar(self) -> bool:
        return self._has_sidecar

    def start(self):
        print(f"{self._brand} motorcycle engine roaring...")

    def stop(self):
        print(f"{self._brand} motorcycle stopped")

    def wheelie(self):
        print("Performing a wheelie!")


def start_and_report(vehicle: Vehicle):
    """Start any vehicle and print its info using only ``Vehicle`` methods."""
    vehicle.start()
    vehicle.print_info()


def main(config: Optional[ExampleConfig] = None) -> int:
    my_car = Car("Toyota", 2023, 4)
    my_bike = Motorcycle("Harley-Davidson", 2022, False)

    print(banner("Car Info"))
    my_car.print_info()
    my_car.start()
    my_car.stop()
    my_car.open_trunk()

    print()
    print(banner("Motorcycle Info"))
    my_bike.print_info()
    my_bike.start()
    my_bike.stop()
    my_bike.wheelie()

    print()
    print(banner("Using Base Class References"))
    for vehicle in (my_car, my_bike):
        start_and_report(vehicle)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
