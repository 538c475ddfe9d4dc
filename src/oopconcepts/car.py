# src/oopconcepts/car.py
"""
Abstraction: a car whose attributes change only through its methods.
"""

from typing import Optional

from .config import ExampleConfig
from .formatting import banner


MAX_SPEED = 200  # km/h
SPEED_STEP = 10  # km/h per accelerate/decelerate


class Car:
    """Car with read-only attributes and engine/speed state."""

    def __init__(self, brand: str = "Unknown", model: str = "Unknown", year: int = 0):
        self._brand = brand
        self._model = model
        self._year = year
        self._running = False
        self._speed = 0

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def model(self) -> str:
        return self._model

    @property
    def year(self) -> int:
        return self._year

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def speed(self) -> int:
        return self._speed

    def start_engine(self):
        if not self._running:
            self._running = True
            print(f"{self._brand} {self._model} engine started")

    def stop_engine(self):
        """Stop the engine; the car also comes to a standstill."""
        if self._running:
            self._running = False
            self._speed = 0
            print(f"{self._brand} {self._model} engine stopped")

    def accelerate(self):
        if self._running and self._speed < MAX_SPEED:
            self._speed += SPEED_STEP
            print(f"Speed: {self._speed} km/h")

    def decelerate(self):
        if self._speed > 0:
            self._speed -= SPEED_STEP
            print(f"Speed: {self._speed} km/h")

    def display_info(self):
        print()
        print(banner("Car Information"))
        print(f"Brand: {self._brand}")
        print(f"Model: {self._model}")
        print(f"Year: {self._year}")
        print(f"Running: {'Yes' if self._running else 'No'}")
        print(f"Speed: {self._speed} km/h")


def main(config: Optional[ExampleConfig] = None) -> int:
    my_car = Car("Toyota", "Corolla", 2023)

    my_car.display_info()

    print("\n--- Driving ---")
    my_car.start_engine()
    my_car.accelerate()
    my_car.accelerate()
    my_car.decelerate()
    my_car.stop_engine()

    my_car.display_info()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
