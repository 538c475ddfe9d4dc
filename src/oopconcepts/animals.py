# src/oopconcepts/animals.py
"""
Polymorphism: one loop, many animals.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .config import ExampleConfig
from .formatting import banner


class Animal(ABC):
    """Contract for animals. ``make_sound`` has a default; the rest is required."""

    def make_sound(self):
        print("Generic animal sound")

    @abstractmethod
    def move(self):
        pass

    @abstractmethod
    def describe(self):
        pass


class Dog(Animal):

    def __init__(self, breed: str):
        self._breed = breed

    def make_sound(self):
        print("Woof! Woof!")

    def move(self):
        print("Running on four legs")

    def describe(self):
        print(f"I am a {self._breed} dog")


class Cat(Animal):

    def __init__(self, color: str):
        self._color = color

    def make_sound(self):
        print("Meow! Meow!")

    def move(self):
        print("Walking silently on four legs")

    def describe(self):
        print(f"I am a {self._color} cat")


class Bird(Animal):

    def __init__(self, species: str):
        self._species = species

    def make_sound(self):
        print("Tweet! Tweet!")

    def move(self):
        print("Flying in the sky")

    def describe(self):
        print(f"I am a {self._species}")


def interact(animals: List[Animal]):
    """Describe, hear and watch every animal in turn."""
    print(banner("Full Interaction"))
    for animal in animals:
        print()
        animal.describe()
        animal.make_sound()
        animal.move()


def main(config: Optional[ExampleConfig] = None) -> int:
    animals = [
        Dog("Golden Retriever"),
        Cat("Orange"),
        Bird("Parrot"),
        Dog("Husky"),
        Cat("Black"),
    ]

    print(banner("All Animals Making Sounds"))
    for animal in animals:
        animal.make_sound()

    print()
    print(banner("All Animals Moving"))
    for animal in animals:
        animal.move()

    print()
    print(banner("All Animals Describing"))
    for animal in animals:
        animal.describe()

    print()
    interact(animals)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
