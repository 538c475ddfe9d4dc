# src/oopconcepts/shapes.py
"""
Abstraction: an abstract shape with concrete geometric variants.
"""

import math
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import ExampleConfig
from .formatting import banner, format_number


class Shape(ABC):
    """Contract for anything with an area and a perimeter."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def area(self) -> float:
        """Area of the shape."""

    @abstractmethod
    def perimeter(self) -> float:
        """Length of the shape's boundary."""

    def display(self):
        """Print the shape's name; variants may override."""
        print(f"Shape: {self._name}")


class Circle(Shape):

    def __init__(self, name: str, radius: float):
        super().__init__(name)
        self._radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    def area(self) -> float:
        return math.pi * self._radius ** 2

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius


class Rectangle(Shape):

    def __init__(self, name: str, width: float, height: float):
        super().__init__(name)
        self._width = width
        self._height = height

    def area(self) -> float:
        return self._width * self._height

    def perimeter(self) -> float:
        return 2 * (self._width + self._height)


class Triangle(Shape):
    """Triangle given by its three side lengths."""

    def __init__(self, name: str, a: float, b: float, c: float):
        super().__init__(name)
        self._sides = (a, b, c)

    @property
    def sides(self):
        return self._sides

    def area(self) -> float:
        # Heron's formula
        a, b, c = self._sides
        s = (a + b + c) / 2.0
        product = s * (s - a) * (s - b) * (s - c)
        if product < 0:
            # Sides violate the triangle inequality
            return float("nan")
        return math.sqrt(product)

    def perimeter(self) -> float:
        return sum(self._sides)


def describe_shapes(shapes: List[Shape]):
    """Print every shape through the ``Shape`` contract only."""
    print(banner("Shape Information"))
    for shape in shapes:
        shape.display()
        print(f"Area: {format_number(shape.area())}")
        print(f"Perimeter: {format_number(shape.perimeter())}")
        print()


def main(config: Optional[ExampleConfig] = None) -> int:
    # Shape("Invalid") raises TypeError: abstract methods area, perimeter
    shapes = [
        Circle("My Circle", 5.0),
        Rectangle("My Rectangle", 4.0, 6.0),
        Triangle("My Triangle", 3.0, 4.0, 5.0),
    ]
    describe_shapes(shapes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
