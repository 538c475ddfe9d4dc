# src/oopconcepts/drawing.py
"""
Polymorphism: method lookup through the class of each object.

Every call like ``shape.draw()`` is resolved by looking ``draw`` up on
``type(shape).__mro__``, the Python counterpart of a dispatch table.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import ExampleConfig
from .formatting import banner


class Shape(ABC):

    @abstractmethod
    def draw(self):
        pass

    @abstractmethod
    def rotate(self, degrees: int):
        pass


class Circle(Shape):

    def draw(self):
        print("Drawing circle")

    def rotate(self, degrees: int):
        print(f"Rotating circle {degrees} degrees")
        print("(Note: rotation has no visual effect on circle)")


class Square(Shape):

    def draw(self):
        print("Drawing square")

    def rotate(self, degrees: int):
        print(f"Rotating square {degrees} degrees")


class Triangle(Shape):

    def draw(self):
        print("Drawing triangle")

    def rotate(self, degrees: int):
        print(f"Rotating triangle {degrees} degrees")


def resolve(shape: Shape, operation: str) -> type:
    """Class whose implementation of ``operation`` a call on ``shape`` uses."""
    for klass in type(shape).__mro__:
        if operation in vars(klass):
            return klass
    raise AttributeError(f"{type(shape).__name__} has no operation {operation!r}")


def main(config: Optional[ExampleConfig] = None) -> int:
    shapes: List[Shape] = [Circle(), Square(), Triangle()]

    print(banner("Object Information"))
    for shape in shapes:
        name = type(shape).__name__
        print(f"{name} size: {sys.getsizeof(shape)} bytes")
        print(f"  draw -> {resolve(shape, 'draw').__name__}.draw")

    print("Drawing all shapes:")
    for shape in shapes:
        shape.draw()

    print("\nRotating all shapes by 45 degrees:")
    for shape in shapes:
        shape.rotate(45)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
