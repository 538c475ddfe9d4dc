# tests/test_drivers.py
"""
Unit tests for the generic driver.
"""

import pytest

from oopconcepts import exercise, required_operations
from oopconcepts.animals import Animal, Bird, Cat, Dog
from oopconcepts.drawing import Circle as DrawCircle
from oopconcepts.drawing import Shape as Drawable
from oopconcepts.drawing import Square
from oopconcepts.employees import Designer, Employee, Engineer, Manager
from oopconcepts.payments import (
    ApplePayProcessor,
    CreditCardProcessor,
    PaymentProcessor,
    PayPalProcessor,
)
from oopconcepts.shapes import Circle, Rectangle, Shape, Triangle


class TestExercise:
    """Test driving N variants through M operations."""

    def test_all_operations_on_all_variants(self, capsys):
        """Test N x M invocations, variant-major."""
        animals = [Dog("Husky"), Cat("Black"), Bird("Parrot")]
        results = exercise(animals, Animal)

        operations = required_operations(Animal)
        assert len(results) == len(animals) * len(operations)
        assert [r.operation for r in results[:2]] == operations
        assert [r.variant for r in results[::2]] == animals

        out = capsys.readouterr().out
        assert "Running on four legs" in out
        assert "I am a Parrot" in out

    def test_results_carry_return_values(self):
        shapes = [Rectangle("r", 2.0, 3.0), Triangle("t", 3.0, 4.0, 5.0)]
        results = exercise(shapes, Shape)

        values = {(r.variant.name, r.operation): r.result for r in results}
        assert values[("r", "area")] == 6.0
        assert values[("r", "perimeter")] == 10.0
        assert values[("t", "area")] == pytest.approx(6.0)
        assert values[("t", "perimeter")] == 12.0

    def test_arguments_passed_to_operations(self, capsys):
        """Test that args reach every callable operation."""
        results = exercise([DrawCircle(), Square()], Drawable, 90, operations=["rotate"])

        assert len(results) == 2
        out = capsys.readouterr().out
        assert "Rotating circle 90 degrees" in out
        assert "Rotating square 90 degrees" in out

    def test_per_operation_arguments(self, capsys):
        """Test a contract whose operations take different arguments."""
        shapes = [DrawCircle(), Square()]
        results = exercise(shapes, Drawable, arguments={"rotate": (45,)})

        assert [(type(r.variant).__name__, r.operation) for r in results] == [
            ("Circle", "draw"), ("Circle", "rotate"),
            ("Square", "draw"), ("Square", "rotate"),
        ]
        assert capsys.readouterr().out.splitlines() == [
            "Drawing circle",
            "Rotating circle 45 degrees",
            "(Note: rotation has no visual effect on circle)",
            "Drawing square",
            "Rotating square 45 degrees",
        ]

    def test_arguments_override_shared_args(self, capsys):
        results = exercise([PayPalProcessor()], PaymentProcessor, 10.0,
                           arguments={"refund": (2.5,)})

        assert all(r.result for r in results)
        out = capsys.readouterr().out
        assert "Processing $10.00 via PayPal" in out
        assert "Refunding $2.50 to PayPal account" in out

    def test_arguments_for_unknown_operation(self):
        with pytest.raises(ValueError):
            exercise([Square()], Drawable, arguments={"scale": (2,)})

    def test_properties_are_read(self, capsys):
        processors = [CreditCardProcessor(), PayPalProcessor(), ApplePayProcessor()]
        results = exercise(processors, PaymentProcessor, 25.0)

        names = [r.result for r in results if r.operation == "name"]
        assert names == ["Credit Card Processor", "PayPal Processor", "Apple Pay Processor"]
        assert all(r.result is True for r in results if r.operation != "name")

    def test_employees(self, capsys):
        staff = [Engineer("Alice"), Manager("Bob"), Designer("Charlie")]
        results = exercise(staff, Employee)

        assert len(results) == 6
        out = capsys.readouterr().out
        assert "Bob is managing the team" in out
        assert "Charlie's salary: $75000" in out

    def test_non_variant_rejected(self):
        """Test that a value outside the contract raises TypeError."""
        with pytest.raises(TypeError, match="does not implement Shape"):
            exercise([Circle("c", 1.0), Dog("Husky")], Shape)

    def test_class_object_rejected(self):
        """Test that a variant class, not an instance, is refused up front."""
        with pytest.raises(TypeError, match="Circle does not implement Shape"):
            exercise([Circle], Shape)

    def test_nothing_invoked_when_rejected(self, capsys):
        """Test that the type check happens before any call."""
        with pytest.raises(TypeError):
            exercise([Dog("Husky"), "not an animal"], Animal)

        assert capsys.readouterr().out == ""

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValueError):
            exercise([Circle("c", 1.0)], Shape, operations=["volume"])

    def test_empty_operation_list(self, capsys):
        """Test that an explicit empty list runs nothing."""
        assert exercise([Dog("Husky")], Animal, operations=[]) == []
        assert capsys.readouterr().out == ""

    def test_empty_variants(self):
        assert exercise([], Shape) == []
