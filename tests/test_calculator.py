# tests/test_calculator.py
"""
Unit tests for Calculator class.
"""

import logging

import pytest

from oopconcepts.calculator import Calculator
from oopconcepts import calculator


class TestCalculator:
    """Test calculator operations."""

    def test_arithmetic(self):
        calc = Calculator()

        assert calc.add(10, 5) == 15
        assert calc.subtract(10, 3) == 7
        assert calc.multiply(4, 7) == 28
        assert calc.divide(20, 4) == 5.0

    def test_last_result(self):
        calc = Calculator()
        assert calc.last_result == 0

        calc.multiply(6, 7)
        assert calc.last_result == 42

    def test_divide_by_zero(self, caplog):
        """Test that division by zero is logged and yields 0.0."""
        calc = Calculator()
        calc.add(1, 1)

        with caplog.at_level(logging.ERROR, logger="oopconcepts.calculator"):
            assert calc.divide(1, 0) == 0.0

        assert "Error: Division by zero" in caplog.text
        assert calc.last_result == 2

    def test_private_members_hidden(self):
        calc = Calculator()

        with pytest.raises(AttributeError):
            getattr(calc, "__store_result")
        with pytest.raises(AttributeError):
            calc.last_result = 100


def test_main_output(capsys):
    assert calculator.main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Add 10 + 5 = 15",
        "Subtract 10 - 3 = 7",
        "Multiply 4 * 7 = 28",
        "Divide 20 / 4 = 5",
    ]
