# src/oopconcepts/calculator.py
"""
Abstraction: a calculator exposing only the operations callers need.
"""

import logging
from typing import Optional

from .config import ExampleConfig
from .formatting import format_number


logger = logging.getLogger(__name__)


class Calculator:
    """Integer calculator that remembers its last result."""

    def __init__(self):
        self.__last_result = 0

    def __store_result(self, result):
        self.__last_result = result

    @property
    def last_result(self):
        """Result of the most recent successful operation."""
        return self.__last_result

    def add(self, a: int, b: int) -> int:
        result = a + b
        self.__store_result(result)
        return result

    def subtract(self, a: int, b: int) -> int:
        result = a - b
        self.__store_result(result)
        return result

    def multiply(self, a: int, b: int) -> int:
        result = a * b
        self.__store_result(result)
        return result

    def divide(self, a: int, b: int) -> float:
        """Divide ``a`` by ``b``; division by zero is logged and yields 0.0."""
        if b == 0:
            logger.error("Error: Division by zero")
            return 0.0
        result = a / b
        self.__store_result(result)
        return result


def main(config: Optional[ExampleConfig] = None) -> int:
    calc = Calculator()

    print(f"Add 10 + 5 = {calc.add(10, 5)}")
    print(f"Subtract 10 - 3 = {calc.subtract(10, 3)}")
    print(f"Multiply 4 * 7 = {calc.multiply(4, 7)}")
    print(f"Divide 20 / 4 = {format_number(calc.divide(20, 4))}")

    # calc.__store_result(100) and calc.__last_result raise AttributeError:
    # double-underscore names are mangled to _Calculator__...
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
