# src/oopconcepts/formatting.py
"""
Console formatting helpers shared by the examples.
"""

from typing import Optional

from .config import ExampleConfig


def format_currency(amount: float, config: Optional[ExampleConfig] = None) -> str:
    """Format a money amount, e.g. ``$99.99``."""
    config = config or ExampleConfig()
    return f"{config.currency_symbol}{amount:.{config.decimal_places}f}"


def format_number(value: float) -> str:
    """Format a plain number with six significant digits (``78.5398``, ``80000``)."""
    return f"{value:g}"


def banner(title: str) -> str:
    """Section heading used by the console examples."""
    return f"=== {title} ==="
