# src/oopconcepts/config.py
"""
Configuration and data structures for the oopconcepts examples.
"""

from dataclasses import dataclass

from .enums import Concept


@dataclass
class ExampleInfo:
    """Catalogue entry for one runnable example."""
    name: str
    concept: Concept
    module: str  # dotted path of the module providing main()
    description: str = ""


@dataclass
class ExampleConfig:
    """Console output configuration shared by the examples."""
    currency_symbol: str = "$"
    decimal_places: int = 2  # Digits after the point for money amounts

    # Debug/Verbose mode
    verbose: bool = False  # Enable INFO logging for the package
