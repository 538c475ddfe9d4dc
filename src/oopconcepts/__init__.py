# src/oopconcepts/__init__.py
"""
oopconcepts: object-oriented programming by example
Runnable abstraction, encapsulation, inheritance and polymorphism examples
built around one pattern: a capability contract, its variants and a generic driver.
"""

from .enums import Concept, PaymentMethod
from .config import ExampleConfig, ExampleInfo
from .contracts import Sealed, sealed, required_operations, implements
from .drivers import OperationResult, exercise
from .registry import ExampleRegistry

__version__ = "0.1.0"
__all__ = [
    "Concept",
    "PaymentMethod",
    "ExampleConfig",
    "ExampleInfo",
    "Sealed",
    "sealed",
    "required_operations",
    "implements",
    "OperationResult",
    "exercise",
    "ExampleRegistry",
]
