# src/oopconcepts/enums.py
"""
Enumeration types for the oopconcepts examples.
"""

from enum import Enum, IntEnum


class Concept(Enum):
    """Object-oriented concepts covered by the examples."""
    ABSTRACTION = "abstraction"
    ENCAPSULATION = "encapsulation"
    INHERITANCE = "inheritance"
    POLYMORPHISM = "polymorphism"


class PaymentMethod(IntEnum):
    """Menu choices for selecting a payment processor."""
    CREDIT_CARD = 1
    PAYPAL = 2
    APPLE_PAY = 3
