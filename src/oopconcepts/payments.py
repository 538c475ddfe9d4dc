# src/oopconcepts/payments.py
"""
Polymorphism: payment processors behind one checkout function.

``checkout_order`` and ``refund_order`` only use the ``PaymentProcessor``
contract, so a new processor works with them unchanged.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .config import ExampleConfig
from .enums import PaymentMethod
from .formatting import banner, format_currency


logger = logging.getLogger(__name__)


class PaymentProcessor(ABC):
    """Contract for anything that can take and return a payment."""

    def __init__(self, config: Optional[ExampleConfig] = None):
        self.config = config or ExampleConfig()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable processor name."""

    @abstractmethod
    def process(self, amount: float) -> bool:
        """Charge ``amount``; ``True`` on success."""

    @abstractmethod
    def refund(self, amount: float) -> bool:
        """Return ``amount`` to the payer; ``True`` on success."""

    def _money(self, amount: float) -> str:
        return format_currency(amount, self.config)

    def _check_amount(self, amount: float, action: str) -> bool:
        """Print an error and return False unless ``amount > 0`` (NaN fails)."""
        if not amount > 0:
            print(f"Error: {action} amount must be positive")
            logger.warning(f"{self.name} rejected {action.lower()} of {amount}")
            return False
        return True


class CreditCardProcessor(PaymentProcessor):

    @property
    def name(self) -> str:
        return "Credit Card Processor"

    def process(self, amount: float) -> bool:
        if not self._check_amount(amount, "Payment"):
            return False
        print(f"Processing {self._money(amount)} via credit card")
        print("  Connecting to payment gateway...")
        print("  Verifying card details...")
        print("  Transaction approved!")
        return True

    def refund(self, amount: float) -> bool:
        if not self._check_amount(amount, "Refund"):
            return False
        print(f"Refunding {self._money(amount)} to credit card")
        return True


class PayPalProcessor(PaymentProcessor):

    @property
    def name(self) -> str:
        return "PayPal Processor"

    def process(self, amount: float) -> bool:
        if not self._check_amount(amount, "Payment"):
            return False
        print(f"Processing {self._money(amount)} via PayPal")
        print("  Authenticating PayPal account...")
        print("  Transfer initiated...")
        print("  Transaction completed!")
        return True

    def refund(self, amount: float) -> bool:
        if not self._check_amount(amount, "Refund"):
            return False
        print(f"Refunding {self._money(amount)} to PayPal account")
        return True


class ApplePayProcessor(PaymentProcessor):

    @property
    def name(self) -> str:
        return "Apple Pay Processor"

    def process(self, amount: float) -> bool:
        if not self._check_amount(amount, "Payment"):
            return False
        print(f"Processing {self._money(amount)} via Apple Pay")
        print("  Reading device biometric...")
        print("  Sending secure payment token...")
        print("  Transaction authorized!")
        return True

    def refund(self, amount: float) -> bool:
        if not self._check_amount(amount, "Refund"):
            return False
        print(f"Refunding {self._money(amount)} via Apple Pay")
        return True


PROCESSORS: Dict[PaymentMethod, Type[PaymentProcessor]] = {
    PaymentMethod.CREDIT_CARD: CreditCardProcessor,
    PaymentMethod.PAYPAL: PayPalProcessor,
    PaymentMethod.APPLE_PAY: ApplePayProcessor,
}


def create_processor(choice: int, config: Optional[ExampleConfig] = None) -> PaymentProcessor:
    """Build the processor for a menu choice; unknown choices get a credit card."""
    try:
        processor_class = PROCESSORS[PaymentMethod(choice)]
    except ValueError:
        logger.info(f"Unknown payment choice {choice}, using credit card")
        processor_class = CreditCardProcessor
    return processor_class(config)


def _require_processor(processor):
    if not isinstance(processor, PaymentProcessor):
        raise TypeError(f"{type(processor).__name__} is not a PaymentProcessor")


def checkout_order(processor: PaymentProcessor, cart_total: float) -> bool:
    """Charge ``cart_total`` through any processor and report the outcome."""
    _require_processor(processor)
    print()
    print(banner("Checkout Order"))
    print(f"Using: {processor.name}")
    print(f"Total: {format_currency(cart_total, processor.config)}")
    print("\nProcessing payment...")

    if processor.process(cart_total):
        print("✓ Order completed successfully!")
        return True
    print("✗ Payment failed")
    return False


def refund_order(processor: PaymentProcessor, amount: float) -> bool:
    """Refund ``amount`` through any processor and report the outcome."""
    _require_processor(processor)
    print()
    print(banner("Refund Order"))
    print(f"Using: {processor.name}")

    if processor.refund(amount):
        print("✓ Refund issued")
        return True
    print("✗ Refund failed")
    return False


def main(config: Optional[ExampleConfig] = None) -> int:
    order_total = 99.99

    for processor_class in (CreditCardProcessor, PayPalProcessor, ApplePayProcessor):
        checkout_order(processor_class(config), order_total)

    print("\n")
    print(banner("Dynamic Processor Selection"))
    choice = PaymentMethod.PAYPAL
    processor = create_processor(choice, config)
    checkout_order(processor, order_total)
    refund_order(processor, order_total)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
