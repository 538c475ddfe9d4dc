# examples/basic_example.py
"""
Basic example: plug a new payment processor into the existing checkout
"""

from oopconcepts.payments import (
    CreditCardProcessor,
    PaymentProcessor,
    checkout_order,
    refund_order,
)


class GiftCardProcessor(PaymentProcessor):
    """A processor the checkout code has never heard of."""

    def __init__(self, card_balance, config=None):
        super().__init__(config)
        self._card_balance = card_balance

    @property
    def name(self):
        return "Gift Card Processor"

    def process(self, amount):
        if not self._check_amount(amount, "Payment"):
            return False
        if amount > self._card_balance:
            print(f"  Gift card only holds {self._money(self._card_balance)}")
            return False
        self._card_balance -= amount
        print(f"Processing {self._money(amount)} via gift card")
        print(f"  Remaining card balance: {self._money(self._card_balance)}")
        return True

    def refund(self, amount):
        if not self._check_amount(amount, "Refund"):
            return False
        self._card_balance += amount
        print(f"Refunding {self._money(amount)} onto gift card")
        return True


def existing_processor_example():
    """The checkout driver with a built-in processor."""
    print("=== Built-in Processor ===")
    checkout_order(CreditCardProcessor(), 49.50)


def new_processor_example():
    """The same driver with a processor defined in this script."""
    print("\n=== New Processor ===")
    gift_card = GiftCardProcessor(card_balance=60.00)

    checkout_order(gift_card, 49.50)   # Succeeds
    checkout_order(gift_card, 49.50)   # Card balance too low
    refund_order(gift_card, 49.50)
    checkout_order(gift_card, 49.50)   # Succeeds again after the refund


def incomplete_processor_example():
    """A processor missing ``refund`` cannot be created."""
    print("\n=== Incomplete Processor ===")

    class HalfProcessor(PaymentProcessor):
        @property
        def name(self):
            return "Half Processor"

        def process(self, amount):
            return True

    try:
        HalfProcessor()
    except TypeError as e:
        print(f"✗ Rejected: {e}")


if __name__ == "__main__":
    print("oopconcepts Basic Examples")
    print("=" * 50)

    existing_processor_example()
    new_processor_example()
    incomplete_processor_example()

    print("\n" + "=" * 50)
    print("Examples completed!")
