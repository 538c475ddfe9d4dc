# src/oopconcepts/bank_account.py
"""
Encapsulation: a bank account whose balance only changes through
validated deposits and withdrawals.
"""

import logging
from typing import Optional, Tuple

from .config import ExampleConfig
from .formatting import banner, format_currency


logger = logging.getLogger(__name__)


class BankAccount:
    """Bank account with private balance and transaction history.

    ``balance`` is read-only; the only way to change it is ``deposit`` or
    ``withdraw``, which validate the amount and report failure by returning
    ``False`` after printing the reason.
    """

    def __init__(self, account_number: str, account_holder: str,
                 initial_balance: float, config: Optional[ExampleConfig] = None):
        self.__account_number = account_number
        self.__account_holder = account_holder
        self.__balance = initial_balance
        self.__history = []
        self.__config = config or ExampleConfig()

        self.__record_transaction(
            f"Account opened with initial balance: {self.__money(initial_balance)}"
        )

    def __money(self, amount: float) -> str:
        return format_currency(amount, self.__config)

    def __record_transaction(self, description: str):
        self.__history.append(description)
        logger.info(f"{self.__account_number}: {description}")

    @property
    def account_number(self) -> str:
        return self.__account_number

    @property
    def account_holder(self) -> str:
        return self.__account_holder

    @property
    def balance(self) -> float:
        return self.__balance

    @property
    def transaction_history(self) -> Tuple[str, ...]:
        """Snapshot of the recorded transactions."""
        return tuple(self.__history)

    def deposit(self, amount: float) -> bool:
        if not amount > 0:
            print("Error: Deposit amount must be positive")
            return False
        self.__balance += amount
        self.__record_transaction(f"Deposited: {self.__money(amount)}")
        print(f"Deposit successful. New balance: {self.__money(self.__balance)}")
        return True

    def withdraw(self, amount: float) -> bool:
        if not amount > 0:
            print("Error: Withdrawal amount must be positive")
            return False
        if not amount <= self.__balance:
            print(f"Error: Insufficient funds. Available: {self.__money(self.__balance)}")
            return False
        self.__balance -= amount
        self.__record_transaction(f"Withdrew: {self.__money(amount)}")
        print(f"Withdrawal successful. New balance: {self.__money(self.__balance)}")
        return True

    def display_history(self):
        print()
        print(banner(f"Transaction History for {self.__account_holder}"))
        if not self.__history:
            print("No transactions")
            return
        for i, entry in enumerate(self.__history, start=1):
            print(f"{i}. {entry}")


def main(config: Optional[ExampleConfig] = None) -> int:
    config = config or ExampleConfig()
    account = BankAccount("ACC-12345", "Alice Smith", 1000.00, config)

    print(f"Account Holder: {account.account_holder}")
    print(f"Account Number: {account.account_number}")
    print(f"Initial Balance: {format_currency(account.balance, config)}")

    print("\n--- Transactions ---")
    account.deposit(500.00)
    account.withdraw(200.00)
    account.withdraw(2000.00)  # Insufficient funds
    account.deposit(300.00)

    account.display_history()

    print(f"\nFinal Balance: {format_currency(account.balance, config)}")

    # account.balance = -1000 raises AttributeError (read-only property)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
