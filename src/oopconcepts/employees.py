# src/oopconcepts/employees.py
"""
Inheritance: an abstract employee contract and concrete roles.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .config import ExampleConfig
from .formatting import banner, format_number


class Employee(ABC):
    """Contract for anyone on staff."""

    _salary: float = 0.0

    def __init__(self, name: str, config: Optional[ExampleConfig] = None):
        self._name = name
        self.config = config or ExampleConfig()

    @property
    def name(self) -> str:
        return self._name

    @property
    def salary(self) -> float:
        return self._salary

    @abstractmethod
    def work(self):
        """Print what the employee does all day."""

    @abstractmethod
    def report_salary(self):
        """Print the employee's compensation."""

    def _salary_text(self) -> str:
        return f"{self.config.currency_symbol}{format_number(self._salary)}"


class Engineer(Employee):
    _salary = 80000.0

    def work(self):
        print(f"{self._name} is writing code and debugging")

    def report_salary(self):
        print(f"{self._name}'s salary: {self._salary_text()}")


class Manager(Employee):
    _salary = 100000.0

    def work(self):
        print(f"{self._name} is managing the team")

    def report_salary(self):
        print(f"{self._name}'s salary: {self._salary_text()}")


class Designer(Employee):
    _salary = 75000.0

    def work(self):
        print(f"{self._name} is designing user interfaces")

    def report_salary(self):
        print(f"{self._name}'s salary: {self._salary_text()}")


def print_roster(company: List[Employee]):
    print(banner("Company Staff"))
    for employee in company:
        print(f"\n{employee.name}:")
        employee.work()
        employee.report_salary()


def print_work_day(company: List[Employee]):
    print()
    print(banner("Today's Work Day"))
    print("Everyone at work:")
    for employee in company:
        print("  - ", end="")
        employee.work()


def main(config: Optional[ExampleConfig] = None) -> int:
    company = [
        Engineer("Alice", config),
        Manager("Bob", config),
        Designer("Charlie", config),
        Engineer("David", config),
    ]
    print_roster(company)
    print_work_day(company)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
