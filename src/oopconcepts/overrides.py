# src/oopconcepts/overrides.py
"""
Inheritance: overridable, required and sealed methods across three levels.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .config import ExampleConfig
from .contracts import Sealed, sealed
from .formatting import banner


class BaseClass(Sealed, ABC):

    def method1(self):
        print("BaseClass.method1")

    @abstractmethod
    def method2(self):
        """Every concrete subclass must implement this."""

    @sealed
    def non_virtual_method(self):
        print("BaseClass.non_virtual_method (sealed)")


class DerivedClass(BaseClass):

    def method1(self):
        print("DerivedClass.method1 (overridden)")

    def method2(self):
        print("DerivedClass.method2 (implemented)")


class FurtherDerived(DerivedClass):

    def method1(self):
        print("FurtherDerived.method1")

    def method2(self):
        print("FurtherDerived.method2")


def try_override_sealed() -> Optional[TypeError]:
    """Define a subclass redefining the sealed method; return the rejection."""
    try:
        class Shadowing(DerivedClass):
            def non_virtual_method(self):
                print("Shadowing.non_virtual_method")
    except TypeError as exc:
        return exc
    return None


def main(config: Optional[ExampleConfig] = None) -> int:
    base: BaseClass = DerivedClass()

    print(banner("Overridden method calls"))
    base.method1()
    base.method2()
    base.non_virtual_method()

    print()
    print(banner("Multiple levels"))
    ptr: BaseClass = FurtherDerived()
    ptr.method1()
    ptr.method2()
    ptr.non_virtual_method()

    print()
    print(banner("Redefining a sealed method"))
    error = try_override_sealed()
    print(f"Rejected: {error}" if error else "Accepted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
