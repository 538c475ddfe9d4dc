# src/oopconcepts/access.py
"""
Encapsulation: public, protected and private attribute conventions.

* ``public_info`` is part of the interface.
* ``_protected_info`` is for the class and its subclasses by convention.
* ``__private_secret`` is name-mangled to ``_Animal__private_secret`` and
  cannot be reached under its plain name, not even from a subclass.
"""

from typing import Optional

from .config import ExampleConfig
from .formatting import banner


class Animal:

    def __init__(self):
        self.__private_secret = "I am a private member"
        self._protected_info = "I am protected - derived classes can access"
        self.public_info = "I am public - everyone can access"

    def public_method(self):
        print("Public method called")


class Dog(Animal):

    def demonstrate_access(self):
        print()
        print(banner("Inside Dog class"))
        print(f"Public: {self.public_info}")
        print(f"Protected: {self._protected_info}")

    def read_private_secret(self) -> str:
        """Attempt to read the parent's private attribute.

        Raises AttributeError: inside ``Dog`` the name mangles to
        ``_Dog__private_secret``, which does not exist.
        """
        return self.__private_secret

    def use_public_method(self):
        self.public_method()


def main(config: Optional[ExampleConfig] = None) -> int:
    animal = Animal()
    dog = Dog()

    print(banner("Outside all classes"))
    print(f"Public: {animal.public_info}")
    animal.public_method()

    # animal.__private_secret raises AttributeError

    dog.demonstrate_access()
    dog.use_public_method()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
