# src/oopconcepts/registry.py
"""
Catalogue of the runnable examples.
"""

import importlib
import logging
import warnings
from typing import Callable, List, Optional

from .config import ExampleConfig, ExampleInfo
from .enums import Concept


logger = logging.getLogger(__name__)

_PACKAGE = __name__.rsplit(".", 1)[0]


class ExampleRegistry:
    """Knows every example, its concept and how to run it."""

    def __init__(self):
        self._examples = {}
        for info in self._discover_examples():
            self.register(info)

    def _discover_examples(self) -> List[ExampleInfo]:
        """Built-in examples, in teaching order."""
        entries = [
            ("basic_class", Concept.ABSTRACTION, "calculator",
             "Calculator with a minimal public interface"),
            ("attributes_and_methods", Concept.ABSTRACTION, "car",
             "Car attributes changed only through methods"),
            ("abstract_shapes", Concept.ABSTRACTION, "shapes",
             "Abstract shape with area and perimeter"),
            ("bank_account", Concept.ENCAPSULATION, "bank_account",
             "Validated deposits, withdrawals and history"),
            ("access_modifiers", Concept.ENCAPSULATION, "access",
             "Public, protected and private attributes"),
            ("basic_inheritance", Concept.INHERITANCE, "vehicles",
             "Vehicles overriding start and stop"),
            ("overridden_methods", Concept.INHERITANCE, "overrides",
             "Overridable, required and sealed methods"),
            ("abstract_employees", Concept.INHERITANCE, "employees",
             "Abstract employee with concrete roles"),
            ("animals", Concept.POLYMORPHISM, "animals",
             "Heterogeneous list of animals"),
            ("payment_processors", Concept.POLYMORPHISM, "payments",
             "Checkout through any payment processor"),
            ("method_dispatch", Concept.POLYMORPHISM, "drawing",
             "Method lookup across shape classes"),
        ]
        return [
            ExampleInfo(name=name, concept=concept,
                        module=f"{_PACKAGE}.{module}", description=description)
            for name, concept, module, description in entries
        ]

    @property
    def examples(self) -> List[ExampleInfo]:
        return list(self._examples.values())

    def names(self) -> List[str]:
        return list(self._examples)

    def register(self, info: ExampleInfo):
        """Add an example; a repeated name replaces the earlier entry."""
        if info.name in self._examples:
            warnings.warn(f"Example '{info.name}' already registered, replacing it")
        self._examples[info.name] = info

    def get(self, name: str) -> ExampleInfo:
        """Look up an example by name. Raises KeyError if unknown."""
        try:
            return self._examples[name]
        except KeyError:
            raise KeyError(f"Unknown example: {name}") from None

    def by_concept(self, concept: Concept) -> List[ExampleInfo]:
        return [info for info in self._examples.values() if info.concept == concept]

    def load(self, name: str) -> Callable[..., int]:
        """Import an example's module and return its ``main``."""
        info = self.get(name)
        module = importlib.import_module(info.module)
        return module.main

    def run(self, name: str, config: Optional[ExampleConfig] = None) -> int:
        """Run one example and return its exit status."""
        config = config or ExampleConfig()
        configure_logging(config)
        logger.info(f"Running example '{name}'")
        return self.load(name)(config)

    def run_all(self, config: Optional[ExampleConfig] = None,
                concept: Optional[Concept] = None) -> int:
        """Run every example (optionally one concept); first non-zero status wins."""
        infos = self.by_concept(concept) if concept else self.examples
        status = 0
        for info in infos:
            print(f"\n{'#' * 60}\n# {info.name} ({info.concept.value})\n{'#' * 60}")
            result = self.run(info.name, config)
            status = status or result
        return status


def configure_logging(config: ExampleConfig):
    """Set the package logger level from the config."""
    package_logger = logging.getLogger(_PACKAGE)
    if config.verbose:
        package_logger.setLevel(logging.INFO)
    else:
        package_logger.setLevel(logging.WARNING)
