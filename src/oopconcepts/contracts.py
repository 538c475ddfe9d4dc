# src/oopconcepts/contracts.py
"""
Capability contract helpers.

A contract is an ``abc.ABC`` subclass whose required operations are
``@abstractmethod``s. Python already refuses to instantiate a contract or a
variant missing one of them; this module adds the pieces ``abc`` does not
cover:

* ``sealed`` marks an operation that subclasses may not redefine, and
  ``Sealed`` rejects such a redefinition when the subclass is created.
* ``required_operations`` lists a contract's operations so a generic driver
  can walk them without knowing the variant.
"""

import logging
from typing import Any, Callable, List, TypeVar, final


logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def sealed(method: F) -> F:
    """Mark a method as non-overridable.

    Static checkers see it as ``typing.final``; at runtime ``Sealed`` raises
    ``TypeError`` for any subclass that redefines it.
    """
    method.__sealed__ = True
    return final(method)


def _is_sealed(attr: Any) -> bool:
    return getattr(attr, "__sealed__", False)


class Sealed:
    """Base class enforcing ``@sealed`` methods at class creation."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            for name, attr in vars(base).items():
                if _is_sealed(attr) and name in vars(cls):
                    raise TypeError(
                        f"{cls.__name__}.{name} cannot override sealed method "
                        f"{base.__name__}.{name}"
                    )


def required_operations(contract: type) -> List[str]:
    """Names of a contract's abstract operations, base classes first."""
    abstract = getattr(contract, "__abstractmethods__", frozenset())
    names = []
    for klass in reversed(contract.__mro__):
        for name in vars(klass):
            if name in abstract and name not in names:
                names.append(name)
    return names


def implements(obj: Any, contract: type) -> bool:
    """Whether ``obj`` (a class or an instance) is a usable variant of ``contract``."""
    klass = obj if isinstance(obj, type) else type(obj)
    if not issubclass(klass, contract):
        return False
    missing = getattr(klass, "__abstractmethods__", frozenset())
    if missing:
        logger.debug(f"{klass.__name__} is missing {sorted(missing)}")
    return not missing
