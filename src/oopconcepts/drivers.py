# src/oopconcepts/drivers.py
"""
Generic driver that works on any variant of a capability contract.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from .contracts import required_operations


logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """Outcome of one contract operation invoked on one variant."""
    variant: Any
    operation: str
    result: Any = None


def _describe(value: Any) -> str:
    return value.__name__ if isinstance(value, type) else type(value).__name__


def exercise(variants: Iterable[Any], contract: type, *args,
             operations: Optional[List[str]] = None,
             arguments: Optional[Mapping[str, Sequence[Any]]] = None) -> List[OperationResult]:
    """Invoke every required operation of ``contract`` on every variant.

    Only names the contract declares are looked up, so no variant-specific
    code path exists. A callable operation receives ``arguments[name]`` when
    given, otherwise ``args``; abstract properties are read. Results come
    back variant-major.
    """
    variants = list(variants)
    for variant in variants:
        if not isinstance(variant, contract):
            raise TypeError(
                f"{_describe(variant)} does not implement {contract.__name__}"
            )

    if operations is None:
        operations = required_operations(contract)
    arguments = arguments or {}
    unknown = [name for name in list(operations) + list(arguments)
               if not hasattr(contract, name)]
    if unknown:
        raise ValueError(f"{contract.__name__} does not declare {unknown}")
    logger.info(f"Driving {len(variants)} variant(s) of {contract.__name__} "
                f"through {operations}")

    results = []
    for variant in variants:
        for name in operations:
            attr = getattr(variant, name)
            if callable(attr):
                value = attr(*arguments.get(name, args))
            else:
                value = attr
            results.append(OperationResult(variant, name, value))
    return results
