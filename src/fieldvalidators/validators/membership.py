"""
Contains the validator checking that a value is one of a fixed set of values.
"""
import json
import operator
from typing import Any, Callable, Iterable, Optional

from fieldvalidators.validator import PredicateValidator, create_validator


def is_one_of(values: Iterable[Any], comparer: Callable[[Any, Any], Any] = operator.eq) -> PredicateValidator:
    """
    The value must equal one of `values`. `comparer(value, allowed_value)` decides about equality, e.g.
    `lambda a, b: a.lower() == b.lower()` for a case-insensitive comparison. `None` is considered valid.
    """
    allowed_values = tuple(values)
    allowed_repr = json.dumps(list(allowed_values), separators=(",", ":"), ensure_ascii=False, default=str)

    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            if value is None:
                return None
            if any(comparer(value, allowed_value) for allowed_value in allowed_values):
                return None
            return message

        return predicate

    return create_validator(
        predicate_builder, lambda field: f"{field} must be one of {allowed_repr}", name="is_one_of"
    )
