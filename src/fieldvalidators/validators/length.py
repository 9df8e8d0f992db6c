"""
Contains the validators checking the length of a value.
Missing or empty values and values without a length are considered valid. Combine them with `is_required` if needed.
"""
from collections.abc import Sized
from typing import Any, Optional

from fieldvalidators.validator import PredicateValidator, create_validator


def _length(value: Any) -> Optional[int]:
    if value is None or value == "" or not isinstance(value, Sized):
        return None
    return len(value)


def _check_bound(name: str, bound: int) -> None:
    if not isinstance(bound, int) or isinstance(bound, bool) or bound < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {bound!r}")


def has_length_between(min_length: int, max_length: int) -> PredicateValidator:
    """The length must be within `min_length` and `max_length` (both inclusive)"""
    _check_bound("min_length", min_length)
    _check_bound("max_length", max_length)
    if min_length > max_length:
        raise ValueError(f"min_length ({min_length}) must not be greater than max_length ({max_length})")

    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            length = _length(value)
            if length is not None and not min_length <= length <= max_length:
                return message
            return None

        return predicate

    return create_validator(
        predicate_builder,
        lambda field: f"{field} must be between {min_length} and {max_length} characters long",
        name="has_length_between",
    )


def has_length_greater_than(min_length: int) -> PredicateValidator:
    """The length must be strictly greater than `min_length`"""
    _check_bound("min_length", min_length)

    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            length = _length(value)
            if length is not None and length <= min_length:
                return message
            return None

        return predicate

    return create_validator(
        predicate_builder,
        lambda field: f"{field} must be longer than {min_length} characters",
        name="has_length_greater_than",
    )


def has_length_less_than(max_length: int) -> PredicateValidator:
    """The length must not exceed `max_length`"""
    _check_bound("max_length", max_length)

    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            length = _length(value)
            if length is not None and length > max_length:
                return message
            return None

        return predicate

    return create_validator(
        predicate_builder,
        lambda field: f"{field} cannot be longer than {max_length} characters",
        name="has_length_less_than",
    )
