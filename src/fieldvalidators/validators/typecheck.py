"""
Contains a validator checking the type of a value using typeguard.
"""
from typing import Any, Optional, get_origin

from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from fieldvalidators.validator import PredicateValidator, create_validator


def _type_name(expected_type: Any) -> str:
    if get_origin(expected_type) is None and hasattr(expected_type, "__name__"):
        return expected_type.__name__
    return str(expected_type).removeprefix("typing.")


def is_of_type(expected_type: Any) -> PredicateValidator:
    """
    The value must match `expected_type`, which may be any type annotation typeguard understands, e.g. `list[int]`.
    `None` is considered valid.
    """
    type_name = _type_name(expected_type)

    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            if value is None:
                return None
            try:
                check_type(value, expected_type, collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
            except TypeCheckError:
                return message
            return None

        return predicate

    return create_validator(predicate_builder, lambda field: f"{field} must be of type {type_name}", name="is_of_type")
