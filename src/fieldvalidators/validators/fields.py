"""
Contains validators which compare a value to other fields of the same record.
"""
from typing import Any, Optional

from fieldvalidators.utils.query_object import optional_field
from fieldvalidators.validator import PredicateValidator, create_validator


def matches_field(other_field: str, other_field_label: Optional[str] = None) -> PredicateValidator:
    """
    The value must equal the value of `other_field` (a dotted key path) in the record being validated, e.g. for a
    password confirmation. Without a record there is nothing to compare with and the value is considered valid.
    """
    label = other_field_label if other_field_label is not None else other_field

    def predicate_builder(message: str):
        def predicate(value: Any, all_values: Any = None) -> Optional[str]:
            if all_values is None:
                return None
            if value != optional_field(all_values, other_field):
                return message
            return None

        return predicate

    return create_validator(predicate_builder, lambda field: f"{field} must match {label}", name="matches_field")
