"""
Contains the validators which check that a value is provided at all.
"""
from typing import Any, Callable

from fieldvalidators.validator import PredicateValidator, create_validator


def is_blank(value: Any) -> bool:
    """A value is blank if it is `None` or a string consisting of whitespace only"""
    return value is None or (isinstance(value, str) and value.strip() == "")


is_required = create_validator(
    lambda message: lambda value: message if is_blank(value) else None,
    lambda field: f"{field} is required",
    name="is_required",
)


def is_required_if(condition: Callable[[Any], Any]) -> PredicateValidator:
    """
    Returns a validator which requires the value only if `condition(all_values)` is truthy, i.e. it depends on other
    fields of the same record:
    ```
    validate_street = is_required_if(lambda values: values and values.get("wants_delivery"))("Street")
    ```
    """

    def predicate_builder(message: str) -> Callable[[Any, Any], Any]:
        def predicate(value: Any, all_values: Any = None):
            if condition(all_values) and is_blank(value):
                return message
            return None

        return predicate

    return create_validator(predicate_builder, lambda field: f"{field} is required", name="is_required_if")
