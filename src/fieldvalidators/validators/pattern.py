"""
Contains the validators matching values against regular expressions.
Values are matched by their string representation. `None` and empty strings are considered valid.
"""
import re
from typing import Any, Optional, Pattern, Union

from fieldvalidators.validator import PredicateValidator, create_validator


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _full_match_validator(pattern: Pattern[str], description: str, name: str) -> PredicateValidator:
    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            if not _is_empty(value) and pattern.fullmatch(str(value)) is None:
                return message
            return None

        return predicate

    return create_validator(predicate_builder, lambda field: f"{field} must be {description}", name=name)


is_alphabetic = _full_match_validator(re.compile(r"[A-Za-z]+"), "alphabetic", "is_alphabetic")
is_alpha_numeric = _full_match_validator(re.compile(r"[A-Za-z0-9]+"), "alphanumeric", "is_alpha_numeric")
is_numeric = _full_match_validator(re.compile(r"[0-9]+"), "numeric", "is_numeric")


def matches_pattern(pattern: Union[str, Pattern[str]]) -> PredicateValidator:
    """
    The value must contain a match of `pattern`. Anchor the pattern (`^...$`) to match the whole value.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def predicate_builder(message: str):
        def predicate(value: Any) -> Optional[str]:
            if not _is_empty(value) and compiled.search(str(value)) is None:
                return message
            return None

        return predicate

    return create_validator(
        predicate_builder, lambda field: f"{field} must match pattern {compiled.pattern}", name="matches_pattern"
    )
