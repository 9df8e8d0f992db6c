"""
This package enables you to easily create functions to validate single values and to combine them into validators
for whole records. Validators are curried pure functions: `validator(config)(value)` returns `None` for a valid value
and an error message otherwise.
"""

from .analysis import ValidationResult
from .assertions import has_error, has_error_at, has_error_only_at
from .combine import CombinedValidator, combine_validators
from .compose import ComposedValidator, compose_validators
from .config import Options, resolve_config
from .validator import ConfiguredValidator, PredicateValidator, Validator, create_validator
from .validators import (
    has_length_between,
    has_length_greater_than,
    has_length_less_than,
    is_alpha_numeric,
    is_alphabetic,
    is_numeric,
    is_of_type,
    is_one_of,
    is_required,
    is_required_if,
    matches_field,
    matches_pattern,
)
