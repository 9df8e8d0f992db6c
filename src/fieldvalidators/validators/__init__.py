"""
Contains the built-in validators. All of them are built with `create_validator`.
"""
from .fields import matches_field
from .length import has_length_between, has_length_greater_than, has_length_less_than
from .membership import is_one_of
from .pattern import is_alpha_numeric, is_alphabetic, is_numeric, matches_pattern
from .required import is_required, is_required_if
from .typecheck import is_of_type
