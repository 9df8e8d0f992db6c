"""
Contains some useful utility functions to be used in validators.
"""
from .query_object import lookup, optional_field, split_path
