"""
Contains predicates to inspect the results of validators, e.g. in tests or to decide whether a form can be submitted.
"""
from typing import Any, Mapping, Optional

from .analysis import iter_errors
from .types import ErrorResult
from .utils.query_object import split_path


def _error_at(result: ErrorResult, key_path: str) -> Any:
    current: Any = result
    for segment in split_path(key_path):
        if isinstance(current, Mapping):
            current = current.get(segment)
        elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            return None
        if current is None:
            return None
    return current


def has_error(result: ErrorResult) -> bool:
    """True if `result` contains at least one error message"""
    return next(iter_errors(result), None) is not None


def has_error_at(result: ErrorResult, key_path: Optional[str] = None) -> bool:
    """
    True if there is an error at the dotted `key_path`, e.g. `has_error_at(errors, "contact.email")`.
    List results are indexed by number, e.g. `"phones.1"`. Without a key path this is `has_error`.
    """
    if key_path is None:
        return has_error(result)
    return has_error(_error_at(result, key_path))


def has_error_only_at(result: ErrorResult, key_path: str) -> bool:
    """True if there is an error at the dotted `key_path` and nowhere else"""
    if not has_error_at(result, key_path):
        return False
    prefix = ".".join(split_path(key_path))
    return all(path == prefix or path.startswith(f"{prefix}.") for path, _ in iter_errors(result))
