"""
Contains functionality to analyze the error record returned by a combined validator
"""
import itertools
from typing import Any, Iterator, Mapping, Optional

from .types import ErrorRecord, ErrorResult


def _join(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def iter_errors(error: ErrorResult, path: str = "") -> Iterator[tuple[str, str]]:
    """
    Flattens a (possibly nested) error into `(path, message)` pairs. Keys of mappings and indices of lists are joined
    with dots, e.g. `("phones.1", "Phone must be numeric")`.
    """
    if error is None:
        return
    if isinstance(error, Mapping):
        for key, sub_error in error.items():
            yield from iter_errors(sub_error, _join(path, key))
    elif isinstance(error, list):
        for index, sub_error in enumerate(error):
            yield from iter_errors(sub_error, _join(path, index))
    else:
        yield path, str(error)


def _extract_field(error: tuple[str, str]) -> str:
    return error[0].split(".", 1)[0]


class ValidationResult:
    """
    Wraps the error record of a combined validator and provides properties for further analysis. Note that the
    values are calculated only if you use them.
    """

    def __init__(self, error_record: Optional[ErrorRecord]):
        self.error_record: ErrorRecord = error_record if error_record is not None else {}
        self._errors: Optional[list[tuple[str, str]]] = None
        self._num_errors_per_field: Optional[dict[str, int]] = None

    @property
    def is_valid(self) -> bool:
        """True if the record got validated without any errors"""
        return self.num_errors_total == 0

    @property
    def error_fields(self) -> list[str]:
        """Sorted list of the (top level) fields which have errors"""
        return sorted(self.num_errors_per_field.keys())

    @property
    def error_paths(self) -> list[str]:
        """
        Sorted list of the full paths (e.g. `contact.email` or `phones.1`) which have errors. Every path holds exactly
        one message.
        """
        return [path for path, _ in self.all_errors]

    @property
    def all_errors(self) -> list[tuple[str, str]]:
        """
        This is a complete list of `(path, message)` pairs of all errors in the record.
        It is sorted by path to enable grouping by it using itertools.
        """
        if self._errors is None:
            self._errors = sorted(iter_errors(self.error_record), key=lambda error: error[0])
        return self._errors

    @property
    def all_messages(self) -> list[str]:
        """All error messages in the order of `all_errors`"""
        return [message for _, message in self.all_errors]

    @property
    def num_errors_total(self) -> int:
        """Number of errors in total"""
        return len(self.all_errors)

    @property
    def num_errors_per_field(self) -> dict[str, int]:
        """This is a dictionary which maps each top level field to the number of errors found in it."""
        if self._num_errors_per_field is None:
            self._num_errors_per_field = {
                key: sum(1 for _ in values_iter)
                for key, values_iter in itertools.groupby(self.all_errors, key=_extract_field)
            }
        return self._num_errors_per_field

    def __str__(self):
        return f"ValidationResult({self.num_errors_total} error(s) in {self.error_fields})"
