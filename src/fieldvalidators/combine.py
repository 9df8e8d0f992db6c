"""
Contains the CombinedValidator which applies named validators to the fields of a record and collects the errors in an
error record.
"""
import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from frozendict import frozendict

from .types import ErrorRecord, ErrorResult, ValueValidator
from .utils.query_object import lookup, split_path
from .validator import ConfiguredValidator, Validator, apply_value_validator

_logger = logging.getLogger(__name__)

_ITEMS_SUFFIX = "[]"


def _field_name(segments: list[str]) -> str:
    return segments[-1].removesuffix(_ITEMS_SUFFIX)


def _is_item_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _prepare(key_path: str, validator: Any) -> ValueValidator:
    """
    Turns an entry of the validator map into a function `(value, all_values) -> ErrorResult`.
    """
    if isinstance(validator, Mapping):
        nested = CombinedValidator(validator, null_when_valid=True)
        return lambda value, _: nested(value)
    if isinstance(validator, CombinedValidator):
        return lambda value, _: validator(value) or None
    if isinstance(validator, Validator):
        return validator(_field_name(split_path(key_path)))
    if isinstance(validator, ConfiguredValidator):
        return validator
    if callable(validator):
        return lambda value, all_values: apply_value_validator(validator, value, all_values)
    raise TypeError(f"Validator for '{key_path}' is not callable: {validator!r}")


def _validate_path(validator: ValueValidator, segments: list[str], obj: Any, all_values: Any) -> ErrorResult:
    """
    Walks down `segments` starting at `obj` and validates the value at the end of the path.
    The error is returned nested the same way as the path, e.g. `{"contact": {"email": "..."}}`. A segment with the
    suffix `[]` validates every item of a sequence and yields a list of per-item results. Strings and mappings are no
    item lists, such values (and any other non-sequence) are validated as a single value.
    """
    if len(segments) == 0:
        error = validator(obj, all_values)
        if isinstance(error, Mapping) and len(error) == 0:
            return None
        return error
    head, rest = segments[0], segments[1:]
    if head.endswith(_ITEMS_SUFFIX):
        name = head.removesuffix(_ITEMS_SUFFIX)
        items = lookup(obj, name)
        if items is None:
            return None
        if not _is_item_list(items):
            error = _validate_path(validator, rest, items, all_values)
            return None if error is None else {name: error}
        item_errors = [_validate_path(validator, rest, item, all_values) for item in items]
        if all(item_error is None for item_error in item_errors):
            return None
        return {name: item_errors}
    error = _validate_path(validator, rest, lookup(obj, head), all_values)
    if error is None:
        return None
    return {head: error}


def _merge_items(target: list[Any], source: list[Any]) -> list[Any]:
    merged: list[Any] = []
    for index in range(max(len(target), len(source))):
        target_item = target[index] if index < len(target) else None
        source_item = source[index] if index < len(source) else None
        if isinstance(target_item, dict) and isinstance(source_item, dict):
            merged.append(_merge(dict(target_item), source_item))
        elif source_item is None:
            merged.append(target_item)
        else:
            merged.append(source_item)
    return merged


def _merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merges the nested error structure `source` into `target`. On conflicts `source` wins."""
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            target[key] = _merge(dict(existing), value)
        elif isinstance(existing, list) and isinstance(value, list):
            target[key] = _merge_items(existing, value)
        else:
            target[key] = value
    return target


class CombinedValidator:
    """
    Applies a validator to every field named in the validator map and collects the results in an error record.
    Only fields with errors appear in the error record. Fields which are named in the validator map but missing in
    the record are validated as `None`. Fields of the record without a validator are ignored.
    """

    def __init__(
        self,
        validator_map: Mapping[str, Any],
        serialize_values: Optional[Callable[[Any], Any]] = None,
        null_when_valid: bool = False,
    ):
        self.validator_map: frozendict[str, Any] = (
            validator_map if isinstance(validator_map, frozendict) else frozendict(validator_map)
        )
        self.serialize_values = serialize_values
        self.null_when_valid = null_when_valid
        self._field_validators: tuple[tuple[str, list[str], ValueValidator], ...] = tuple(
            (key_path, split_path(key_path), _prepare(key_path, validator))
            for key_path, validator in self.validator_map.items()
        )

    def __call__(self, field_record: Any = None) -> Optional[ErrorRecord]:
        record = self.serialize_values(field_record) if self.serialize_values is not None else field_record
        errors: ErrorRecord = {}
        for key_path, segments, validator in self._field_validators:
            if isinstance(record, Mapping) and key_path in record:
                # literal keys win over the dotted path interpretation
                field_error = _validate_path(validator, [], record[key_path], record)
                error = None if field_error is None else {key_path: field_error}
            else:
                error = _validate_path(validator, segments, record, record)
            if error is not None:
                _merge(errors, error)
        _logger.debug(
            "Validated record against %d validator(s), %d field(s) failed", len(self.validator_map), len(errors)
        )
        if len(errors) == 0 and self.null_when_valid:
            return None
        return errors

    def __str__(self):
        return f"CombinedValidator({list(self.validator_map.keys())})"

    __repr__ = __str__


def combine_validators(
    validator_map: Mapping[str, Any],
    serialize_values: Optional[Callable[[Any], Any]] = None,
    null_when_valid: bool = False,
) -> CombinedValidator:
    """
    Combines a mapping of field names to validators into a validator for whole records:
    ```
    validate_person = combine_validators({
        "name": compose_validators(is_required, is_alphabetic)("Name"),
        "contact.email": is_required("Email"),
        "phones[]": is_numeric("Phone"),
    })
    validate_person({"name": "Jo", "contact": {}, "phones": ["123", "abc"]})
    # -> {"contact": {"email": "Email is required"}, "phones": [None, "Phone must be numeric"]}
    ```
    A key which exists literally in a mapping record (e.g. `"user.name"`) is looked up directly. Only otherwise it is
    interpreted as dotted path. A `[]` segment which does not hold a sequence (strings and mappings included) is
    validated as a single value.
    Validators of a nested validator map (`{"contact": {"email": ...}}`) get the nested record as `all_values`, so
    cross-field validators there can only refer to fields of the nested record.
    Validators which did not get a configuration yet are configured with the field name.
    `serialize_values` is applied to the record before validating it. If `null_when_valid` is set, `None` is returned
    instead of an empty error record.
    """
    return CombinedValidator(validator_map, serialize_values=serialize_values, null_when_valid=null_when_valid)
