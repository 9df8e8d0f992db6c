"""
Contains the ComposedValidator which chains multiple validators into a single one.
"""
from typing import Any, Callable, Mapping, Optional, Union

from frozendict import frozendict

from .config import Options
from .types import ErrorResult
from .validator import ConfiguredValidator, Validator, apply_value_validator

ComposableT = Union[Validator, ConfiguredValidator, Callable[..., ErrorResult]]


def _check_composable(name: str, validator: Any) -> None:
    if not callable(validator):
        raise TypeError(f"Validator {name} is not callable: {validator!r}")


def _apply(validator: ComposableT, options: Options, value: Any, all_values: Any) -> ErrorResult:
    """
    Applies an inner validator. Unconfigured validators get the options of the composition, pre-configured ones
    only inherit the keys they did not set themselves. Plain functions are used as they are.
    """
    if isinstance(validator, Validator):
        return validator.validate(options, value, all_values)
    if isinstance(validator, ConfiguredValidator):
        return validator.inherit(options)(value, all_values)
    return apply_value_validator(validator, value, all_values)


class ComposedValidator(Validator):
    """
    Evaluates its validators strictly from left to right. By default the first error is returned and the remaining
    validators are skipped. With `multiple=True` all validators are evaluated and all errors are collected.
    If the validators are named (i.e. given as mapping) the collected errors are returned as dict instead of a list.
    """

    def __init__(self, validators: Mapping[str, ComposableT], named: bool = False, name: Optional[str] = None):
        if len(validators) == 0:
            raise ValueError("At least one validator is required for a composition")
        for validator_name, validator in validators.items():
            _check_composable(validator_name, validator)
        self.validators: frozendict[str, ComposableT] = frozendict(validators)
        self.named = named
        super().__init__(name if name is not None else "+".join(map(_name_of, self.validators.values())))

    def validate(self, options: Options, value: Any, all_values: Any = None) -> ErrorResult:
        inner_options = options.for_inner_validators()
        if not options.multiple:
            for validator in self.validators.values():
                error = _apply(validator, inner_options, value, all_values)
                if error is not None:
                    return error
            return None
        if self.named:
            named_errors: dict[str, Any] = {}
            for validator_name, validator in self.validators.items():
                error = _apply(validator, inner_options, value, all_values)
                if error is not None:
                    named_errors[validator_name] = error
            return named_errors or None
        errors: list[Any] = []
        for validator in self.validators.values():
            error = _apply(validator, inner_options, value, all_values)
            if isinstance(error, list):
                errors.extend(error)
            elif error is not None:
                errors.append(error)
        return errors or None


def _name_of(validator: ComposableT) -> str:
    if isinstance(validator, Validator):
        return validator.name
    if isinstance(validator, ConfiguredValidator):
        return validator.validator.name
    return getattr(validator, "__name__", type(validator).__name__)


def compose_validators(*validators: Union[ComposableT, Mapping[str, ComposableT]]) -> ComposedValidator:
    """
    Composes the given validators into one validator which is curried the same way as every other validator:
    ```
    validate_name = compose_validators(is_required, is_alphabetic({"message": "Letters only"}))
    validate_name("Name")("")  # -> "Name is required"
    validate_name({"field": "Name", "multiple": True})("4")  # -> ["Letters only"]
    ```
    A single mapping of names to validators may be passed instead. In `multiple` mode the errors are then returned
    as dict keyed by these names.
    """
    if len(validators) == 1 and isinstance(validators[0], Mapping):
        return ComposedValidator(validators[0], named=True)
    return ComposedValidator({str(index): validator for index, validator in enumerate(validators)})
