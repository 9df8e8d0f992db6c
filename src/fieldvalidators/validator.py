"""
Contains the base class of all validators and the factory `create_validator` to build validators from predicates.
"""
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .config import Options, resolve_config
from .types import Config, ErrorResult, MessageBuilder, PredicateBuilder


class _Missing:
    """Marks a value which was not passed at all (in contrast to an explicit `None`)"""

    def __repr__(self):
        return "<missing>"


MISSING: Any = _Missing()


def accepts_all_values(func: Callable[..., Any]) -> bool:
    """
    Checks if `func` takes the complete record as keyword argument `all_values` (or accepts arbitrary keyword
    arguments). Functions without an inspectable signature are assumed to take the value only.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_KEYWORD:
            return True
        if parameter.name == "all_values" and parameter.kind in (
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        ):
            return True
    return False


def apply_value_validator(func: Callable[..., ErrorResult], value: Any, all_values: Any = None) -> ErrorResult:
    """
    Applies a plain value validator to `value`. The record is only passed as `all_values=` if the function takes it.
    Other parameters with defaults are left alone.
    """
    if accepts_all_values(func):
        return func(value, all_values=all_values)
    return func(value)


class Validator(ABC):
    """
    A validator is a curried function `validator(config)(value)` which returns `None` if the value is valid and
    an error (message or list of messages) otherwise. It can also be called in one step: `validator(config, value)`.
    Validators hold no state and can be reused for any number of validations.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name if name is not None else type(self).__name__

    def __call__(self, config: Config = None, value: Any = MISSING, all_values: Any = None) -> Any:
        options = resolve_config(config)
        if value is MISSING:
            return ConfiguredValidator(self, options)
        return self.validate(options, value, all_values)

    @abstractmethod
    def validate(self, options: Options, value: Any, all_values: Any = None) -> ErrorResult:
        """
        Validates `value` using the already resolved `options`. This is the place where subclasses implement
        their logic.
        """

    def __str__(self):
        return f"{type(self).__name__}({self.name})"

    __repr__ = __str__


class ConfiguredValidator:
    """
    The continuation of a validator which already got its configuration, i.e. the result of `validator(config)`.
    It takes the value to validate and optionally the complete record the value belongs to.
    """

    def __init__(self, validator: Validator, options: Options):
        self.validator = validator
        self.options = options

    def __call__(self, value: Any = None, all_values: Any = None) -> ErrorResult:
        return self.validator.validate(self.options, value, all_values)

    def inherit(self, parent: Options) -> "ConfiguredValidator":
        """
        Returns a configured validator whose unset options are filled with those of `parent`.
        The options set on this instance take precedence.
        """
        return ConfiguredValidator(self.validator, self.options.inherit(parent))

    def __eq__(self, other):
        return (
            isinstance(other, ConfiguredValidator)
            and self.validator is other.validator
            and self.options == other.options
        )

    def __hash__(self):
        return hash((id(self.validator), self.options))

    def __str__(self):
        return f"{self.validator}[{self.options}]"

    __repr__ = __str__


def build_message(message_builder: MessageBuilder, field: Optional[str]) -> str:
    """Computes the default message of a validator for the given field name"""
    if isinstance(message_builder, str):
        return message_builder
    return message_builder(field)


class PredicateValidator(Validator):
    """
    A validator built from a predicate builder and a message builder. See `create_validator`.
    """

    def __init__(
        self, predicate_builder: PredicateBuilder, message_builder: MessageBuilder, name: Optional[str] = None
    ):
        if not callable(predicate_builder):
            raise TypeError(f"predicate_builder must be callable, got {type(predicate_builder).__name__}")
        if not isinstance(message_builder, str) and not callable(message_builder):
            raise TypeError(f"message_builder must be a string or callable, got {type(message_builder).__name__}")
        super().__init__(name if name is not None else getattr(predicate_builder, "__name__", None))
        self.predicate_builder = predicate_builder
        self.message_builder = message_builder

    def resolve_message(self, options: Options) -> str:
        """An explicit message is used verbatim, otherwise the default message is built from the field name"""
        if options.message is not None:
            return options.message
        return build_message(self.message_builder, options.field)

    def validate(self, options: Options, value: Any, all_values: Any = None) -> ErrorResult:
        predicate = self.predicate_builder(self.resolve_message(options))
        return apply_value_validator(predicate, value, all_values)


def create_validator(
    predicate_builder: PredicateBuilder, message_builder: MessageBuilder, name: Optional[str] = None
) -> PredicateValidator:
    """
    Creates a validator from a predicate builder and a message builder.
    The predicate builder receives the resolved message and returns a predicate. The predicate returns the message
    for an invalid value and `None` for a valid one. It may take the complete record as parameter `all_values`.
    The message builder is either a function building the default message from the field name or a literal string.
    E.g.:
    ```
    is_even = create_validator(
        lambda message: lambda value: message if value % 2 else None,
        lambda field: f"{field} must be even",
    )
    assert is_even("Count", 3) == "Count must be even"
    assert is_even({"message": "odd!"})(3) == "odd!"
    ```
    """
    return PredicateValidator(predicate_builder, message_builder, name=name)
