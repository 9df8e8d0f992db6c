"""
Contains the types used in the validation combinators
"""
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Protocol, TypeAlias, Union

if TYPE_CHECKING:
    from .config import Options


class ValueValidator(Protocol):
    """
    A protocol for everything which can be applied to a single value, i.e. configured validators and plain
    functions. `all_values` is the complete record the value was taken from (if any).
    """

    def __call__(self, value: Any = None, all_values: Any = None) -> "ErrorResult":
        ...


ErrorResult: TypeAlias = Optional[Union[str, list[str], dict[str, Any]]]
ErrorRecord: TypeAlias = dict[str, Any]
MessageBuilder: TypeAlias = Union[str, Callable[[Optional[str]], str]]
Predicate: TypeAlias = Callable[..., Optional[str]]
PredicateBuilder: TypeAlias = Callable[[str], Predicate]
Config: TypeAlias = Union[None, str, Mapping[str, Any], "Options"]
