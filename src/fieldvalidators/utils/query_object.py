"""
Contains some useful utility functions to query values from records.
A record may be a mapping or an arbitrary object. Both can be queried with dotted key paths.
"""
from typing import Any, Mapping, Optional, TypeVar, overload

from typeguard import TypeCheckError, check_type

AttrT = TypeVar("AttrT")


def split_path(key_path: str) -> list[str]:
    """Splits a dotted key path like `contact.phones[]` into its segments"""
    return [segment for segment in key_path.split(".") if segment != ""]


def lookup(obj: Any, key: str) -> Any:
    """
    Returns the value stored under `key` in `obj`. Mappings are queried by key, every other object by attribute.
    If there is no such value, `None` will be returned.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


@overload
def optional_field(obj: Any, key_path: str, attribute_type: type[AttrT]) -> Optional[AttrT]:
    ...


@overload
def optional_field(obj: Any, key_path: str, attribute_type: Any = Any) -> Any:
    ...


def optional_field(obj: Any, key_path: str, attribute_type: Any = Any) -> Any:
    """
    Queries `obj` with the provided dotted `key_path`. If the value is not existent, `None` will be returned.
    If the value is found, the type will be checked and a TypeCheckError will be raised if it doesn't match.
    """
    current_obj: Any = obj
    for segment in split_path(key_path):
        current_obj = lookup(current_obj, segment)
        if current_obj is None:
            return None
    try:
        check_type(current_obj, attribute_type)
    except TypeCheckError as error:
        raise TypeCheckError(f"{key_path}: {error}") from error
    return current_obj
