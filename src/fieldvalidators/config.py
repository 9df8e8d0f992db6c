"""
Contains the configuration which can be supplied as first argument to every validator.
A configuration is either a plain field name or a set of options. Both are resolved into an immutable `Options`
instance once at the top of a validator invocation.
"""
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """
    The resolved configuration of a validator.
    `field` is the name used in default messages, `message` overrides the default message and `multiple` tells a
    composed validator to collect all errors instead of returning the first one.
    """

    field: Optional[str] = None
    message: Optional[str] = None
    multiple: bool = False

    def inherit(self, parent: "Options") -> "Options":
        """
        Returns a copy of these options in which every unset key is taken from `parent`.
        `multiple` is never inherited since it only applies to the top level of a composed validator.
        """
        return Options(
            field=self.field if self.field is not None else parent.field,
            message=self.message if self.message is not None else parent.message,
            multiple=self.multiple,
        )

    def for_inner_validators(self) -> "Options":
        """The options a composed validator hands down to the validators it consists of"""
        return replace(self, multiple=False) if self.multiple else self


_OPTION_KEYS = frozenset(option.name for option in fields(Options))
EMPTY_OPTIONS = Options()


def resolve_config(config: Any) -> Options:
    """
    Resolves the first argument of a validator into `Options`.
    Unsupported shapes are not rejected. They resolve to empty options, i.e. the default message will be built without
    a field name.
    """
    if config is None:
        return EMPTY_OPTIONS
    if isinstance(config, Options):
        return config
    if isinstance(config, str):
        return Options(field=config)
    if isinstance(config, Mapping):
        unknown_keys = set(config.keys()) - _OPTION_KEYS
        if unknown_keys:
            _logger.debug("Ignoring unknown configuration key(s) %s", sorted(map(str, unknown_keys)))
        return Options(
            field=config.get("field"),
            message=config.get("message"),
            multiple=bool(config.get("multiple", False)),
        )
    _logger.debug("Unsupported configuration of type %s, falling back to empty options", type(config).__name__)
    return EMPTY_OPTIONS
