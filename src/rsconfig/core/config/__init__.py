"""Typed configuration registry and option declarations."""

from .errors import (
    ConfigError,
    ImmutableOptionError,
    InvalidEnumValueError,
    InvalidNumberError,
    MissingArgumentError,
    OptionValueError,
    OutOfRangeError,
    ReadOnlyOptionError,
    UnknownOptionError,
)
from .kinds import (
    ArgCursor,
    ComputedOption,
    EnumOption,
    FlagOption,
    IntRangeOption,
    OptionKind,
    PathOption,
    SettableOption,
)
from .variables import ConfigVar
from .options import DEFAULT_OPTIONS
from .state import ConfigState, TimeoutPolicy, info_string
from .registry import ALL_OPTIONS, ConfigRegistry
from .env import load_environment, min_threads_requested

__all__ = [
    "ALL_OPTIONS",
    "ArgCursor",
    "ComputedOption",
    "ConfigError",
    "ConfigRegistry",
    "ConfigState",
    "ConfigVar",
    "DEFAULT_OPTIONS",
    "EnumOption",
    "FlagOption",
    "ImmutableOptionError",
    "IntRangeOption",
    "InvalidEnumValueError",
    "InvalidNumberError",
    "MissingArgumentError",
    "OptionKind",
    "OptionValueError",
    "OutOfRangeError",
    "PathOption",
    "ReadOnlyOptionError",
    "SettableOption",
    "TimeoutPolicy",
    "UnknownOptionError",
    "info_string",
    "load_environment",
    "min_threads_requested",
]
