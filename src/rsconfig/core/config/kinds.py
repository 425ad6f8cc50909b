"""
Option kinds: how a configuration variable reads its tokens and renders its value.

Every kind knows which ``ConfigState`` field it owns. Settable kinds consume
tokens from an ``ArgCursor`` and write a validated value into the state;
all kinds can render the current value for introspection. A rendered value
of ``None`` means "no value" and is distinct from the empty string.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from .errors import (
    InvalidEnumValueError,
    InvalidNumberError,
    MissingArgumentError,
    OutOfRangeError,
)
from .state import ConfigState

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Values must fit a signed 64-bit integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass
class ArgCursor:
    """Read position inside an ordered token list."""

    tokens: Sequence[str]
    offset: int = 0

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.tokens)

    def next(self) -> str:
        if self.at_end:
            raise MissingArgumentError("Missing argument")
        token = self.tokens[self.offset]
        self.offset += 1
        return token


def parse_integer(token: str) -> int:
    """Parse a base-10 integer token, rejecting whitespace and separators."""
    if not isinstance(token, str) or not _INTEGER_RE.fullmatch(token):
        raise InvalidNumberError(f"Could not parse integer: {token!r}")
    return int(token)


def read_integer(
    cursor: ArgCursor, min_value: Optional[int] = None, max_value: Optional[int] = None
) -> int:
    """Consume one integer token and check it against an inclusive range."""
    value = parse_integer(cursor.next())
    if not INT64_MIN <= value <= INT64_MAX:
        raise OutOfRangeError(f"Value out of 64-bit range: {value}")
    if min_value is not None and value < min_value:
        raise OutOfRangeError(f"Value too small: {value} < {min_value}")
    if max_value is not None and value > max_value:
        raise OutOfRangeError(f"Value too big: {value} > {max_value}")
    return value


class OptionKind(ABC):
    """Renders the current value of an option."""

    is_flag = False

    @abstractmethod
    def serialize(self, state: ConfigState) -> Optional[str]:
        raise NotImplementedError


class SettableOption(OptionKind):
    """An option kind that can also be written from tokens."""

    @abstractmethod
    def parse(self, state: ConfigState, cursor: ArgCursor) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class IntRangeOption(SettableOption):
    """Integer value within ``[min_value, max_value]``; ``None`` leaves a side open."""

    attr: str
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    # Additional fields written whenever the value is accepted
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def parse(self, state: ConfigState, cursor: ArgCursor) -> None:
        value = read_integer(cursor, self.min_value, self.max_value)
        setattr(state, self.attr, value)
        for name, extra_value in self.extra.items():
            setattr(state, name, extra_value)

    def serialize(self, state: ConfigState) -> Optional[str]:
        return str(getattr(state, self.attr))


@dataclass(frozen=True)
class FlagOption(SettableOption):
    """
    Boolean switch enabled by the option name alone.

    Presence writes ``enabled_value`` into the attribute. The rendered value is
    "true" while the attribute holds ``enabled_value``, so a flag that turns
    something off (e.g. NOGC) reads "true" once that thing is off.
    """

    attr: str
    enabled_value: bool = True
    is_flag = True

    def parse(self, state: ConfigState, cursor: ArgCursor) -> None:
        setattr(state, self.attr, self.enabled_value)

    def serialize(self, state: ConfigState) -> Optional[str]:
        return "true" if getattr(state, self.attr) == self.enabled_value else "false"


@dataclass(frozen=True)
class EnumOption(SettableOption):
    """One of a fixed set of literals, matched case-insensitively."""

    attr: str
    choices: Mapping[str, Enum] = field(hash=False)

    def parse(self, state: ConfigState, cursor: ArgCursor) -> None:
        token = cursor.next()
        lowered = token.lower()
        for literal, member in self.choices.items():
            if literal.lower() == lowered:
                setattr(state, self.attr, member)
                return
        raise InvalidEnumValueError(
            f"Invalid value {token!r}, choose one of: {', '.join(self.choices)}"
        )

    def serialize(self, state: ConfigState) -> Optional[str]:
        return str(getattr(state, self.attr))


@dataclass(frozen=True)
class PathOption(SettableOption):
    """Opaque string value (typically a file path); unset renders as no value."""

    attr: str

    def parse(self, state: ConfigState, cursor: ArgCursor) -> None:
        setattr(state, self.attr, cursor.next())

    def serialize(self, state: ConfigState) -> Optional[str]:
        value = getattr(state, self.attr)
        return None if value is None else str(value)


@dataclass(frozen=True)
class ComputedOption(OptionKind):
    """Read-only value derived from the state; it has no parser."""

    getter: Callable[[ConfigState], Optional[str]]

    def serialize(self, state: ConfigState) -> Optional[str]:
        return self.getter(state)
