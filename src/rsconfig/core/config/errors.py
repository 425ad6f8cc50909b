"""Configuration error types."""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base class for every rejected configuration request."""

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.option = option
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class OptionValueError(ConfigError):
    """The tokens supplied for an option could not be applied."""

    def for_option(self, name: str) -> "OptionValueError":
        """Return the same kind of error, reported against option ``name``."""
        return type(self)(f"{name}: Bad value", option=name, detail=self.message)


class MissingArgumentError(OptionValueError):
    pass


class InvalidNumberError(OptionValueError):
    pass


class OutOfRangeError(OptionValueError):
    pass


class InvalidEnumValueError(OptionValueError):
    pass


class UnknownOptionError(ConfigError):
    pass


class ReadOnlyOptionError(ConfigError):
    pass


class ImmutableOptionError(ConfigError):
    pass
