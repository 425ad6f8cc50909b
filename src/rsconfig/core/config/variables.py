"""Configuration variable descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from .kinds import OptionKind, SettableOption


@dataclass(frozen=True)
class ConfigVar:
    """Static description of one named configuration option."""

    name: str
    help_text: str
    kind: OptionKind
    # Only settable from the startup token list, never at runtime
    immutable: bool = False

    @property
    def is_flag(self) -> bool:
        """Flags take no value token; their presence enables them."""
        return self.kind.is_flag

    @property
    def settable(self) -> bool:
        return isinstance(self.kind, SettableOption)
