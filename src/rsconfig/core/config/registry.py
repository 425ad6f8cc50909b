"""
Configuration registry: the declared options plus the live values.

The registry performs no locking. The startup load is expected to run once,
single-threaded, before anything else reads the configuration; later calls
to ``set_option`` must be serialized by the caller (e.g. by routing them
through a single command-handling thread). Concurrent unsynchronized calls
to ``set_option`` are undefined behavior.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from rsconfig.core.utils.logger import (
    log_configuration_change,
    log_debug,
    log_info,
    log_warning,
)

from .errors import (
    ImmutableOptionError,
    OptionValueError,
    ReadOnlyOptionError,
    UnknownOptionError,
)
from .kinds import ArgCursor
from .options import DEFAULT_OPTIONS
from .state import ConfigState, info_string
from .variables import ConfigVar

ALL_OPTIONS = "*"


class ConfigRegistry:
    """Ordered option table bound to one ``ConfigState``."""

    def __init__(
        self,
        variables: Iterable[ConfigVar] = DEFAULT_OPTIONS,
        state: Optional[ConfigState] = None,
    ):
        self.variables: tuple[ConfigVar, ...] = tuple(variables)
        self._by_name: Dict[str, ConfigVar] = {}
        for var in self.variables:
            if not var.name:
                raise ValueError("Configuration options must have a name")
            if var.name in self._by_name:
                raise ValueError(f"Duplicate configuration option: {var.name}")
            self._by_name[var.name] = var
        self.state = state if state is not None else ConfigState()
        # Names applied by a startup load
        self._modified: Set[str] = set()

    def find(self, name: str) -> Optional[ConfigVar]:
        """Look an option up by its exact, case-sensitive name."""
        return self._by_name.get(name)

    def is_modified(self, name: str) -> bool:
        return name in self._modified

    def load_from_tokens(self, tokens: Sequence[str], min_threads: bool = False) -> None:
        """
        Apply an ordered startup token list: ``NAME [VALUE] NAME [VALUE] ...``.

        Args:
            tokens: Option names, each followed by as many value tokens as
                    that option takes (none for flags).
            min_threads: Force both thread pools to a single thread before
                         reading any token.

        Raises:
            UnknownOptionError: A name is not declared.
            ReadOnlyOptionError: A name refers to a computed option.
            OptionValueError: A value is missing or invalid; the message is
                              ``"<name>: Bad value"`` and ``detail`` says why.

        The first error aborts the load. Options applied before it stay
        applied; snapshot ``state.copy()`` beforehand to roll back.
        """
        if min_threads:
            log_info("CONFIG", "Setting thread pool sizes to 1")
            self.state.apply_min_threads()

        cursor = ArgCursor(tokens)
        while not cursor.at_end:
            name = cursor.next()
            var = self.find(name)
            if var is None:
                log_warning("CONFIG", f"Rejected startup option `{name}`", "unknown option")
                raise UnknownOptionError(
                    f"No such configuration option `{name}`", option=name
                )
            if not var.settable:
                log_warning("CONFIG", f"Rejected startup option `{name}`", "read-only")
                raise ReadOnlyOptionError(f"{name}: Option is read-only", option=name)
            try:
                var.kind.parse(self.state, cursor)
            except OptionValueError as exc:
                log_warning("CONFIG", f"{name}: Bad value", exc.message)
                raise exc.for_option(name) from exc
            self._modified.add(name)
            log_debug("CONFIG", f"Loaded {name} = {var.kind.serialize(self.state)}")

    def set_option(self, name: str, tokens: Sequence[str], offset: int = 0) -> int:
        """
        Change one option at runtime using the same parser as the startup load.

        Returns the offset just past the tokens the option consumed.
        """
        var = self.find(name)
        if var is None:
            raise UnknownOptionError("No such option", option=name)
        if var.immutable:
            log_warning("CONFIG", f"Refused runtime change of {name}", "immutable")
            raise ImmutableOptionError("Option not settable at runtime", option=name)
        if not var.settable:
            raise ReadOnlyOptionError(f"{name}: Option is read-only", option=name)

        old_value = var.kind.serialize(self.state)
        cursor = ArgCursor(tokens, offset)
        try:
            var.kind.parse(self.state, cursor)
        except OptionValueError as exc:
            exc.option = name
            log_warning("CONFIG", f"{name}: {exc.message}")
            raise
        log_configuration_change(name, old_value, var.kind.serialize(self.state))
        return cursor.offset

    def get_option(self, name: str) -> Optional[str]:
        """Return the rendered value of one option, ``None`` when it has no value."""
        var = self.find(name)
        if var is None:
            raise UnknownOptionError("No such option", option=name)
        return var.kind.serialize(self.state)

    def dump_option(self, name: str = ALL_OPTIONS, include_help: bool = False) -> List[List[Any]]:
        """
        Describe one option, or every option in declaration order for ``"*"``.

        Each entry is ``[name, value]``, or with ``include_help``
        ``[name, "Description", help_text, "Value", value]``. ``value`` is
        ``None`` when the option has no value. Unknown names give ``[]``.
        """
        if name == ALL_OPTIONS:
            selected: Sequence[ConfigVar] = self.variables
        else:
            var = self.find(name)
            selected = [var] if var is not None else []
        return [self._dump_entry(var, include_help) for var in selected]

    def _dump_entry(self, var: ConfigVar, include_help: bool) -> List[Any]:
        value = var.kind.serialize(self.state)
        if include_help:
            return [var.name, "Description", var.help_text, "Value", value]
        return [var.name, value]

    def info_string(self) -> str:
        return info_string(self.state)
