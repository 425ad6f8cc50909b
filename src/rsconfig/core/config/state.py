"""Live configuration values."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Defaults used when nothing is configured
DEFAULT_MIN_TERM_PREFIX = 2
DEFAULT_MAX_PREFIX_EXPANSIONS = 200
DEFAULT_QUERY_TIMEOUT_MS = 500
DEFAULT_CURSOR_READ_SIZE = 1000
DEFAULT_CURSOR_MAX_IDLE_MS = 300000
DEFAULT_DOC_TABLE_SIZE = 1000000
MAX_DOC_TABLE_SIZE = 100000000
DEFAULT_SEARCH_POOL_SIZE = 20
DEFAULT_INDEX_POOL_SIZE = 8
DEFAULT_GC_SCAN_SIZE = 100
DEFAULT_MIN_PHONETIC_TERM_LEN = 3


class TimeoutPolicy(Enum):
    """What a query does once its timeout has been exceeded."""

    RETURN = "return"
    FAIL = "fail"

    def __str__(self) -> str:
        return self.value


@dataclass
class ConfigState:
    """
    Current value of every configuration option.

    A freshly constructed instance holds the defaults and is valid without
    any further configuration. Instances are owned by a ``ConfigRegistry``;
    after startup they should only be changed through
    ``ConfigRegistry.set_option``.
    """

    concurrent_mode: bool = True
    ext_load: Optional[str] = None
    enable_gc: bool = True
    min_term_prefix: int = DEFAULT_MIN_TERM_PREFIX
    max_prefix_expansions: int = DEFAULT_MAX_PREFIX_EXPANSIONS
    query_timeout_ms: int = DEFAULT_QUERY_TIMEOUT_MS
    timeout_policy: TimeoutPolicy = TimeoutPolicy.RETURN
    cursor_read_size: int = DEFAULT_CURSOR_READ_SIZE
    cursor_max_idle: int = DEFAULT_CURSOR_MAX_IDLE_MS
    max_doc_table_size: int = DEFAULT_DOC_TABLE_SIZE
    search_pool_size: int = DEFAULT_SEARCH_POOL_SIZE
    index_pool_size: int = DEFAULT_INDEX_POOL_SIZE
    # Set once the pool sizes were given explicitly; disables auto-sizing
    pool_size_no_auto: bool = False
    gc_scan_size: int = DEFAULT_GC_SCAN_SIZE
    min_phonetic_term_len: int = DEFAULT_MIN_PHONETIC_TERM_LEN
    friso_ini: Optional[str] = None

    def copy(self) -> "ConfigState":
        """Return an independent snapshot, e.g. to restore after a failed load."""
        return copy.copy(self)

    def apply_min_threads(self) -> None:
        """Shrink both thread pools to a single thread and pin their size."""
        self.search_pool_size = 1
        self.index_pool_size = 1
        self.pool_size_no_auto = True


def info_string(state: ConfigState) -> str:
    """Return a one-line human readable summary of the main settings."""
    parts = [
        f"concurrency: {'ON' if state.concurrent_mode else 'OFF(SAFEMODE)'}, ",
        f"gc: {'ON' if state.enable_gc else 'OFF'}, ",
        f"prefix min length: {state.min_term_prefix}, ",
        f"prefix max expansions: {state.max_prefix_expansions}, ",
        f"query timeout (ms): {state.query_timeout_ms}, ",
        f"timeout policy: {state.timeout_policy}, ",
        f"cursor read size: {state.cursor_read_size}, ",
        f"cursor max idle (ms): {state.cursor_max_idle}, ",
        f"max doctable size: {state.max_doc_table_size}, ",
        f"search pool size: {state.search_pool_size}, ",
        f"index pool size: {state.index_pool_size}, ",
    ]
    if state.ext_load:
        parts.append(f"ext load: {state.ext_load}, ")
    if state.friso_ini:
        parts.append(f"friso ini: {state.friso_ini}, ")
    return "".join(parts)
