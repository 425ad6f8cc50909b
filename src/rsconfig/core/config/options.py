"""Declared configuration options, in the order they are reported."""

from __future__ import annotations

from typing import Tuple

from .kinds import EnumOption, FlagOption, IntRangeOption, PathOption
from .variables import ConfigVar
from .state import MAX_DOC_TABLE_SIZE, TimeoutPolicy

# Both thread options pin the pool sizes so they are not auto-sized later
_EXPLICIT_POOL_SIZE = {"pool_size_no_auto": True}

DEFAULT_OPTIONS: Tuple[ConfigVar, ...] = (
    ConfigVar(
        name="EXTLOAD",
        help_text="Load extension scoring/expansion module",
        kind=PathOption("ext_load"),
        immutable=True,
    ),
    ConfigVar(
        name="SAFEMODE",
        help_text="Perform all operations in main thread",
        kind=FlagOption("concurrent_mode", enabled_value=False),
        immutable=True,
    ),
    ConfigVar(
        name="NOGC",
        help_text="Disable garbage collection (for this process)",
        kind=FlagOption("enable_gc", enabled_value=False),
    ),
    ConfigVar(
        name="MINPREFIX",
        help_text="Set the minimum prefix for expansions (`*`)",
        kind=IntRangeOption("min_term_prefix", min_value=1),
    ),
    ConfigVar(
        name="MAXDOCTABLESIZE",
        help_text="Maximum runtime document table size (for this process)",
        kind=IntRangeOption(
            "max_doc_table_size", min_value=1, max_value=MAX_DOC_TABLE_SIZE
        ),
        immutable=True,
    ),
    ConfigVar(
        name="MAXEXPANSIONS",
        help_text="Maximum prefix expansions to be used in a query",
        kind=IntRangeOption("max_prefix_expansions", min_value=1),
    ),
    ConfigVar(
        name="TIMEOUT",
        help_text="Query (search) timeout",
        kind=IntRangeOption("query_timeout_ms", min_value=0),
    ),
    ConfigVar(
        name="INDEX_THREADS",
        help_text=(
            "Create at most this number of background indexing threads "
            "(will not necessarily parallelize indexing)"
        ),
        kind=IntRangeOption("index_pool_size", min_value=1, extra=_EXPLICIT_POOL_SIZE),
        immutable=True,
    ),
    ConfigVar(
        name="SEARCH_THREADS",
        help_text=(
            "Create at most this number of search threads "
            "(will not necessarily parallelize search)"
        ),
        kind=IntRangeOption("search_pool_size", min_value=1, extra=_EXPLICIT_POOL_SIZE),
        immutable=True,
    ),
    ConfigVar(
        name="FRISOINI",
        help_text="Path to Chinese dictionary configuration file (for Chinese tokenization)",
        kind=PathOption("friso_ini"),
        immutable=True,
    ),
    ConfigVar(
        name="ON_TIMEOUT",
        help_text="Action to perform when search timeout is exceeded (choose RETURN or FAIL)",
        kind=EnumOption(
            "timeout_policy",
            choices={"RETURN": TimeoutPolicy.RETURN, "FAIL": TimeoutPolicy.FAIL},
        ),
    ),
    ConfigVar(
        name="GCSCANSIZE",
        help_text="Scan this many documents at a time during every GC iteration",
        kind=IntRangeOption("gc_scan_size", min_value=1),
    ),
    ConfigVar(
        name="MIN_PHONETIC_TERM_LEN",
        help_text="Minimum length of term to be considered for phonetic matching",
        kind=IntRangeOption("min_phonetic_term_len", min_value=1),
    ),
)
