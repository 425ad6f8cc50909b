import pytest

from rsconfig.core.config import (
    ComputedOption,
    ConfigError,
    ConfigRegistry,
    ConfigState,
    ConfigVar,
    DEFAULT_OPTIONS,
    ImmutableOptionError,
    IntRangeOption,
    InvalidEnumValueError,
    InvalidNumberError,
    MissingArgumentError,
    OutOfRangeError,
    ReadOnlyOptionError,
    TimeoutPolicy,
    UnknownOptionError,
)

DECLARED_NAMES = [
    "EXTLOAD",
    "SAFEMODE",
    "NOGC",
    "MINPREFIX",
    "MAXDOCTABLESIZE",
    "MAXEXPANSIONS",
    "TIMEOUT",
    "INDEX_THREADS",
    "SEARCH_THREADS",
    "FRISOINI",
    "ON_TIMEOUT",
    "GCSCANSIZE",
    "MIN_PHONETIC_TERM_LEN",
]


def _registry_with_computed_option() -> ConfigRegistry:
    variables = DEFAULT_OPTIONS + (
        ConfigVar(
            name="POOLS",
            help_text="Both pool sizes",
            kind=ComputedOption(
                lambda state: f"{state.search_pool_size}/{state.index_pool_size}"
            ),
        ),
    )
    return ConfigRegistry(variables)


# ============================================================================
# Option table
# ============================================================================

def test_declared_options_keep_their_order():
    assert [var.name for var in DEFAULT_OPTIONS] == DECLARED_NAMES


def test_mutability_classes():
    immutable = {var.name for var in DEFAULT_OPTIONS if var.immutable}
    assert immutable == {
        "EXTLOAD",
        "SAFEMODE",
        "MAXDOCTABLESIZE",
        "INDEX_THREADS",
        "SEARCH_THREADS",
        "FRISOINI",
    }
    flags = {var.name for var in DEFAULT_OPTIONS if var.is_flag}
    assert flags == {"SAFEMODE", "NOGC"}
    assert all(var.settable for var in DEFAULT_OPTIONS)


def test_duplicate_names_are_rejected():
    with pytest.raises(ValueError):
        ConfigRegistry(DEFAULT_OPTIONS + (DEFAULT_OPTIONS[0],))


def test_registries_do_not_share_state():
    first = ConfigRegistry()
    second = ConfigRegistry()
    first.load_from_tokens(["MINPREFIX", "5"])
    assert second.state.min_term_prefix == 2
    assert not second.is_modified("MINPREFIX")


# ============================================================================
# Bulk load
# ============================================================================

def test_empty_load_keeps_defaults(registry, defaults):
    registry.load_from_tokens([])
    assert registry.state == defaults
    assert not any(registry.is_modified(name) for name in DECLARED_NAMES)


def test_unknown_option_fails_without_changes(registry, defaults):
    with pytest.raises(UnknownOptionError) as excinfo:
        registry.load_from_tokens(["NOSUCHOPTION"])
    assert excinfo.value.message == "No such configuration option `NOSUCHOPTION`"
    assert excinfo.value.option == "NOSUCHOPTION"
    assert registry.state == defaults


def test_option_names_are_case_sensitive(registry):
    with pytest.raises(UnknownOptionError):
        registry.load_from_tokens(["minprefix", "3"])


def test_missing_value(registry):
    with pytest.raises(MissingArgumentError) as excinfo:
        registry.load_from_tokens(["MINPREFIX"])
    assert excinfo.value.message == "MINPREFIX: Bad value"
    assert excinfo.value.option == "MINPREFIX"
    assert excinfo.value.detail == "Missing argument"
    assert not registry.is_modified("MINPREFIX")


def test_value_below_minimum(registry):
    with pytest.raises(OutOfRangeError) as excinfo:
        registry.load_from_tokens(["MINPREFIX", "0"])
    assert excinfo.value.message == "MINPREFIX: Bad value"
    assert registry.state.min_term_prefix == 2


def test_value_above_maximum(registry):
    with pytest.raises(OutOfRangeError):
        registry.load_from_tokens(["MAXDOCTABLESIZE", "100000001"])
    registry.load_from_tokens(["MAXDOCTABLESIZE", "100000000"])
    assert registry.state.max_doc_table_size == 100000000


def test_value_beyond_64_bits(registry):
    with pytest.raises(OutOfRangeError) as excinfo:
        registry.load_from_tokens(["MINPREFIX", str(2**70)])
    assert excinfo.value.message == "MINPREFIX: Bad value"
    assert registry.state.min_term_prefix == 2
    assert not registry.is_modified("MINPREFIX")


def test_non_numeric_value(registry):
    with pytest.raises(InvalidNumberError):
        registry.load_from_tokens(["GCSCANSIZE", "lots"])


def test_valid_value_marks_modified(registry):
    registry.load_from_tokens(["MINPREFIX", "3"])
    assert registry.state.min_term_prefix == 3
    assert registry.is_modified("MINPREFIX")
    assert not registry.is_modified("MAXEXPANSIONS")


def test_timeout_accepts_zero(registry):
    registry.load_from_tokens(["TIMEOUT", "0"])
    assert registry.state.query_timeout_ms == 0


def test_mixed_arity_load(registry):
    registry.load_from_tokens(
        [
            "SAFEMODE",
            "EXTLOAD",
            "/opt/ext.so",
            "NOGC",
            "MAXEXPANSIONS",
            "50",
            "ON_TIMEOUT",
            "fail",
            "SEARCH_THREADS",
            "2",
            "FRISOINI",
            "/etc/friso.ini",
            "MIN_PHONETIC_TERM_LEN",
            "5",
        ]
    )
    state = registry.state
    assert state.concurrent_mode is False
    assert state.ext_load == "/opt/ext.so"
    assert state.enable_gc is False
    assert state.max_prefix_expansions == 50
    assert state.timeout_policy is TimeoutPolicy.FAIL
    assert state.search_pool_size == 2
    assert state.pool_size_no_auto is True
    assert state.friso_ini == "/etc/friso.ini"
    assert state.min_phonetic_term_len == 5
    for name in ["SAFEMODE", "EXTLOAD", "NOGC", "ON_TIMEOUT", "FRISOINI"]:
        assert registry.is_modified(name)


def test_failed_load_keeps_earlier_options(registry):
    with pytest.raises(InvalidEnumValueError):
        registry.load_from_tokens(["MINPREFIX", "4", "ON_TIMEOUT", "bogus", "NOGC"])
    assert registry.state.min_term_prefix == 4
    assert registry.is_modified("MINPREFIX")
    assert not registry.is_modified("ON_TIMEOUT")
    assert registry.state.enable_gc is True


def test_snapshot_restores_after_failed_load(registry, defaults):
    snapshot = registry.state.copy()
    with pytest.raises(ConfigError):
        registry.load_from_tokens(["MINPREFIX", "4", "TIMEOUT", "-1"])
    registry.state = snapshot
    assert registry.state == defaults


def test_value_token_is_not_read_as_option_name(registry):
    registry.load_from_tokens(["EXTLOAD", "NOGC"])
    assert registry.state.ext_load == "NOGC"
    assert registry.state.enable_gc is True


def test_read_only_option_cannot_be_loaded():
    registry = _registry_with_computed_option()
    with pytest.raises(ReadOnlyOptionError) as excinfo:
        registry.load_from_tokens(["POOLS", "1"])
    assert excinfo.value.message == "POOLS: Option is read-only"


# ============================================================================
# Environment override
# ============================================================================

def test_min_threads_override(registry):
    registry.load_from_tokens([], min_threads=True)
    assert registry.state.search_pool_size == 1
    assert registry.state.index_pool_size == 1
    assert registry.state.pool_size_no_auto is True


def test_tokens_take_precedence_over_min_threads(registry):
    registry.load_from_tokens(["INDEX_THREADS", "4"], min_threads=True)
    assert registry.state.index_pool_size == 4
    assert registry.state.search_pool_size == 1


def test_min_threads_override_survives_failed_load(registry):
    with pytest.raises(UnknownOptionError):
        registry.load_from_tokens(["BOGUS"], min_threads=True)
    assert registry.state.search_pool_size == 1
    assert registry.state.index_pool_size == 1


# ============================================================================
# Runtime set / get
# ============================================================================

def test_set_immutable_option_always_fails(registry):
    with pytest.raises(ImmutableOptionError) as excinfo:
        registry.set_option("EXTLOAD", ["/opt/ext.so"])
    assert excinfo.value.message == "Option not settable at runtime"

    registry.load_from_tokens(["EXTLOAD", "/opt/ext.so"])
    with pytest.raises(ImmutableOptionError):
        registry.set_option("EXTLOAD", ["/opt/other.so"])
    assert registry.state.ext_load == "/opt/ext.so"


def test_set_unknown_option(registry):
    with pytest.raises(UnknownOptionError) as excinfo:
        registry.set_option("NOSUCHOPTION", ["1"])
    assert excinfo.value.message == "No such option"


def test_set_on_timeout_case_insensitive(registry):
    registry.set_option("ON_TIMEOUT", ["fail"])
    assert registry.state.timeout_policy is TimeoutPolicy.FAIL
    registry.set_option("ON_TIMEOUT", ["return"])
    assert registry.state.timeout_policy is TimeoutPolicy.RETURN
    assert registry.get_option("ON_TIMEOUT") == "return"


def test_set_on_timeout_rejects_unknown_value(registry):
    with pytest.raises(InvalidEnumValueError) as excinfo:
        registry.set_option("ON_TIMEOUT", ["bogus"])
    assert excinfo.value.option == "ON_TIMEOUT"
    assert registry.state.timeout_policy is TimeoutPolicy.RETURN


def test_set_returns_offset_after_consumed_tokens(registry):
    assert registry.set_option("TIMEOUT", ["SET", "TIMEOUT", "250"], offset=2) == 3
    assert registry.state.query_timeout_ms == 250
    assert registry.set_option("NOGC", ["x"]) == 0
    assert registry.state.enable_gc is False


def test_set_validates_like_load(registry):
    with pytest.raises(OutOfRangeError):
        registry.set_option("MINPREFIX", ["0"])
    with pytest.raises(MissingArgumentError):
        registry.set_option("MINPREFIX", [])
    assert registry.state.min_term_prefix == 2


def test_set_does_not_mark_modified(registry):
    registry.set_option("MINPREFIX", ["6"])
    assert registry.state.min_term_prefix == 6
    assert not registry.is_modified("MINPREFIX")


def test_set_read_only_option():
    registry = _registry_with_computed_option()
    with pytest.raises(ReadOnlyOptionError):
        registry.set_option("POOLS", [])


def test_get_option(registry):
    assert registry.get_option("MINPREFIX") == "2"
    assert registry.get_option("FRISOINI") is None
    assert registry.get_option("SAFEMODE") == "false"
    with pytest.raises(UnknownOptionError):
        registry.get_option("nope")


@pytest.mark.parametrize(
    "name, token",
    [
        ("MINPREFIX", "7"),
        ("MAXEXPANSIONS", "1000"),
        ("TIMEOUT", "0"),
        ("GCSCANSIZE", "25"),
        ("MIN_PHONETIC_TERM_LEN", "4"),
        ("ON_TIMEOUT", "FAIL"),
    ],
)
def test_serialized_value_parses_back_to_same_value(registry, name, token):
    registry.set_option(name, [token])
    rendered = registry.get_option(name)
    other = ConfigRegistry()
    other.set_option(name, [rendered])
    assert other.state == registry.state


# ============================================================================
# Dump
# ============================================================================

def test_dump_all_without_help(registry):
    entries = registry.dump_option("*", include_help=False)
    assert [entry[0] for entry in entries] == DECLARED_NAMES
    assert all(len(entry) == 2 for entry in entries)
    assert entries[0] == ["EXTLOAD", None]
    assert ["MINPREFIX", "2"] in entries
    assert ["SAFEMODE", "false"] in entries
    assert ["ON_TIMEOUT", "return"] in entries


def test_dump_single_option_with_help(registry):
    registry.load_from_tokens(["FRISOINI", "/etc/friso.ini"])
    assert registry.dump_option("FRISOINI", include_help=True) == [
        [
            "FRISOINI",
            "Description",
            "Path to Chinese dictionary configuration file (for Chinese tokenization)",
            "Value",
            "/etc/friso.ini",
        ]
    ]


def test_dump_help_reports_no_value(registry):
    entry = registry.dump_option("EXTLOAD", include_help=True)[0]
    assert entry[3] == "Value"
    assert entry[4] is None


def test_dump_unknown_option_is_empty(registry):
    assert registry.dump_option("NOSUCHOPTION") == []


def test_dump_computed_option():
    registry = _registry_with_computed_option()
    assert registry.dump_option("POOLS") == [["POOLS", "20/8"]]


def test_registry_info_string_tracks_state():
    registry = ConfigRegistry(state=ConfigState(min_term_prefix=9))
    assert "prefix min length: 9, " in registry.info_string()
