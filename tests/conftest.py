"""
Shared pytest fixtures and configuration for rsconfig tests.
"""

import sys
from pathlib import Path

import pytest

# Put `src/` first so `import rsconfig` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from rsconfig.core.config import ConfigRegistry, ConfigState  # noqa: E402
from rsconfig.core.config.env import MIN_THREADS_ENV  # noqa: E402
from rsconfig.core.utils.logger import LOG_LEVEL_ENV, reset_logging  # noqa: E402


# ============================================================================
# Registry Fixtures
# ============================================================================

@pytest.fixture
def registry() -> ConfigRegistry:
    """A registry over the declared options with default values."""
    return ConfigRegistry()


@pytest.fixture
def defaults() -> ConfigState:
    """Pristine default values to compare against."""
    return ConfigState()


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Remove rsconfig environment variables and start outside any project .env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(MIN_THREADS_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield


@pytest.fixture(autouse=True)
def fresh_logging():
    """Drop handlers bound to streams from a previous test."""
    reset_logging()
    yield
    reset_logging()


# ============================================================================
# CLI Fixtures
# ============================================================================

@pytest.fixture
def cli_runner():
    """Typer's CliRunner for invoking the command line."""
    from typer.testing import CliRunner

    return CliRunner()
