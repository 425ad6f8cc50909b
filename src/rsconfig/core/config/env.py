"""Environment adapter for startup configuration."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

MIN_THREADS_ENV = "RS_MIN_THREADS"


def load_environment(dotenv_path: Optional[str] = None) -> None:
    """
    Load a ``.env`` file into ``os.environ`` without overriding set variables.

    Without an explicit path the search starts in the current working
    directory and walks up from there.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)


def min_threads_requested(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when ``RS_MIN_THREADS`` is present, whatever its value."""
    env = os.environ if environ is None else environ
    return MIN_THREADS_ENV in env
