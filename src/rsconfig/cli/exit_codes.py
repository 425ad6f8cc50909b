"""
Standardized exit codes for rsconfig CLI commands.

Configuration errors (unknown option, bad value, immutable option) get their
own code so scripts can tell them apart from other failures.
"""

from typing import Optional

import typer


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_USER_CANCEL = 130  # Standard for SIGINT (Ctrl+C)


class CliExit(typer.Exit):
    """
    CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.error("Unexpected arguments")
        raise CliExit.config_error("MINPREFIX: Bad value")
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            typer.echo(message, err=code != EXIT_SUCCESS)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        """Create an error exit."""
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Create a configuration error exit."""
        return cls(EXIT_CONFIG_ERROR, message)
