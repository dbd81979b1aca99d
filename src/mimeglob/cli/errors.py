# topmark:header:start
#
#   project      : MimeGlob
#   file         : errors.py
#   file_relpath : src/mimeglob/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for MimeGlob CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes (see `mimeglob.cli.exit_codes.ExitCode`).

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from mimeglob.cli.exit_codes import ExitCode
from mimeglob.core.errors import ConfigError, GlobSyntaxError, MimeGlobError, RegistrySourceError


class MimeGlobCliError(click.ClickException):
    """Base class for all MimeGlob CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class MimeGlobUsageError(MimeGlobCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MimeGlobDataError(MimeGlobCliError):
    """Error for malformed glob patterns."""

    exit_code = ExitCode.DATA_ERROR


class MimeGlobFileNotFoundError(MimeGlobCliError):
    """Error when a registry file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MimeGlobIOError(MimeGlobCliError):
    """Error for registry files that exist but cannot be read or decoded."""

    exit_code = ExitCode.IO_ERROR


class MimeGlobConfigError(MimeGlobCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class MimeGlobUnexpectedError(MimeGlobCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def to_cli_error(exc: MimeGlobError) -> MimeGlobCliError:
    """Map a core error to the CLI error carrying the matching exit code.

    Args:
        exc (MimeGlobError): Error raised by the core or the config layer.

    Returns:
        MimeGlobCliError: The CLI error to raise in its place.
    """
    if isinstance(exc, ConfigError):
        return MimeGlobConfigError(str(exc))
    if isinstance(exc, GlobSyntaxError):
        return MimeGlobDataError(str(exc))
    if isinstance(exc, RegistrySourceError):
        if isinstance(exc.__cause__, FileNotFoundError):
            return MimeGlobFileNotFoundError(str(exc))
        return MimeGlobIOError(str(exc))
    return MimeGlobUnexpectedError(str(exc))
