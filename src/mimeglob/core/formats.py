# topmark:header:start
#
#   project      : MimeGlob
#   file         : formats.py
#   file_relpath : src/mimeglob/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats shared by CLI commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable).
        NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).

    Notes:
        - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
        - Use with `mimeglob.cli.cli_types.EnumChoiceParam` to parse ``--format``.
    """

    TEXT = "text"
    JSON = "json"
    NDJSON = "ndjson"

    @property
    def is_machine(self) -> bool:
        """Return True for machine-readable formats."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)
