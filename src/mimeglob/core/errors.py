# topmark:header:start
#
#   project      : MimeGlob
#   file         : errors.py
#   file_relpath : src/mimeglob/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the MimeGlob core.

Two conditions propagate out of the glob engine:

- `GlobSyntaxError`: a pattern looks like a full glob but cannot be compiled
  (e.g. an unclosed ``[`` character class). Registry files are trusted input,
  so such a pattern means the data source is corrupt.
- `RegistrySourceError`: a registry file cannot be opened, read or decoded.

A malformed registry *line* is not an error: loaders skip it and carry on.
A lookup without a match is not an error either; it returns ``None``.

`ConfigError` covers unreadable or unparsable TOML configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class MimeGlobError(Exception):
    """Base class for all MimeGlob core errors."""


class ConfigError(MimeGlobError):
    """A configuration file cannot be read or parsed."""


class GlobSyntaxError(MimeGlobError, ValueError):
    """A full glob pattern is malformed.

    Attributes:
        pattern (str): The offending pattern text.
        position (int): Index in ``pattern`` where the problem was detected.
        reason (str): Short description of the problem.
    """

    def __init__(self, pattern: str, position: int, reason: str) -> None:
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid glob pattern {pattern!r} at index {position}: {reason}")


class RegistrySourceError(MimeGlobError, OSError):
    """A registry source (``globs`` / ``globs2`` file) cannot be read.

    Attributes:
        path (Path): Path of the source that failed.
        reason (str): Short description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read glob registry {path}: {reason}")
