# topmark:header:start
#
#   project      : MimeGlob
#   file         : constants.py
#   file_relpath : src/mimeglob/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

MIMEGLOB_VERSION: str = get_version("mimeglob")

# Default weight for patterns that do not declare one (v1 lines, inline entries).
DEFAULT_WEIGHT: Final[int] = 50
# Largest weight accepted from a globs2 line (signed 32-bit range).
MAX_WEIGHT: Final[int] = 2**31 - 1

FIELD_SEPARATOR: Final[str] = ":"
COMMENT_PREFIX: Final[str] = "#"
CASE_SENSITIVE_FLAG: Final[str] = "cs"

# Config file names, in lookup order.
MIMEGLOB_TOML_NAME: Final[str] = "mimeglob.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# shared-mime-info database layout under each XDG data directory.
XDG_MIME_SUBDIR: Final[str] = "mime"
DEFAULT_XDG_DATA_HOME: Final[str] = "~/.local/share"
DEFAULT_XDG_DATA_DIRS: Final[str] = "/usr/local/share:/usr/share"

LOG_LEVEL_ENV: Final[str] = "MIMEGLOB_LOG_LEVEL"
