# topmark:header:start
#
#   project      : MimeGlob
#   file         : keys.py
#   file_relpath : src/mimeglob/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for MimeGlob configuration.

These constants are the external configuration schema, as it appears in
``mimeglob.toml`` and in ``[tool.mimeglob]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by MimeGlob configuration.

    Example:
        ```toml
        [sources]
        globs = ["data/globs"]
        globs2 = ["data/globs2"]
        system = true
        strict = false

        [[patterns]]
        type = "text/x-rust"
        pattern = "*.rs"
        weight = 60
        case_sensitive = false
        ```
    """

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "mimeglob"

    # [sources]
    SECTION_SOURCES: Final[str] = "sources"

    KEY_GLOBS: Final[str] = "globs"
    KEY_GLOBS2: Final[str] = "globs2"
    KEY_SYSTEM: Final[str] = "system"
    KEY_STRICT: Final[str] = "strict"

    # [[patterns]]
    SECTION_PATTERNS: Final[str] = "patterns"

    KEY_TYPE: Final[str] = "type"
    KEY_PATTERN: Final[str] = "pattern"
    KEY_WEIGHT: Final[str] = "weight"
    KEY_CASE_SENSITIVE: Final[str] = "case_sensitive"
