# topmark:header:start
#
#   project      : MimeGlob
#   file         : formats.py
#   file_relpath : src/mimeglob/globs/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Textual registry formats.

shared-mime-info ships two line-oriented serializations of the glob table:

- ``globs`` (v1): ``type:pattern``
- ``globs2`` (v2): ``weight:type:pattern`` or ``weight:type:pattern:cs``

Lines starting with ``#`` and empty lines are comments in both formats.
"""

from __future__ import annotations

from enum import Enum


class GlobFormat(str, Enum):
    """Registry file format.

    The values are the file names used by shared-mime-info databases.

    Attributes:
        V1: ``type:pattern`` lines (``globs``).
        V2: ``weight:type:pattern[:cs]`` lines (``globs2``).
    """

    V1 = "globs"
    V2 = "globs2"

    @classmethod
    def from_name(cls, name: str | None) -> GlobFormat | None:
        """Resolve a format from a user-facing name.

        Accepts ``v1``/``v2`` as well as the file names ``globs``/``globs2``,
        case-insensitively.

        Args:
            name (str | None): Name to resolve.

        Returns:
            GlobFormat | None: The format, or None if ``name`` is None or unknown.
        """
        if name is None:
            return None
        key = name.strip().lower()
        aliases: dict[str, GlobFormat] = {
            "v1": cls.V1,
            "1": cls.V1,
            "globs": cls.V1,
            "v2": cls.V2,
            "2": cls.V2,
            "globs2": cls.V2,
        }
        return aliases.get(key)
