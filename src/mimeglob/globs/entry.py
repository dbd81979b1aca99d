# topmark:header:start
#
#   project      : MimeGlob
#   file         : entry.py
#   file_relpath : src/mimeglob/globs/entry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glob registry entries.

A `PatternEntry` pairs a classified pattern with the MIME type it identifies,
a priority weight and a case-sensitivity flag. Entries are immutable; they
compare *equal* on all four fields but *order* on weight alone, which is what
lookups use to rank matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from mimeglob.constants import (
    CASE_SENSITIVE_FLAG,
    COMMENT_PREFIX,
    DEFAULT_WEIGHT,
    FIELD_SEPARATOR,
    MAX_WEIGHT,
)
from mimeglob.globs.formats import GlobFormat
from mimeglob.globs.shape import PatternShape, ShapeKind, classify

if TYPE_CHECKING:
    from typing import Any

# Non-negative base-10 integer; no whitespace, no underscores.
_WEIGHT_RE: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+", re.ASCII)


def _parse_weight(text: str) -> int | None:
    if not _WEIGHT_RE.fullmatch(text):
        return None
    weight = int(text)
    if weight > MAX_WEIGHT:
        return None
    return weight


def _check_serializable(value: str, what: str) -> None:
    if not value:
        raise ValueError(f"Cannot serialize an entry with an empty {what}")
    if FIELD_SEPARATOR in value or "\n" in value or "\r" in value:
        raise ValueError(f"Cannot serialize {what} {value!r}: contains a field or line separator")


@dataclass(frozen=True, slots=True)
class PatternEntry:
    """One ``pattern -> type`` association.

    Attributes:
        shape (PatternShape): Classified pattern.
        mime_type (str): MIME type identified by the pattern.
        weight (int): Priority; higher wins when several entries match.
        case_sensitive (bool): Whether suffix matching is case-sensitive.
    """

    shape: PatternShape
    mime_type: str
    weight: int = DEFAULT_WEIGHT
    case_sensitive: bool = False

    # Ordering is by weight only; equality stays field-wise.
    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PatternEntry):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, PatternEntry):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, PatternEntry):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, PatternEntry):
            return NotImplemented
        return self.weight >= other.weight

    @property
    def pattern(self) -> str:
        """Return the original pattern text."""
        return self.shape.pattern

    @property
    def kind(self) -> ShapeKind:
        """Return the kind of the classified pattern."""
        return self.shape.kind

    # ------------------------------ Constructors ------------------------------

    @classmethod
    def from_parts(
        cls,
        mime_type: str,
        pattern: str,
        weight: int = DEFAULT_WEIGHT,
        case_sensitive: bool = False,
    ) -> PatternEntry:
        """Build an entry from its parts, classifying ``pattern``.

        Args:
            mime_type (str): MIME type identified by the pattern.
            pattern (str): Raw glob text.
            weight (int): Priority weight.
            case_sensitive (bool): Case-sensitivity flag.

        Returns:
            PatternEntry: The new entry.

        Raises:
            GlobSyntaxError: If ``pattern`` is a malformed full glob.
        """
        return cls(
            shape=classify(pattern),
            mime_type=mime_type,
            weight=weight,
            case_sensitive=case_sensitive,
        )

    @classmethod
    def from_v1_line(cls, line: str) -> PatternEntry | None:
        """Parse a ``globs`` (v1) line: ``type:pattern``.

        Exactly two non-empty fields are required; a pattern containing ``:``
        cannot be expressed in this format.

        Args:
            line (str): One line, without its line terminator.

        Returns:
            PatternEntry | None: The entry, or None if the line is malformed.

        Raises:
            GlobSyntaxError: If the pattern is a malformed full glob.
        """
        if not line or FIELD_SEPARATOR not in line:
            return None

        fields: list[str] = line.split(FIELD_SEPARATOR)
        if len(fields) != 2:
            return None

        mime_type, pattern = fields
        if not mime_type or not pattern:
            return None

        return cls.from_parts(mime_type, pattern)

    @classmethod
    def from_v2_line(cls, line: str) -> PatternEntry | None:
        """Parse a ``globs2`` (v2) line: ``weight:type:pattern[:cs]``.

        Args:
            line (str): One line, without its line terminator.

        Returns:
            PatternEntry | None: The entry, or None if the line is malformed
                (bad field count, negative or non-numeric weight, empty type
                or pattern, or a fourth field other than ``cs``).

        Raises:
            GlobSyntaxError: If the pattern is a malformed full glob.
        """
        if not line or FIELD_SEPARATOR not in line:
            return None

        fields: list[str] = line.split(FIELD_SEPARATOR)
        if len(fields) not in (3, 4):
            return None

        weight = _parse_weight(fields[0])
        if weight is None:
            return None

        mime_type, pattern = fields[1], fields[2]
        if not mime_type or not pattern:
            return None

        case_sensitive = False
        if len(fields) == 4:
            if fields[3] != CASE_SENSITIVE_FLAG:
                return None
            case_sensitive = True

        return cls.from_parts(mime_type, pattern, weight, case_sensitive)

    @classmethod
    def from_line(cls, line: str, fmt: GlobFormat) -> PatternEntry | None:
        """Parse a line in the given registry format."""
        if fmt is GlobFormat.V1:
            return cls.from_v1_line(line)
        return cls.from_v2_line(line)

    # ----------------------------- Serialization ------------------------------

    def to_v1_line(self) -> str:
        """Render the entry as a ``globs`` (v1) line.

        Returns:
            str: ``type:pattern``.

        Raises:
            ValueError: If the entry carries a non-default weight or the
                case-sensitive flag (v1 cannot express them), or if a field
                cannot be written unambiguously.
        """
        if self.weight != DEFAULT_WEIGHT or self.case_sensitive:
            raise ValueError(
                f"Entry {self.pattern!r} -> {self.mime_type} (weight {self.weight}, "
                f"cs={self.case_sensitive}) cannot be expressed in the v1 format"
            )
        _check_serializable(self.mime_type, "MIME type")
        _check_serializable(self.pattern, "pattern")
        if self.mime_type.startswith(COMMENT_PREFIX):
            raise ValueError(f"MIME type {self.mime_type!r} would be read back as a comment")
        return f"{self.mime_type}{FIELD_SEPARATOR}{self.pattern}"

    def to_v2_line(self) -> str:
        """Render the entry as a ``globs2`` (v2) line.

        Returns:
            str: ``weight:type:pattern``, with ``:cs`` appended for
                case-sensitive entries.

        Raises:
            ValueError: If the weight is out of range or a field cannot be
                written unambiguously.
        """
        if not 0 <= self.weight <= MAX_WEIGHT:
            raise ValueError(f"Weight {self.weight} is outside the v2 range 0..{MAX_WEIGHT}")
        _check_serializable(self.mime_type, "MIME type")
        _check_serializable(self.pattern, "pattern")
        fields: list[str] = [str(self.weight), self.mime_type, self.pattern]
        if self.case_sensitive:
            fields.append(CASE_SENSITIVE_FLAG)
        return FIELD_SEPARATOR.join(fields)

    def to_line(self, fmt: GlobFormat) -> str:
        """Render the entry in the given registry format."""
        if fmt is GlobFormat.V1:
            return self.to_v1_line()
        return self.to_v2_line()

    # -------------------------------- Matching --------------------------------

    def matches(self, file_name: str) -> bool:
        """Return True if ``file_name`` matches this entry's pattern.

        Literal patterns ignore case, suffix patterns honor `case_sensitive`,
        full globs match exactly as written (the flag is not applied).
        """
        return self.shape.matches(file_name, case_sensitive=self.case_sensitive)

    def describe(self) -> str:
        """Return a one-line human-readable description of the entry."""
        return (
            f"{self.kind.value:<7} {self.pattern!r} -> {self.mime_type} "
            f"(weight: {self.weight}, cs: {str(self.case_sensitive).lower()})"
        )
