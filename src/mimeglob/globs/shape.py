# topmark:header:start
#
#   project      : MimeGlob
#   file         : shape.py
#   file_relpath : src/mimeglob/globs/shape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pattern classification for shared-mime-info globs.

A raw glob is classified exactly once, when an entry is built, into one of
three shapes:

- `LiteralShape`: no wildcard metacharacters and no leading ``*``
  (e.g. ``Makefile``). Compared by case-folded equality.
- `SuffixShape`: a single leading ``*`` followed by plain text
  (e.g. ``*.gif``). Compared with ``str.endswith``; no regex is involved.
- `FullShape`: anything else containing ``*``, ``?``, ``[`` or ``\\``
  (e.g. ``x*.[ch]``). Compiled once by `compile_glob` and evaluated with
  ``re.Pattern.fullmatch``.

The shapes form a closed union (`PatternShape`). Matching dispatches on the
shape object; the pattern text is never re-inspected after classification.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.core.errors import GlobSyntaxError

logger: MimeGlobLogger = get_logger(__name__)

# Characters that force full glob evaluation (a leading "*" is handled separately).
GLOB_METACHARACTERS: Final[frozenset[str]] = frozenset("\\[*?")


class ShapeKind(Enum):
    """Discriminator of the three pattern shapes.

    Attributes:
        LITERAL: Exact file name, compared case-insensitively.
        SUFFIX: ``*`` followed by plain text; an "ends with" test.
        FULL: General glob with wildcards and/or character classes.
    """

    LITERAL = "literal"
    SUFFIX = "suffix"
    FULL = "full"


@dataclass(frozen=True, slots=True)
class LiteralShape:
    """Exact file name pattern.

    Attributes:
        text (str): The whole pattern.
    """

    text: str

    @property
    def kind(self) -> ShapeKind:
        """Return `ShapeKind.LITERAL`."""
        return ShapeKind.LITERAL

    @property
    def pattern(self) -> str:
        """Return the pattern text this shape was classified from."""
        return self.text

    def matches(self, file_name: str, *, case_sensitive: bool) -> bool:
        """Compare ``file_name`` with the literal, ignoring case.

        Literal names are always compared case-insensitively (full Unicode case
        folding), whatever the entry's case-sensitivity flag says.

        Args:
            file_name (str): File name to test.
            case_sensitive (bool): Entry flag; unused for literals.

        Returns:
            bool: True if the names are equal modulo case.
        """
        return file_name.casefold() == self.text.casefold()


@dataclass(frozen=True, slots=True)
class SuffixShape:
    """``*`` followed by plain text.

    Attributes:
        text (str): The pattern without its leading ``*`` (e.g. ``.gif``).
    """

    text: str
    _folded: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_folded", self.text.lower())

    @property
    def kind(self) -> ShapeKind:
        """Return `ShapeKind.SUFFIX`."""
        return ShapeKind.SUFFIX

    @property
    def pattern(self) -> str:
        """Return the pattern text this shape was classified from."""
        return "*" + self.text

    def matches(self, file_name: str, *, case_sensitive: bool) -> bool:
        """Check whether ``file_name`` ends with the suffix.

        The exact (case-sensitive) suffix is tried first. Case-insensitive
        entries additionally match when the lowercased name ends with the
        lowercased suffix.

        Args:
            file_name (str): File name to test.
            case_sensitive (bool): Whether the owning entry is case-sensitive.

        Returns:
            bool: True if the name ends with the suffix.
        """
        if file_name.endswith(self.text):
            return True
        if case_sensitive:
            return False
        return file_name.lower().endswith(self._folded)


@dataclass(frozen=True, slots=True)
class FullShape:
    """General glob evaluated by a compiled regular expression.

    Attributes:
        text (str): The whole pattern.
        regex (re.Pattern[str]): Compiled matcher; derived from ``text`` and
            excluded from equality.
    """

    text: str
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", compile_glob(self.text))

    @property
    def kind(self) -> ShapeKind:
        """Return `ShapeKind.FULL`."""
        return ShapeKind.FULL

    @property
    def pattern(self) -> str:
        """Return the pattern text this shape was classified from."""
        return self.text

    def matches(self, file_name: str, *, case_sensitive: bool) -> bool:
        """Evaluate the glob against ``file_name``.

        The entry's case-sensitivity flag is not applied here: full globs
        always match exactly as written. Consumers of existing ``globs2``
        databases rely on this, so it is kept as-is.

        Args:
            file_name (str): File name to test.
            case_sensitive (bool): Entry flag; unused for full globs.

        Returns:
            bool: True if the whole name matches the glob.
        """
        return self.regex.fullmatch(file_name) is not None


PatternShape = LiteralShape | SuffixShape | FullShape


def classify(raw: str) -> PatternShape:
    """Classify a raw glob into its `PatternShape`.

    Scans the pattern once: a ``*`` at index 0 marks a suffix candidate; any
    ``\\``, ``[``, ``?`` or a ``*`` elsewhere makes it a full glob. The empty
    string is a (degenerate) literal; rejecting empty patterns is the caller's
    job.

    Args:
        raw (str): Pattern text as found in a registry file.

    Returns:
        PatternShape: The classified shape.

    Raises:
        GlobSyntaxError: If the pattern is a full glob that cannot be compiled.
    """
    maybe_suffix = False
    for idx, ch in enumerate(raw):
        if idx == 0 and ch == "*":
            maybe_suffix = True
        elif ch in GLOB_METACHARACTERS:
            logger.trace("Pattern %r is a full glob (metacharacter at %d)", raw, idx)
            return FullShape(raw)

    if maybe_suffix:
        return SuffixShape(raw[1:])
    return LiteralShape(raw)


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate the character class opening at ``pattern[start]`` (a ``[``).

    Returns:
        tuple[str, int]: The regex fragment and the index just past the closing ``]``.
    """
    i = start + 1
    n = len(pattern)
    negate = False
    if i < n and pattern[i] == "!":
        negate = True
        i += 1
    members_start = i
    # A "]" right after "[" or "[!" is a literal member, not the terminator.
    if i < n and pattern[i] == "]":
        i += 1
    while i < n and pattern[i] != "]":
        i += 1
    if i >= n:
        raise GlobSyntaxError(pattern, start, "unclosed character class")

    members = pattern[members_start:i]
    parts: list[str] = []
    j = 0
    while j < len(members):
        if j + 2 < len(members) and members[j + 1] == "-":
            lo, hi = members[j], members[j + 2]
            # Reversed ranges match nothing.
            if lo <= hi:
                parts.append(f"{re.escape(lo)}-{re.escape(hi)}")
            j += 3
        else:
            parts.append(re.escape(members[j]))
            j += 1

    if not parts:
        fragment = "." if negate else "(?!)"
    else:
        fragment = "[" + ("^" if negate else "") + "".join(parts) + "]"
    return fragment, i + 1


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob into an anchored regular expression.

    Supported syntax: ``*`` (any run of characters, separators and leading
    dots included), ``?`` (exactly one character), ``[...]`` classes with
    ``a-z`` ranges and ``[!...]`` negation, and ``\\`` escaping the next
    character. Matching is case-sensitive.

    Args:
        pattern (str): Glob text.

    Returns:
        re.Pattern[str]: A regex to be used with ``fullmatch``.

    Raises:
        GlobSyntaxError: On an unclosed character class or a dangling ``\\``.
    """
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            # Runs of "*" behave like a single one.
            while i < n and pattern[i] == "*":
                i += 1
            out.append(".*")
            continue
        if ch == "?":
            out.append(".")
        elif ch == "[":
            fragment, i = _translate_class(pattern, i)
            out.append(fragment)
            continue
        elif ch == "\\":
            if i + 1 >= n:
                raise GlobSyntaxError(pattern, i, "dangling escape character")
            i += 1
            out.append(re.escape(pattern[i]))
        else:
            out.append(re.escape(ch))
        i += 1

    regex = "(?s:" + "".join(out) + ")"
    logger.trace("Compiled glob %r to %r", pattern, regex)
    return re.compile(regex)
