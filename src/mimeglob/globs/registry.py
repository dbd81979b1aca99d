# topmark:header:start
#
#   project      : MimeGlob
#   file         : registry.py
#   file_relpath : src/mimeglob/globs/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glob registry and lookup.

`PatternRegistry` is an append-only list of `PatternEntry` values. It is
meant to be built once (from one or more ``globs`` / ``globs2`` sources and/or
direct entries) and then queried read-only:

>> registry = PatternRegistry()
>> registry.load_v2_file(Path("/usr/share/mime/globs2"))
>> registry.lookup("report.PDF")
['application/pdf']

Lookups return every matching type, highest weight first. Ties keep
registration order. Nothing is deduplicated; the registry does no locking.
"""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING

from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.constants import COMMENT_PREFIX
from mimeglob.globs.entry import PatternEntry
from mimeglob.globs.formats import GlobFormat
from mimeglob.globs.sources import read_source_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

logger: MimeGlobLogger = get_logger(__name__)

_by_weight = attrgetter("weight")


def parse_lines(lines: Iterable[str], fmt: GlobFormat) -> list[PatternEntry]:
    """Parse registry lines into entries.

    Line terminators are stripped. Empty lines and ``#`` comments are skipped
    without being parsed; lines the format rejects are skipped and logged.

    Args:
        lines (Iterable[str]): Lines of a registry source (an open text file works).
        fmt (GlobFormat): Format of the lines.

    Returns:
        list[PatternEntry]: Parsed entries, in source order.

    Raises:
        GlobSyntaxError: If a well-formed line carries a malformed full glob.
    """
    entries: list[PatternEntry] = []
    skipped = 0
    for lineno, raw in enumerate(lines, start=1):
        line: str = raw.rstrip("\r\n")
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        entry: PatternEntry | None = PatternEntry.from_line(line, fmt)
        if entry is None:
            skipped += 1
            logger.debug("Skipping malformed %s line %d: %r", fmt.value, lineno, line)
            continue

        logger.trace("Parsed %s line %d: %s", fmt.value, lineno, entry.describe())
        entries.append(entry)

    if skipped:
        logger.debug("Skipped %d malformed %s line(s)", skipped, fmt.value)
    return entries


def parse_v1_lines(lines: Iterable[str]) -> list[PatternEntry]:
    """Parse ``globs`` (v1) lines; see `parse_lines`."""
    return parse_lines(lines, GlobFormat.V1)


def parse_v2_lines(lines: Iterable[str]) -> list[PatternEntry]:
    """Parse ``globs2`` (v2) lines; see `parse_lines`."""
    return parse_lines(lines, GlobFormat.V2)


class PatternRegistry:
    """Append-only collection of glob entries with weighted lookup.

    Attributes:
        entries (tuple[PatternEntry, ...]): Snapshot of the registered entries,
            in registration order.
    """

    def __init__(self, entries: Iterable[PatternEntry] = ()) -> None:
        self._entries: list[PatternEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._entries)} entries>)"

    @property
    def entries(self) -> tuple[PatternEntry, ...]:
        """Return the registered entries, in registration order."""
        return tuple(self._entries)

    # -------------------------------- Building --------------------------------

    def add(self, entry: PatternEntry) -> None:
        """Append a single entry."""
        self._entries.append(entry)

    def add_all(self, entries: Iterable[PatternEntry]) -> None:
        """Append several entries, keeping their order."""
        self._entries.extend(entries)

    def load(self, lines: Iterable[str], fmt: GlobFormat) -> list[PatternEntry]:
        """Parse registry lines and append the resulting entries.

        Args:
            lines (Iterable[str]): Lines of a registry source.
            fmt (GlobFormat): Format of the lines.

        Returns:
            list[PatternEntry]: The entries that were added.

        Raises:
            GlobSyntaxError: If a well-formed line carries a malformed full glob.
        """
        fragment: list[PatternEntry] = parse_lines(lines, fmt)
        self.add_all(fragment)
        return fragment

    def load_v1(self, lines: Iterable[str]) -> list[PatternEntry]:
        """Load ``globs`` (v1) lines; see `load`."""
        return self.load(lines, GlobFormat.V1)

    def load_v2(self, lines: Iterable[str]) -> list[PatternEntry]:
        """Load ``globs2`` (v2) lines; see `load`."""
        return self.load(lines, GlobFormat.V2)

    def load_file(self, path: Path, fmt: GlobFormat) -> list[PatternEntry]:
        """Read a registry file and append its entries.

        The file is read completely before any entry is added, so a read
        failure leaves the registry untouched.

        Args:
            path (Path): Registry file to read.
            fmt (GlobFormat): Format of the file.

        Returns:
            list[PatternEntry]: The entries that were added.

        Raises:
            RegistrySourceError: If the file cannot be opened, read or decoded.
            GlobSyntaxError: If a well-formed line carries a malformed full glob.
        """
        lines: list[str] = read_source_lines(path)
        fragment: list[PatternEntry] = self.load(lines, fmt)
        logger.debug("Loaded %d %s entries from %s", len(fragment), fmt.value, path)
        return fragment

    def load_v1_file(self, path: Path) -> list[PatternEntry]:
        """Read a ``globs`` (v1) file; see `load_file`."""
        return self.load_file(path, GlobFormat.V1)

    def load_v2_file(self, path: Path) -> list[PatternEntry]:
        """Read a ``globs2`` (v2) file; see `load_file`."""
        return self.load_file(path, GlobFormat.V2)

    # --------------------------------- Lookup ---------------------------------

    def lookup_entries(self, file_name: str) -> list[PatternEntry]:
        """Return the entries matching ``file_name``, highest weight first.

        The sort is stable: entries of equal weight keep registration order.

        Args:
            file_name (str): File name (not a path) to classify.

        Returns:
            list[PatternEntry]: Matching entries; empty if nothing matched.
        """
        matching: list[PatternEntry] = [e for e in self._entries if e.matches(file_name)]
        matching.sort(key=_by_weight, reverse=True)
        logger.trace("Lookup %r: %d match(es)", file_name, len(matching))
        return matching

    def lookup(self, file_name: str) -> list[str] | None:
        """Return the MIME types matching ``file_name``, highest weight first.

        Args:
            file_name (str): File name (not a path) to classify.

        Returns:
            list[str] | None: One type per matching entry (duplicates kept),
                or None if no entry matched.
        """
        matching: list[PatternEntry] = self.lookup_entries(file_name)
        if not matching:
            return None
        return [entry.mime_type for entry in matching]

    def describe(self) -> str:
        """Return a multi-line listing of all entries."""
        lines: list[str] = [f"Globs ({len(self._entries)}):"]
        lines.extend(f"  {entry.describe()}" for entry in self._entries)
        return "\n".join(lines)
