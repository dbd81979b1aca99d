# topmark:header:start
#
#   project      : MimeGlob
#   file         : test_registry.py
#   file_relpath : tests/globs/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PatternRegistry` loading and weighted lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mimeglob.core.errors import GlobSyntaxError, RegistrySourceError
from mimeglob.globs.entry import PatternEntry
from mimeglob.globs.formats import GlobFormat
from mimeglob.globs.registry import PatternRegistry, parse_lines, parse_v1_lines, parse_v2_lines
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    "name, expected",
    [
        ("Makefile", ["text/x-makefile"]),
        ("makefile", ["text/x-makefile"]),
        ("foo.gif", ["image/gif"]),
        ("foo.GIF", ["image/gif"]),
        ("foo.c", ["text/x-csrc"]),
        ("foo.C", ["text/x-csrc", "text/x-c++src"]),
        ("COPYING", ["text/x-copying"]),
        ("foo.anim3", ["application/x-anim"]),
        ("foo.animj", ["application/x-anim"]),
        ("report.PDF", ["application/pdf"]),
    ],
)
def test_lookup_sample(sample_registry: PatternRegistry, name: str, expected: list[str]) -> None:
    assert sample_registry.lookup(name) == expected


@parametrize("name", ["nothing.xyz", "foo.anim0", "", "Makefile.am"])
def test_lookup_no_match_is_none(sample_registry: PatternRegistry, name: str) -> None:
    assert sample_registry.lookup(name) is None
    assert sample_registry.lookup_entries(name) == []


def test_lookup_empty_registry() -> None:
    assert PatternRegistry().lookup("foo.txt") is None


def test_lookup_orders_by_descending_weight_and_keeps_ties_stable() -> None:
    registry = PatternRegistry()
    registry.load_v2(
        [
            "10:text/a:*.txt",
            "90:text/b:*.txt",
            "50:text/c:*.txt",
            "50:text/d:*.txt",
        ]
    )
    assert registry.lookup("notes.txt") == ["text/b", "text/c", "text/d", "text/a"]
    weights = [e.weight for e in registry.lookup_entries("notes.txt")]
    assert weights == sorted(weights, reverse=True)


def test_lookup_keeps_duplicates() -> None:
    registry = PatternRegistry()
    entry = PatternEntry.from_parts("image/gif", "*.gif")
    registry.add(entry)
    registry.add(entry)
    assert registry.lookup("a.gif") == ["image/gif", "image/gif"]


def test_lookup_does_not_strip_directories() -> None:
    """The registry matches names; splitting paths is the caller's job."""
    registry = PatternRegistry()
    registry.add(PatternEntry.from_parts("text/x-makefile", "Makefile"))
    assert registry.lookup("src/Makefile") is None


def test_add_all_and_iteration_preserve_order() -> None:
    entries = [
        PatternEntry.from_parts("a/a", "*.a"),
        PatternEntry.from_parts("b/b", "*.b", 70),
    ]
    registry = PatternRegistry()
    registry.add_all(entries)
    assert list(registry) == entries
    assert registry.entries == tuple(entries)
    assert len(registry) == 2
    assert repr(registry) == "PatternRegistry(<2 entries>)"


def test_constructor_accepts_entries() -> None:
    registry = PatternRegistry([PatternEntry.from_parts("a/a", "*.a")])
    assert registry.lookup("x.a") == ["a/a"]


def test_load_skips_comments_blank_and_malformed_lines() -> None:
    registry = PatternRegistry()
    added = registry.load_v2(
        [
            "# comment",
            "",
            "50:text/a:*.a\n",
            "garbage",
            "foo:bar:baz:blah",
            "50:text/b:*.b\r\n",
        ]
    )
    assert [e.mime_type for e in added] == ["text/a", "text/b"]
    assert len(registry) == 2
    assert registry.lookup("x.b") == ["text/b"]


def test_load_v1_uses_default_weight() -> None:
    registry = PatternRegistry()
    added = registry.load_v1(["image/gif:*.gif", "50:image/gif:*.gif"])
    assert len(added) == 1
    assert added[0].weight == 50


def test_load_returns_fragment_only() -> None:
    registry = PatternRegistry()
    registry.load_v1(["a/a:*.a"])
    fragment = registry.load_v1(["b/b:*.b"])
    assert [e.mime_type for e in fragment] == ["b/b"]
    assert len(registry) == 2


def test_load_propagates_glob_syntax_errors() -> None:
    registry = PatternRegistry()
    with pytest.raises(GlobSyntaxError):
        registry.load_v2(["50:text/a:*.a", "50:text/b:[oops"])
    assert len(registry) == 0


def test_parse_helpers() -> None:
    assert len(parse_v1_lines(["a/a:*.a", "# c"])) == 1
    assert len(parse_v2_lines(["50:a/a:*.a", "bad"])) == 1
    assert parse_lines([], GlobFormat.V2) == []


# --- Files ---------------------------------------------------------------------


def test_load_v2_file(globs2_file: Path) -> None:
    registry = PatternRegistry()
    added = registry.load_v2_file(globs2_file)
    assert len(added) == 8
    assert registry.lookup("Makefile") == ["text/x-makefile"]


def test_load_v1_file(globs_file: Path) -> None:
    registry = PatternRegistry()
    added = registry.load_v1_file(globs_file)
    assert len(added) == 4
    assert registry.lookup("x.pdf") == ["application/pdf"]


def test_load_missing_file_raises_and_leaves_registry_untouched(tmp_path: Path) -> None:
    registry = PatternRegistry()
    registry.load_v1(["a/a:*.a"])
    missing = tmp_path / "nope" / "globs2"
    with pytest.raises(RegistrySourceError) as excinfo:
        registry.load_v2_file(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value, OSError)
    assert len(registry) == 1


def test_load_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(RegistrySourceError):
        PatternRegistry().load_file(tmp_path, GlobFormat.V2)


def test_load_non_utf8_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "globs2"
    path.write_bytes(b"50:text/a:*.\xff\xfe\n")
    with pytest.raises(RegistrySourceError) as excinfo:
        PatternRegistry().load_v2_file(path)
    assert "UTF-8" in str(excinfo.value)


def test_load_file_with_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "globs2"
    path.write_bytes(b"# header\r\n50:text/a:*.a\r\n60:text/b:*.a:cs\r\n")
    registry = PatternRegistry()
    registry.load_v2_file(path)
    assert registry.lookup("x.a") == ["text/b", "text/a"]


def test_describe(sample_registry: PatternRegistry) -> None:
    lines = sample_registry.describe().splitlines()
    assert lines[0] == "Globs (8):"
    assert lines[1] == "  literal 'Makefile' -> text/x-makefile (weight: 80, cs: false)"
    assert len(lines) == 9
