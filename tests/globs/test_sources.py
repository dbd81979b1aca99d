# topmark:header:start
#
#   project      : MimeGlob
#   file         : test_sources.py
#   file_relpath : tests/globs/test_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for registry file reading and XDG database discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from mimeglob.core.errors import RegistrySourceError
from mimeglob.globs.formats import GlobFormat
from mimeglob.globs.sources import (
    GlobSource,
    read_source_lines,
    system_glob_sources,
    xdg_data_dirs,
)
from tests.conftest import parametrize


def _write_db(base: Path, name: str) -> Path:
    mime_dir = base / "mime"
    mime_dir.mkdir(parents=True, exist_ok=True)
    path = mime_dir / name
    path.write_text("50:text/plain:*.txt\n", encoding="utf-8")
    return path


def test_read_source_lines_keeps_terminators(tmp_path: Path) -> None:
    path = tmp_path / "globs"
    path.write_bytes(b"a/a:*.a\r\nb/b:*.b\n")
    assert read_source_lines(path) == ["a/a:*.a\r\n", "b/b:*.b\n"]


def test_read_source_lines_missing(tmp_path: Path) -> None:
    with pytest.raises(RegistrySourceError) as excinfo:
        read_source_lines(tmp_path / "missing")
    assert excinfo.value.reason == "file not found"
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_system_sources_prefer_globs2(tmp_path: Path) -> None:
    first = tmp_path / "home"
    second = tmp_path / "usr"
    third = tmp_path / "empty"
    g2 = _write_db(first, "globs2")
    _write_db(first, "globs")
    g1 = _write_db(second, "globs")
    third.mkdir()

    assert system_glob_sources([first, second, third]) == [
        GlobSource(path=g2, fmt=GlobFormat.V2),
        GlobSource(path=g1, fmt=GlobFormat.V1),
    ]


def test_system_sources_none_found(tmp_path: Path) -> None:
    assert system_glob_sources([tmp_path / "nothing"]) == []


def test_xdg_data_dirs_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", "/x/home")
    monkeypatch.setenv("XDG_DATA_DIRS", "/d1::/d2")
    assert xdg_data_dirs() == [Path("/x/home"), Path("/d1"), Path("/d2")]


def test_xdg_data_dirs_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("XDG_DATA_DIRS", "")
    assert xdg_data_dirs() == [
        Path("~/.local/share").expanduser(),
        Path("/usr/local/share"),
        Path("/usr/share"),
    ]


def test_system_sources_use_xdg_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = _write_db(tmp_path / "data", "globs2")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "none"))
    assert system_glob_sources() == [GlobSource(path=path, fmt=GlobFormat.V2)]


@parametrize(
    "name, expected",
    [
        ("globs", GlobFormat.V1),
        ("v1", GlobFormat.V1),
        ("1", GlobFormat.V1),
        ("GLOBS2", GlobFormat.V2),
        (" v2 ", GlobFormat.V2),
        ("2", GlobFormat.V2),
        ("xml", None),
        ("", None),
        (None, None),
    ],
)
def test_glob_format_from_name(name: str | None, expected: GlobFormat | None) -> None:
    assert GlobFormat.from_name(name) is expected
