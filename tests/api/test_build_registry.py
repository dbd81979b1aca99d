# topmark:header:start
#
#   project      : MimeGlob
#   file         : test_build_registry.py
#   file_relpath : tests/api/test_build_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for building registries from configuration through the public API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mimeglob import api
from mimeglob.api import (
    GlobFormat,
    GlobSource,
    MutableConfig,
    PatternRegistry,
    PatternSpec,
    RegistrySourceError,
    build_registry,
    load_sources,
    lookup,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_public_names_are_exported() -> None:
    for name in api.__all__:
        assert hasattr(api, name), name


def test_build_registry_from_files_and_patterns(globs2_file: Path, globs_file: Path) -> None:
    config = MutableConfig(
        sources=[
            GlobSource(globs2_file, GlobFormat.V2),
            GlobSource(globs_file, GlobFormat.V1),
        ],
        patterns=[PatternSpec("text/x-rust", "*.rs", weight=60)],
    ).freeze()

    registry = build_registry(config)
    assert len(registry) == 8 + 4 + 1
    assert registry.lookup("main.rs") == ["text/x-rust"]
    # same type from both files, v2 file first
    assert registry.lookup("a.gif") == ["image/gif", "image/gif"]


def test_build_registry_skips_missing_files(tmp_path: Path, globs2_file: Path) -> None:
    config = MutableConfig(
        sources=[
            GlobSource(tmp_path / "missing", GlobFormat.V2),
            GlobSource(globs2_file, GlobFormat.V2),
        ],
    ).freeze()
    assert len(build_registry(config)) == 8


def test_build_registry_strict_raises(tmp_path: Path) -> None:
    config = MutableConfig(
        sources=[GlobSource(tmp_path / "missing", GlobFormat.V2)],
        strict=True,
    ).freeze()
    with pytest.raises(RegistrySourceError):
        build_registry(config)


def test_build_registry_loads_system_sources_last(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    mime_dir = tmp_path / "data" / "mime"
    mime_dir.mkdir(parents=True)
    (mime_dir / "globs2").write_text("50:text/system:*.txt\n", encoding="utf-8")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "none"))

    config = MutableConfig(
        patterns=[PatternSpec("text/inline", "*.txt")],
        use_system_sources=True,
    ).freeze()
    assert build_registry(config).lookup("a.txt") == ["text/inline", "text/system"]


def test_load_sources_counts_added_entries(globs2_file: Path, tmp_path: Path) -> None:
    registry = PatternRegistry()
    added = load_sources(
        registry,
        [GlobSource(globs2_file, GlobFormat.V2), GlobSource(tmp_path / "x", GlobFormat.V1)],
    )
    assert added == 8


def test_lookup_convenience(sample_registry: PatternRegistry) -> None:
    assert lookup("foo.gif", sample_registry) == ["image/gif"]
    assert lookup("foo.unknown", sample_registry) is None
