# topmark:header:start
#
#   project      : MimeGlob
#   file         : api.py
#   file_relpath : src/mimeglob/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public MimeGlob API.

Stable entry points for applications embedding MimeGlob:

- `PatternRegistry`, `PatternEntry`, `classify` and the shape types for
  building and querying registries directly;
- `build_registry` to materialize a registry from a `Config`;
- `lookup` as a one-shot convenience.

There is no process-wide registry: callers own the registry they build and
pass it where it is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.config.model import Config, MutableConfig, PatternSpec
from mimeglob.core.errors import ConfigError, GlobSyntaxError, MimeGlobError, RegistrySourceError
from mimeglob.globs.entry import PatternEntry
from mimeglob.globs.formats import GlobFormat
from mimeglob.globs.registry import PatternRegistry, parse_lines, parse_v1_lines, parse_v2_lines
from mimeglob.globs.shape import (
    FullShape,
    LiteralShape,
    PatternShape,
    ShapeKind,
    SuffixShape,
    classify,
)
from mimeglob.globs.sources import GlobSource, system_glob_sources

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: MimeGlobLogger = get_logger(__name__)

__all__ = [
    "Config",
    "ConfigError",
    "FullShape",
    "GlobFormat",
    "GlobSource",
    "GlobSyntaxError",
    "LiteralShape",
    "MimeGlobError",
    "MutableConfig",
    "PatternEntry",
    "PatternRegistry",
    "PatternShape",
    "PatternSpec",
    "RegistrySourceError",
    "ShapeKind",
    "SuffixShape",
    "build_registry",
    "classify",
    "load_sources",
    "lookup",
    "parse_lines",
    "parse_v1_lines",
    "parse_v2_lines",
    "system_glob_sources",
]


def load_sources(
    registry: PatternRegistry,
    sources: Iterable[GlobSource],
    *,
    strict: bool = False,
) -> int:
    """Load registry files into ``registry``, in order.

    Args:
        registry (PatternRegistry): Registry to extend.
        sources (Iterable[GlobSource]): Files to load.
        strict (bool): Propagate `RegistrySourceError` instead of skipping
            unreadable files with a warning.

    Returns:
        int: Number of entries added.

    Raises:
        RegistrySourceError: If ``strict`` and a file cannot be read.
        GlobSyntaxError: If a file carries a malformed full glob.
    """
    added = 0
    for source in sources:
        try:
            added += len(registry.load_file(source.path, source.fmt))
        except RegistrySourceError as exc:
            if strict:
                raise
            logger.warning("Skipping glob registry: %s", exc)
    return added


def build_registry(config: Config) -> PatternRegistry:
    """Build a registry from a configuration snapshot.

    Load order: configured files (declaration order), inline patterns, then
    the XDG shared-mime-info databases if enabled. Load order only affects
    the relative order of equal-weight matches.

    Args:
        config (Config): Frozen configuration.

    Returns:
        PatternRegistry: The populated registry.

    Raises:
        RegistrySourceError: If ``config.strict`` and a configured file cannot be read.
        GlobSyntaxError: If any pattern is a malformed full glob.
    """
    registry = PatternRegistry()

    load_sources(registry, config.sources, strict=config.strict)
    registry.add_all(spec.to_entry() for spec in config.patterns)

    if config.use_system_sources:
        system: list[GlobSource] = system_glob_sources()
        if not system:
            logger.warning("No shared-mime-info glob database found in the XDG data directories")
        load_sources(registry, system, strict=False)

    logger.info("Glob registry ready: %d entries", len(registry))
    return registry


def lookup(file_name: str, registry: PatternRegistry) -> list[str] | None:
    """Return the MIME types for ``file_name`` (highest weight first), or None."""
    return registry.lookup(file_name)
