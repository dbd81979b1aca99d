# topmark:header:start
#
#   project      : MimeGlob
#   file         : model.py
#   file_relpath : src/mimeglob/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot describing which glob sources to load.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.
    - `PatternSpec`: an inline ``(type, pattern, weight, cs)`` entry declared
      in configuration.

Path semantics:
    - Registry paths declared in a config file are resolved against that
      config file's directory.
    - Registry paths given on the command line are resolved against the CWD.

Merge order (later wins for scalars, lists are concatenated):
    config file -> CLI arguments.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mimeglob.config.io import (
    TomlTable,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    get_table_list_value,
    get_table_value,
    load_toml_dict,
)
from mimeglob.config.keys import Toml
from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.constants import DEFAULT_WEIGHT, MIMEGLOB_TOML_NAME, PYPROJECT_TOML_NAME
from mimeglob.globs.entry import PatternEntry
from mimeglob.globs.formats import GlobFormat
from mimeglob.globs.sources import GlobSource

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: MimeGlobLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PatternSpec:
    """An inline pattern declared in configuration.

    Attributes:
        mime_type (str): Target MIME type.
        pattern (str): Raw glob text.
        weight (int): Priority weight.
        case_sensitive (bool): Case-sensitivity flag.
    """

    mime_type: str
    pattern: str
    weight: int = DEFAULT_WEIGHT
    case_sensitive: bool = False

    def to_entry(self) -> PatternEntry:
        """Build the registry entry for this spec.

        Raises:
            GlobSyntaxError: If the pattern is a malformed full glob.
        """
        return PatternEntry.from_parts(
            self.mime_type,
            self.pattern,
            self.weight,
            self.case_sensitive,
        )

    @classmethod
    def from_toml_table(cls, table: TomlTable) -> PatternSpec | None:
        """Build a spec from one ``[[patterns]]`` table.

        Args:
            table (TomlTable): The table.

        Returns:
            PatternSpec | None: The spec, or None (with a warning) if the
                table lacks a type or pattern or has a negative weight.
        """
        mime_type: str | None = get_string_value_or_none(table, Toml.KEY_TYPE)
        pattern: str | None = get_string_value_or_none(table, Toml.KEY_PATTERN)
        if not mime_type or not pattern:
            logger.warning(
                "Ignoring [[patterns]] item without '%s' and '%s': %r",
                Toml.KEY_TYPE,
                Toml.KEY_PATTERN,
                table,
            )
            return None

        weight: int | None = get_int_value_or_none(table, Toml.KEY_WEIGHT)
        if weight is not None and weight < 0:
            logger.warning("Ignoring [[patterns]] item %r: negative weight %d", pattern, weight)
            return None

        cs: bool | None = get_bool_value_or_none(table, Toml.KEY_CASE_SENSITIVE)
        return cls(
            mime_type=mime_type,
            pattern=pattern,
            weight=DEFAULT_WEIGHT if weight is None else weight,
            case_sensitive=bool(cs),
        )


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable description of the registry to build.

    Attributes:
        sources (tuple[GlobSource, ...]): Registry files, in load order.
        patterns (tuple[PatternSpec, ...]): Inline entries, added after the files.
        use_system_sources (bool): Also load the XDG shared-mime-info databases (last).
        strict (bool): Treat a missing or unreadable configured file as an error
            instead of skipping it.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    sources: tuple[GlobSource, ...] = ()
    patterns: tuple[PatternSpec, ...] = ()
    use_system_sources: bool = False
    strict: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            sources=list(self.sources),
            patterns=list(self.patterns),
            use_system_sources=self.use_system_sources,
            strict=self.strict,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` scalars mean "not set" so that merging can tell an explicit
    ``false`` from an absent key.

    Attributes:
        sources (list[GlobSource]): Registry files, in load order.
        patterns (list[PatternSpec]): Inline entries.
        use_system_sources (bool | None): Whether to load the XDG databases.
        strict (bool | None): Whether missing configured files are errors.
        config_files (list[Path]): Contributing config files.
    """

    sources: list[GlobSource] = field(default_factory=lambda: [])
    patterns: list[PatternSpec] = field(default_factory=lambda: [])
    use_system_sources: bool | None = None
    strict: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            sources=tuple(self.sources),
            patterns=tuple(self.patterns),
            use_system_sources=bool(self.use_system_sources),
            strict=bool(self.strict),
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other`` layered on top of ``self``.

        Lists are concatenated (``self`` first); scalars set in ``other`` win.
        """
        return MutableConfig(
            sources=[*self.sources, *other.sources],
            patterns=[*self.patterns, *other.patterns],
            use_system_sources=(
                other.use_system_sources
                if other.use_system_sources is not None
                else self.use_system_sources
            ),
            strict=other.strict if other.strict is not None else self.strict,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply command-line overrides in place.

        Recognized keys: ``globs`` and ``globs2`` (iterables of paths, resolved
        against the CWD), ``system`` and ``strict`` (``bool | None``).

        Args:
            args (ArgsLike): CLI namespace or plain dict.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key, fmt in ((Toml.KEY_GLOBS, GlobFormat.V1), (Toml.KEY_GLOBS2, GlobFormat.V2)):
            for raw in args.get(key) or ():
                path: Path = Path(raw).expanduser().resolve()
                self.sources.append(GlobSource(path=path, fmt=fmt))
                logger.debug("CLI %s source: %s", fmt.value, path)

        system: bool | None = args.get(Toml.KEY_SYSTEM)
        if system is not None:
            self.use_system_sources = system
        strict: bool | None = args.get(Toml.KEY_STRICT)
        if strict is not None:
            self.strict = strict
        return self

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The tool-level table (already extracted from
                ``[tool.mimeglob]`` when coming from ``pyproject.toml``).
            config_file (Path | None): Source file, used to resolve relative paths.

        Returns:
            MutableConfig: The resulting draft.
        """
        sources_tbl: TomlTable = get_table_value(data, Toml.SECTION_SOURCES)
        logger.trace("TOML [sources]: %s", sources_tbl)

        draft: MutableConfig = cls()
        cfg_dir: Path | None = config_file.parent.resolve() if config_file else None

        for key, fmt in ((Toml.KEY_GLOBS, GlobFormat.V1), (Toml.KEY_GLOBS2, GlobFormat.V2)):
            for raw in get_string_list_value(sources_tbl, key):
                path: Path = Path(raw).expanduser()
                if not path.is_absolute() and cfg_dir is not None:
                    path = cfg_dir / path
                draft.sources.append(GlobSource(path=path, fmt=fmt))

        draft.use_system_sources = get_bool_value_or_none(sources_tbl, Toml.KEY_SYSTEM)
        draft.strict = get_bool_value_or_none(sources_tbl, Toml.KEY_STRICT)

        for tbl in get_table_list_value(data, Toml.SECTION_PATTERNS):
            spec: PatternSpec | None = PatternSpec.from_toml_table(tbl)
            if spec is not None:
                draft.patterns.append(spec)

        if config_file is not None:
            draft.config_files.append(config_file)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``mimeglob.toml`` and ``pyproject.toml`` (the
        ``[tool.mimeglob]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml``
                has no ``[tool.mimeglob]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Loading config from %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
            data = get_table_value(tool_tbl, Toml.SECTION_TOOL_NAME)
            if not data:
                logger.debug("No [tool.mimeglob] table in %s", path)
                return None

        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Find the nearest config file, walking upward from ``start``.

        In each directory ``mimeglob.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts if it has a ``[tool.mimeglob]`` table.

        Args:
            start (Path): Directory to start from.

        Returns:
            Path | None: The config file, or None if none was found.
        """
        current: Path = start.resolve()
        for directory in (current, *current.parents):
            candidate: Path = directory / MIMEGLOB_TOML_NAME
            if candidate.is_file():
                return candidate
            pyproject: Path = directory / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                data: TomlTable = load_toml_dict(pyproject)
                if get_table_value(data, Toml.SECTION_TOOL).get(Toml.SECTION_TOOL_NAME):
                    return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        discover_from: Path | None = None,
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build a draft from a config file (explicit or discovered) and CLI args.

        Args:
            config_file (Path | None): Explicit config file; disables discovery.
            discover_from (Path | None): Directory to start discovery from;
                discovery is skipped when None.
            args (ArgsLike | None): CLI overrides applied last.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If a config file cannot be read or parsed.
        """
        draft: MutableConfig = cls()

        path: Path | None = config_file
        if path is None and discover_from is not None:
            path = cls.discover_config_file(discover_from)

        if path is not None:
            loaded: MutableConfig | None = cls.from_toml_file(path)
            if loaded is not None:
                draft = draft.merge_with(loaded)

        if args:
            draft.apply_cli_args(args)
        return draft
