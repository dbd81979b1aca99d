# topmark:header:start
#
#   project      : MimeGlob
#   file         : io.py
#   file_relpath : src/mimeglob/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for MimeGlob configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters never raise on a wrong value type: they log a warning and fall back
to the default, so a sloppy config degrades instead of aborting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

logger: MimeGlobLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``mimeglob.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc.strerror or exc}") from exc

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict if missing or not a table."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_table_list_value(table: TomlTable, key: str) -> list[TomlTable]:
    """Return an array of tables (``[[key]]``); non-table items are dropped."""
    value: Any = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Expected an array of tables for '%s'; ignoring", key)
        return []
    out: list[TomlTable] = []
    for idx, item in enumerate(cast("list[Any]", value)):
        if isinstance(item, dict):
            out.append(cast("TomlTable", item))
        else:
            logger.warning("Ignoring non-table item #%d in '%s'", idx, key)
    return out


def get_string_list_value(table: TomlTable, key: str) -> list[str]:
    """Return a list of strings; a single string is promoted to a one-item list.

    Non-string items are dropped with a warning.
    """
    value: Any = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected a list of strings for '%s'; ignoring", key)
        return []
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item %r in '%s'", item, key)
    return out


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return a string value, or None if missing or not a string."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return a boolean value, or None if missing or not a boolean."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for '%s', got %r; ignoring", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Return an integer value, or None if missing or not an integer.

    Booleans are rejected even though ``bool`` is a subclass of ``int``.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected an integer for '%s', got %r; ignoring", key, value)
    return None
