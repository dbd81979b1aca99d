# topmark:header:start
#
#   project      : MimeGlob
#   file         : sources.py
#   file_relpath : src/mimeglob/globs/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry sources on disk.

This module is the only place that touches the filesystem for glob data:

- `read_source_lines` reads a ``globs`` / ``globs2`` file and turns every
  failure into a `RegistrySourceError`.
- `system_glob_sources` locates the shared-mime-info databases in the XDG
  data directories.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.constants import DEFAULT_XDG_DATA_DIRS, DEFAULT_XDG_DATA_HOME, XDG_MIME_SUBDIR
from mimeglob.core.errors import RegistrySourceError
from mimeglob.globs.formats import GlobFormat

logger: MimeGlobLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GlobSource:
    """A registry file and the format it is written in.

    Attributes:
        path (Path): Location of the file.
        fmt (GlobFormat): Format of its lines.
    """

    path: Path
    fmt: GlobFormat


def read_source_lines(path: Path) -> list[str]:
    """Read a registry file as a list of lines (terminators kept).

    Args:
        path (Path): File to read. Registry files are UTF-8.

    Returns:
        list[str]: The lines of the file.

    Raises:
        RegistrySourceError: If the file does not exist, cannot be read, or is
            not valid UTF-8.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.readlines()
    except FileNotFoundError as exc:
        raise RegistrySourceError(path, "file not found") from exc
    except IsADirectoryError as exc:
        raise RegistrySourceError(path, "is a directory") from exc
    except PermissionError as exc:
        raise RegistrySourceError(path, "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise RegistrySourceError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise RegistrySourceError(path, exc.strerror or str(exc)) from exc


def xdg_data_dirs() -> list[Path]:
    """Return the XDG data directories, most important first.

    ``$XDG_DATA_HOME`` (default ``~/.local/share``) comes first, followed by
    the entries of ``$XDG_DATA_DIRS`` (default ``/usr/local/share:/usr/share``).
    Empty entries are ignored.
    """
    home: str = os.environ.get("XDG_DATA_HOME") or DEFAULT_XDG_DATA_HOME
    dirs: str = os.environ.get("XDG_DATA_DIRS") or DEFAULT_XDG_DATA_DIRS

    out: list[Path] = [Path(home).expanduser()]
    out.extend(Path(d).expanduser() for d in dirs.split(os.pathsep) if d)
    return out


def system_glob_sources(data_dirs: list[Path] | None = None) -> list[GlobSource]:
    """Locate shared-mime-info glob databases.

    For each data directory, ``mime/globs2`` is preferred; ``mime/globs`` is
    used only when no ``globs2`` file exists there.

    Args:
        data_dirs (list[Path] | None): Directories to search; defaults to
            `xdg_data_dirs`.

    Returns:
        list[GlobSource]: Existing sources, in data-directory order.
    """
    found: list[GlobSource] = []
    for base in data_dirs if data_dirs is not None else xdg_data_dirs():
        mime_dir: Path = base / XDG_MIME_SUBDIR
        for fmt in (GlobFormat.V2, GlobFormat.V1):
            candidate: Path = mime_dir / fmt.value
            if candidate.is_file():
                logger.debug("Found system glob database: %s", candidate)
                found.append(GlobSource(path=candidate, fmt=fmt))
                break
    return found
