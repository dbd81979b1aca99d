# topmark:header:start
#
#   project      : MimeGlob
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the MimeGlob test suite.

Sets up TRACE-level logging for the whole run and offers small typed
wrappers plus fixtures that write registry files into ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from mimeglob.config import logging
from mimeglob.globs.registry import PatternRegistry

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

# A small but representative globs2 database, in the shared-mime-info layout.
SAMPLE_GLOBS2 = """\
# This file was automatically generated by the
# update-mime-database application.
#
# Do not edit!
80:text/x-makefile:Makefile
50:image/gif:*.gif
50:text/x-csrc:*.c
50:text/x-c++src:*.C:cs
50:text/x-chdr:*.h
50:application/x-anim:*.anim[1-9j]
50:application/pdf:*.pdf
10:text/x-copying:copying
"""

SAMPLE_GLOBS = """\
# This file was automatically generated by the
# update-mime-database application.
text/x-makefile:Makefile
image/gif:*.gif
text/x-csrc:*.c
application/pdf:*.pdf
"""


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_mimeglob_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("MIMEGLOB_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def globs2_file(tmp_path: Path) -> Path:
    """Write `SAMPLE_GLOBS2` to ``tmp_path/globs2`` and return its path."""
    path: Path = tmp_path / "globs2"
    path.write_text(SAMPLE_GLOBS2, encoding="utf-8")
    return path


@fixture()
def globs_file(tmp_path: Path) -> Path:
    """Write `SAMPLE_GLOBS` to ``tmp_path/globs`` and return its path."""
    path: Path = tmp_path / "globs"
    path.write_text(SAMPLE_GLOBS, encoding="utf-8")
    return path


@fixture()
def sample_registry() -> PatternRegistry:
    """Return a registry loaded from `SAMPLE_GLOBS2`."""
    registry = PatternRegistry()
    registry.load_v2(SAMPLE_GLOBS2.splitlines())
    return registry
