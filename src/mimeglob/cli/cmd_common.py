# topmark:header:start
#
#   project      : MimeGlob
#   file         : cmd_common.py
#   file_relpath : src/mimeglob/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the subcommands: access to the console stored on the
Click context, and lazy construction of the glob registry from the resolved
configuration. Commands that do not need a registry (``classify``,
``version``) never trigger loading.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mimeglob.api import build_registry
from mimeglob.cli.console import ClickConsole
from mimeglob.cli.errors import to_cli_error
from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.core.errors import MimeGlobError

if TYPE_CHECKING:
    from mimeglob.config.model import Config
    from mimeglob.globs.registry import PatternRegistry

logger: MimeGlobLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console set up by the group, or a plain one."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_config(ctx: click.Context) -> Config:
    """Return the frozen configuration resolved by the group."""
    ctx.ensure_object(dict)
    config: Config | None = ctx.obj.get("config")
    if config is None:
        raise click.UsageError("No configuration available; run through the 'mimeglob' group.")
    return config


def get_registry(ctx: click.Context) -> PatternRegistry:
    """Build (once per invocation) and return the glob registry.

    Raises:
        MimeGlobCliError: A subclass matching the failure (missing file,
            unreadable file, malformed glob).
    """
    ctx.ensure_object(dict)
    registry: PatternRegistry | None = ctx.obj.get("registry")
    if registry is not None:
        return registry

    config: Config = get_config(ctx)
    try:
        registry = build_registry(config)
    except MimeGlobError as exc:
        logger.debug("Registry build failed: %s", exc)
        raise to_cli_error(exc) from exc

    if not len(registry):
        get_console(ctx).warn(
            "No glob entries loaded; pass --globs/--globs2, use --system, "
            "or configure [sources] in mimeglob.toml."
        )
    ctx.obj["registry"] = registry
    return registry
