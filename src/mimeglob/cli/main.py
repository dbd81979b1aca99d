# topmark:header:start
#
#   project      : MimeGlob
#   file         : main.py
#   file_relpath : src/mimeglob/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: the `ClickConsole` used for program output;
- ``log_level``: the effective logging level;
- ``config``: the frozen `Config` describing which glob sources to load.

The registry itself is built lazily by the commands that need it.
"""

from __future__ import annotations

from pathlib import Path

import click

from mimeglob.cli.commands.classify import classify_command
from mimeglob.cli.commands.dump import dump_command
from mimeglob.cli.commands.lookup import lookup_command
from mimeglob.cli.commands.version import version_command
from mimeglob.cli.console import ClickConsole
from mimeglob.cli.errors import to_cli_error
from mimeglob.cli.options import (
    ColorMode,
    common_color_options,
    common_source_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from mimeglob.config.logging import MimeGlobLogger, get_logger, resolve_env_log_level, setup_logging
from mimeglob.config.model import MutableConfig
from mimeglob.core.errors import ConfigError

logger: MimeGlobLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    ``MIMEGLOB_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Match file names against shared-mime-info glob patterns.",
)
@common_verbose_options
@common_color_options
@common_source_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
    globs: tuple[Path, ...],
    globs2: tuple[Path, ...],
    system: bool | None,
    strict: bool | None,
) -> None:
    """Entry point for the MimeGlob CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'mimeglob lookup NAME...' to find the MIME types of file names.")
        console.print()
        console.print(ctx.get_help())
        return

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_file=config_path,
            discover_from=None if config_path is not None else Path.cwd(),
            args={
                "globs": list(globs),
                "globs2": list(globs2),
                "system": system,
                "strict": strict,
            },
        )
    except ConfigError as exc:
        raise to_cli_error(exc) from exc

    ctx.obj["config"] = draft.freeze()
    logger.debug("Resolved config: %s", ctx.obj["config"])


cli.add_command(lookup_command)

cli.add_command(dump_command)

cli.add_command(classify_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
