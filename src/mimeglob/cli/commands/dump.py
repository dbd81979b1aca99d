# topmark:header:start
#
#   project      : MimeGlob
#   file         : dump.py
#   file_relpath : src/mimeglob/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob `dump` command.

Prints the loaded registry, one entry per line, in registration order. The
text output is itself a valid ``globs2`` (default) or ``globs`` file.
Entries the chosen format cannot express are left out and reported on
stderr.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mimeglob.cli.cli_types import EnumChoiceParam
from mimeglob.cli.cmd_common import get_console, get_registry
from mimeglob.cli.commands.lookup import entry_to_dict
from mimeglob.cli.options import output_format_option
from mimeglob.config.logging import MimeGlobLogger, get_logger
from mimeglob.core.formats import OutputFormat
from mimeglob.globs.formats import GlobFormat

if TYPE_CHECKING:
    from mimeglob.cli.console import ClickConsole
    from mimeglob.globs.registry import PatternRegistry

logger: MimeGlobLogger = get_logger(__name__)


@click.command(
    name="dump",
    help="Print every loaded glob entry, in registration order.",
)
@click.option(
    "--as",
    "glob_format",
    type=EnumChoiceParam(GlobFormat),
    default=GlobFormat.V2.value,
    show_default=True,
    help="Registry line format used for text output.",
)
@output_format_option
@click.pass_context
def dump_command(
    ctx: click.Context,
    glob_format: GlobFormat,
    output_format: OutputFormat,
) -> None:
    """Dump the registry.

    Args:
        ctx (click.Context): Click context.
        glob_format (GlobFormat): Line format for text output.
        output_format (OutputFormat): Output format.
    """
    console: ClickConsole = get_console(ctx)
    registry: PatternRegistry = get_registry(ctx)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps([entry_to_dict(e) for e in registry], indent=2))
        return
    if output_format is OutputFormat.NDJSON:
        for entry in registry:
            console.print(json.dumps(entry_to_dict(entry)))
        return

    skipped = 0
    for entry in registry:
        try:
            line: str = entry.to_line(glob_format)
        except ValueError as exc:
            skipped += 1
            logger.debug("Not dumping %s: %s", entry.describe(), exc)
            continue
        console.print(line)

    if skipped:
        console.warn(
            f"Skipped {skipped} entr{'y' if skipped == 1 else 'ies'} "
            f"not representable in the '{glob_format.value}' format."
        )
