# topmark:header:start
#
#   project      : MimeGlob
#   file         : version.py
#   file_relpath : src/mimeglob/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob `version` command.

Prints the MimeGlob version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from mimeglob.cli.cmd_common import get_console
from mimeglob.cli.options import output_format_option
from mimeglob.constants import MIMEGLOB_VERSION
from mimeglob.core.formats import OutputFormat


@click.command(
    name="version",
    help="Show the current version of MimeGlob.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat) -> None:
    """Show the current version of MimeGlob."""
    console = get_console(ctx)
    if output_format.is_machine:
        console.print(json.dumps({"version": MIMEGLOB_VERSION}))
    else:
        console.print(console.styled(MIMEGLOB_VERSION, bold=True))
