# topmark:header:start
#
#   project      : MimeGlob
#   file         : classify.py
#   file_relpath : src/mimeglob/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob `classify` command.

Shows how patterns are classified (``literal``, ``suffix`` or ``full``) and
the text each shape matches with. Exits with `ExitCode.DATA_ERROR` on a
malformed full glob.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from mimeglob.cli.cmd_common import get_console
from mimeglob.cli.errors import MimeGlobDataError
from mimeglob.cli.options import output_format_option
from mimeglob.core.errors import GlobSyntaxError
from mimeglob.core.formats import OutputFormat
from mimeglob.globs.shape import SuffixShape, classify

if TYPE_CHECKING:
    from mimeglob.cli.console import ClickConsole
    from mimeglob.globs.shape import PatternShape


def _shape_to_dict(shape: PatternShape) -> dict[str, Any]:
    return {
        "pattern": shape.pattern,
        "kind": shape.kind.value,
        "text": shape.text,
    }


@click.command(
    name="classify",
    help="Show the shape (literal, suffix or full) of each glob PATTERN.",
)
@click.argument("patterns", nargs=-1, required=True, metavar="PATTERN...")
@output_format_option
@click.pass_context
def classify_command(
    ctx: click.Context,
    patterns: tuple[str, ...],
    output_format: OutputFormat,
) -> None:
    """Classify glob patterns."""
    console: ClickConsole = get_console(ctx)

    shapes: list[PatternShape] = []
    for raw in patterns:
        try:
            shape: PatternShape = classify(raw)
        except GlobSyntaxError as exc:
            raise MimeGlobDataError(str(exc)) from exc

        if output_format is OutputFormat.TEXT:
            what: str = "ends with" if isinstance(shape, SuffixShape) else "matches"
            console.print(
                f"{console.styled(raw, bold=True)}: {shape.kind.value} ({what} {shape.text!r})"
            )
        elif output_format is OutputFormat.NDJSON:
            console.print(json.dumps(_shape_to_dict(shape)))
        else:
            shapes.append(shape)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps([_shape_to_dict(s) for s in shapes], indent=2))
