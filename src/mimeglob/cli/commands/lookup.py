# topmark:header:start
#
#   project      : MimeGlob
#   file         : lookup.py
#   file_relpath : src/mimeglob/cli/commands/lookup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeGlob `lookup` command.

Looks up the MIME types of one or more file names. Only the final path
component of each argument is matched, so ``docs/README`` is looked up as
``README``. The command exits with `ExitCode.NO_MATCH` when at least one
name matched no pattern.
"""

from __future__ import annotations

import json
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

import click

from mimeglob.cli.cmd_common import get_console, get_registry
from mimeglob.cli.exit_codes import ExitCode
from mimeglob.cli.options import output_format_option
from mimeglob.core.formats import OutputFormat

if TYPE_CHECKING:
    from mimeglob.cli.console import ClickConsole
    from mimeglob.globs.entry import PatternEntry
    from mimeglob.globs.registry import PatternRegistry


def entry_to_dict(entry: PatternEntry) -> dict[str, Any]:
    """Return a JSON-serializable view of an entry."""
    return {
        "type": entry.mime_type,
        "pattern": entry.pattern,
        "kind": entry.kind.value,
        "weight": entry.weight,
        "case_sensitive": entry.case_sensitive,
    }


def _result_to_dict(name: str, matches: list[PatternEntry], *, long: bool) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": name,
        "types": [m.mime_type for m in matches] if matches else None,
    }
    if long:
        result["matches"] = [entry_to_dict(m) for m in matches]
    return result


@click.command(
    name="lookup",
    help="Show the MIME types matching each file NAME, highest weight first.",
)
@click.argument("names", nargs=-1, required=True, metavar="NAME...")
@click.option(
    "--long",
    "-l",
    "long",
    is_flag=True,
    help="Show the weight, pattern and case-sensitivity of every match.",
)
@output_format_option
@click.pass_context
def lookup_command(
    ctx: click.Context,
    names: tuple[str, ...],
    long: bool,
    output_format: OutputFormat,
) -> None:
    """Look up the MIME types of file names.

    Args:
        ctx (click.Context): Click context.
        names (tuple[str, ...]): File names (or paths) to look up.
        long (bool): Include match details.
        output_format (OutputFormat): Output format.
    """
    console: ClickConsole = get_console(ctx)
    registry: PatternRegistry = get_registry(ctx)

    all_matched = True
    results: list[dict[str, Any]] = []
    for name in names:
        file_name: str = PurePath(name).name or name
        matches: list[PatternEntry] = registry.lookup_entries(file_name)
        if not matches:
            all_matched = False

        if output_format is OutputFormat.TEXT:
            _print_text(console, name, matches, long=long)
        elif output_format is OutputFormat.NDJSON:
            console.print(json.dumps(_result_to_dict(name, matches, long=long)))
        else:
            results.append(_result_to_dict(name, matches, long=long))

    if output_format is OutputFormat.JSON:
        console.print(json.dumps(results, indent=2))

    if not all_matched:
        ctx.exit(ExitCode.NO_MATCH)


def _print_text(
    console: ClickConsole,
    name: str,
    matches: list[PatternEntry],
    *,
    long: bool,
) -> None:
    label: str = console.styled(f"{name}:", bold=True)
    if not matches:
        console.print(f"{label} {console.styled('(no match)', fg='yellow')}")
        return
    if not long:
        console.print(f"{label} {', '.join(m.mime_type for m in matches)}")
        return
    console.print(label)
    for match in matches:
        console.print(f"  {match.describe()}")
