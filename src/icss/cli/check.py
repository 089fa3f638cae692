"""CLI command: icss check -- parse and type-check an ICSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from icss.model.diagnostic import ErrorKind
from icss.parser import ParseError
from icss.pipeline import Compiler


@click.command()
@click.argument("icssfile", type=click.Path(exists=True))
def check(icssfile: str) -> None:
    """Parse and type-check an ICSS file.

    Prints diagnostics and exits with code 0 if none are found, or code 1
    if there are errors.
    """
    source_path = Path(icssfile)
    compiler = Compiler()

    # Parse
    try:
        source = source_path.read_text(encoding="utf-8")
        stylesheet = compiler.parse(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    # Check
    diagnostics = compiler.check(stylesheet)

    if not diagnostics:
        click.echo(f"OK: {source_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    counts = {kind: sum(1 for d in diagnostics if d.kind is kind) for kind in ErrorKind}
    click.echo()
    click.echo(
        "Summary: "
        + ", ".join(f"{count} {kind.value} error(s)" for kind, count in counts.items())
    )
    sys.exit(1)
