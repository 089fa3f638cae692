"""CLI command: icss compile -- translate an ICSS file to CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from icss.config import CompilerConfig
from icss.events import EventBus, logging_listener
from icss.parser import ParseError
from icss.pipeline import CompilationError, Compiler


@click.command(name="compile")
@click.argument("icssfile", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write CSS to this file instead of stdout.",
)
@click.option("--indent", default=2, show_default=True, help="Spaces per indent level.")
def compile_command(icssfile: str, output: str | None, indent: int) -> None:
    """Parse, check, evaluate and generate CSS for an ICSS file.

    Exits with code 1 if the file does not parse or checking reports errors.
    """
    source_path = Path(icssfile)
    config = CompilerConfig(indent=" " * indent)

    bus = EventBus()
    bus.on_all(logging_listener())
    compiler = Compiler(config, event_bus=bus)

    try:
        source = source_path.read_text(encoding="utf-8")
        css = compiler.compile(source, name=source_path.name)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except CompilationError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        click.echo(f"\n{len(exc.diagnostics)} error(s); no CSS generated.", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(css, nl=False)
