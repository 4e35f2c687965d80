"""
cli.py

PURPOSE: Command-line interface for number-word evaluation.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- eval: Evaluate a phrase given on the command line
- expand: Rewrite num!(...) invocations in a file
- config: Show the effective configuration
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from word_numbers import __version__
from word_numbers.config import get_settings
from word_numbers.diagnostics import overflow_diagnostic
from word_numbers.engine.expander import CollectingSink, expand, expand_source
from word_numbers.models.literal import MagnitudeOverflowError, TypedInteger
from word_numbers.models.tokens import Span
from word_numbers.observability import init_telemetry
from word_numbers.ui import plain

app = typer.Typer(
    name="word-numbers",
    help="Turn English number words into typed integer literals.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"word-numbers version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """Word Numbers - Turn English number words into typed integer literals."""
    try:
        settings = get_settings()
    except ValidationError as e:
        plain.print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1) from None
    level = "DEBUG" if debug else settings.effective_log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=plain.err_console, show_path=False)],
        force=True,
    )
    init_telemetry(settings.otel)


@app.command("eval")
def eval_cmd(
    words: Annotated[
        list[str],
        typer.Argument(help="The number words, e.g. two hundred forty-seven"),
    ],
    plain_style: Annotated[
        bool,
        typer.Option(
            "--plain",
            "-p",
            help="Print the bare integer without a width suffix",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Print value and width as JSON",
        ),
    ] = False,
) -> None:
    """Evaluate a number phrase and print the typed literal."""
    source = " ".join(words)
    sink = CollectingSink()

    try:
        expand(source, sink)
    except MagnitudeOverflowError as e:
        plain.print_diagnostic(overflow_diagnostic(e, Span(0, len(source))), source)
        raise typer.Exit(1) from None

    outcome = sink.outcome
    if not isinstance(outcome, TypedInteger):
        if outcome is not None:
            plain.print_diagnostic(outcome, source)
        raise typer.Exit(1)

    if as_json:
        console.print_json(outcome.model_dump_json())
    else:
        plain.print_literal(outcome.render("plain" if plain_style else "suffixed"))


@app.command("expand")
def expand_file(
    source_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the file containing num!(...) invocations",
            exists=True,
            readable=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the expanded file here (default: stdout)",
        ),
    ] = None,
    macro: Annotated[
        str | None,
        typer.Option(
            "--macro",
            "-m",
            help="Macro name to expand (default from settings)",
        ),
    ] = None,
    plain_style: Annotated[
        bool,
        typer.Option(
            "--plain",
            "-p",
            help="Splice bare integers without width suffixes",
        ),
    ] = False,
) -> None:
    """Expand every number-word macro invocation in a file."""
    settings = get_settings()
    macro_name = macro or settings.expansion.macro_name
    style = "plain" if plain_style else settings.expansion.literal_style

    try:
        text = source_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        plain.print_error(f"Cannot read {source_file}: {e}")
        raise typer.Exit(1) from None

    report = expand_source(text, macro_name=macro_name, style=style)

    for diagnostic in report.diagnostics:
        plain.print_diagnostic(diagnostic, text, str(source_file))

    if settings.debug:
        plain.print_debug(
            {
                "invocations": len(report.expansions),
                "expanded": len(report.literals),
                "failed": len(report.diagnostics),
            }
        )

    if not report.success:
        plain.print_error(f"{len(report.diagnostics)} invocation(s) failed to expand")
        raise typer.Exit(1)

    if output is None:
        console.out(report.output, end="", highlight=False)
    else:
        output.write_text(report.output, encoding="utf-8")
        plain.print_success(f"Expanded {len(report.literals)} invocation(s) into {output}")


@app.command("config")
def config_cmd() -> None:
    """Show current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print()
    console.print("[bold]Expansion Settings:[/bold]")
    console.print(f"  Macro name: {settings.expansion.macro_name}")
    console.print(f"  Literal style: {settings.expansion.literal_style}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
