"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Literals
- Diagnostics, rendered compiler-style with a caret underline
- Messages and errors
- Debug output
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from word_numbers.diagnostics import Diagnostic

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_literal(text: str) -> None:
    """Print an evaluated literal."""
    console.print(Text(text, style="bold green"))


def print_error(text: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]{escape(text)}[/red]")


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(text)}[/green]")


def print_diagnostic(diagnostic: Diagnostic, source: str, path: str = "<input>") -> None:
    """
    Print a diagnostic with the offending source line underlined.

    Example:
        error[unknown-word]: Unknown number word: 'fourtee'
         --> <input>:1:5
          |
        1 | two fourtee
          |     ^^^^^^^
    """
    loc = diagnostic.locate(source)
    line_start = diagnostic.span.start - (loc.column - 1)
    line_end = source.find("\n", line_start)
    if line_end == -1:
        line_end = len(source)
    line_text = source[line_start:line_end]

    # Carets stop at the end of the first line for multi-line spans
    width = max(1, min(len(diagnostic.span), line_end - diagnostic.span.start))
    gutter = " " * len(str(loc.line))

    header = Text()
    header.append(f"error[{diagnostic.code}]", style="bold red")
    header.append(f": {diagnostic.message}", style="bold")
    err_console.print(header)
    err_console.print(Text(f"{gutter}--> {path}:{loc.line}:{loc.column}", style="blue"))
    err_console.print(Text(f"{gutter} |", style="blue"))
    body = Text(f"{loc.line} | ", style="blue")
    body.append(line_text)
    err_console.print(body)
    underline = Text(f"{gutter} | ", style="blue")
    underline.append(" " * (loc.column - 1) + "^" * width, style="bold red")
    err_console.print(underline)


def print_debug(data: dict[str, object] | str) -> None:
    """Print debug information."""
    err_console.print("[dim]--- DEBUG ---[/dim]")
    if isinstance(data, dict):
        import json

        err_console.print(f"[dim]{escape(json.dumps(data, indent=2, default=str))}[/dim]")
    else:
        err_console.print(f"[dim]{escape(data)}[/dim]")
    err_console.print("[dim]-------------[/dim]")
