"""Console rendering for CLI progress lines and banners."""

from __future__ import annotations

import typer

# Progress kind → foreground colour.  "info" stays uncoloured.
_COLOURS = {
    "cached": typer.colors.CYAN,
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "error": typer.colors.RED,
}


def echo_progress(kind: str, message: str) -> None:
    """Print a ``[KIND] message`` line coloured by outcome."""
    typer.secho(f"[{kind.upper()}] {message}", fg=_COLOURS.get(kind))


def echo_banner(message: str, colour: str = typer.colors.GREEN) -> None:
    """Print *message* framed by rules, in bold."""
    rule = "=" * 72
    typer.secho(rule, fg=colour)
    typer.secho(message, fg=colour, bold=True)
    typer.secho(rule, fg=colour)
