#!/usr/bin/env python
"""
Command-line interface for acrostic.

Composes the command groups from the separate command modules.
"""
import logging
import typer
from rich.console import Console
from rich.logging import RichHandler

from .generate_commands import generate_app

app = typer.Typer(
    name="acrostic",
    help="Generate text from initial letters with a next-character model",
    add_completion=False,
)

app.add_typer(generate_app, name="generate", help="Text generation related commands")

console = Console(stderr=True)


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging with rich handler."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level}')

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s", # Rich handler handles formatting
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def run_command(
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ...)."),
) -> None:
    """
    Top-level callback for global setup.
    """
    try:
        setup_logging(log_level)
        logging.getLogger(__name__).debug(f"Log level set to {log_level}")
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
