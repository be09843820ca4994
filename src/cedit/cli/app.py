"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from cedit.config import LOG_LEVELS, ViewerConfig


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="cedit",
        help="View a text file full-screen in the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console()

    def show_version(value: bool) -> None:
        if value:
            from cedit import __version__
            console.print(f"cedit {__version__}")
            raise typer.Exit()

    def check_timeout(value: float) -> float:
        if value <= 0:
            raise typer.BadParameter("must be greater than 0")
        return value

    def check_level(value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
        return value.upper()

    @app.command()
    def view(
        path: Annotated[Optional[Path], typer.Argument(help="File to view", readable=False)] = None,
        escape_timeout: Annotated[float, typer.Option(
            "--escape-timeout",
            envvar="CEDIT_ESCAPE_TIMEOUT",
            callback=check_timeout,
            help="Seconds to wait after Escape for the rest of a key sequence",
        )] = 0.1,
        log_file: Annotated[Optional[Path], typer.Option(
            "--log-file",
            envvar="CEDIT_LOG_FILE",
            dir_okay=False,
            help="Write debug logs to this file",
        )] = None,
        log_level: Annotated[str, typer.Option(
            "--log-level",
            envvar="CEDIT_LOG_LEVEL",
            callback=check_level,
            help="Log level for --log-file",
        )] = "WARNING",
        version: Annotated[bool, typer.Option(
            "--version",
            callback=show_version,
            is_eager=True,
            help="Show version and exit",
        )] = False,
    ) -> None:
        """View a file. Arrows, Page Up/Down, Home and End move; [bold]Ctrl+Q[/] quits."""
        from cedit.cli.studio.viewer import run_viewer

        config = ViewerConfig(
            escape_timeout=escape_timeout,
            log_file=log_file,
            log_level=log_level,
        )
        config.configure_logging()
        run_viewer(path, config)

    return app
