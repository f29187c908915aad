"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from rawedit import __version__
from rawedit.core.constants import CLEAR_SCREEN, CURSOR_HOME
from rawedit.errors import GeometryError, TerminalError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def version_callback(value: bool) -> None:
    if value:
        print(f"rawedit {__version__}")
        raise typer.Exit()


def log_level_callback(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return level


def configure_logging(log_file: Optional[Path], level: str) -> None:
    """Send log records to ``log_file``. Without one, logging stays off."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("rawedit")
    root.addHandler(handler)
    root.setLevel(level)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="rawedit",
        help="A minimal full-screen terminal editor. Press Ctrl-Q to quit.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)

    @app.command()
    def edit(
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write diagnostic log to this file")] = None,
        log_level: Annotated[str, typer.Option("--log-level", callback=log_level_callback, help="Log level for --log-file")] = "INFO",
        version: Annotated[bool, typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit")] = False,
    ) -> None:
        """Open the editor on an empty document."""
        from rawedit.cli.core.terminal import TerminalDevice
        from rawedit.cli.studio.editor import run_editor

        configure_logging(log_file, log_level)
        device = TerminalDevice()
        try:
            code = run_editor(device=device)
        except (TerminalError, GeometryError) as e:
            logger.exception("fatal error")
            try:
                device.write(CLEAR_SCREEN + CURSOR_HOME)
            except TerminalError:
                logger.debug("could not clear screen after fatal error", exc_info=True)
            err_console.print(f"[bold red]rawedit:[/] {escape(str(e))}", highlight=False)
            raise typer.Exit(1)
        raise typer.Exit(code)

    return app
