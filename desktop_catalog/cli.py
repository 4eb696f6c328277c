"""Command-line interface for desktop-catalog."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from desktop_catalog.config import Config, load_config
from desktop_catalog.launcher import ApplicationNotFound, Launcher
from desktop_catalog.output.render import render_listing


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True
    )


def run(
    name: Optional[str] = typer.Argument(
        None,
        help="Name of the application to run; lists applications when omitted"
    ),
    include_hidden: bool = typer.Option(
        False,
        "--include-hidden",
        help="Include entries marked Hidden or NoDisplay"
    ),
) -> None:
    """
    List installed desktop applications or launch one by name.
    
    Examples:
        desktop-catalog                    # List visible applications
        desktop-catalog --include-hidden   # List everything
        desktop-catalog Firefox            # Launch Firefox
    """
    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        print("Continuing with default settings...", file=sys.stderr)
        config = Config()
    
    configure_logging(config.log_level)
    launcher = Launcher.from_config(config)
    show_hidden = include_hidden or config.include_hidden
    
    if name is None:
        apps = launcher.list_apps(include_hidden=show_hidden)
        annotations = {app: launcher.annotate(entry) for app, entry in apps.items()}
        print(render_listing(apps, annotations, color=sys.stdout.isatty()), end="")
        sys.exit(0)
    
    try:
        launcher.run_selected(name)
    except ApplicationNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except OSError as e:
        print(f"Launch failed: {e}", file=sys.stderr)
        sys.exit(3)
    
    sys.exit(0)


def main() -> None:
    """Entry point for the CLI."""
    typer.run(run)


if __name__ == "__main__":
    main()
