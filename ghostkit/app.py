"""Main Typer application for the ghostkit CLI.

This module contains the main Typer app instance and registers all command
groups. It handles global options (profile, config file, debug mode, output
format) and the shared error handling and output helpers the commands use.
"""

import functools
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .client import GhostClient
from .config import ConfigManager
from .exceptions import GhostKitError, ConfigError
from .models import GhostModel, Meta

# Create main Typer app
app = typer.Typer(
    name="ghostkit",
    help="Command-line access to the Ghost Admin API",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"ghostkit {__version__}")
        raise typer.Exit()


def configure_logging(debug: bool) -> None:
    """Send ghostkit's log records to the console when debugging."""
    if not debug:
        return

    logger = logging.getLogger("ghostkit")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


# Global options
@app.callback()
def main(
    ctx: typer.Context,
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Configuration profile to use",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (default: ~/.ghostkit/config.toml)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    output_format: str = typer.Option(
        "table",
        "--output",
        "-o",
        help="Output format (table, json)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """ghostkit - manage a Ghost site from the command line.

    Examples:
        # List published posts
        ghostkit posts list --status published

        # Publish a draft by slug
        ghostkit posts publish my-draft

        # Upload an image
        ghostkit images upload photo.jpg
    """
    configure_logging(debug)

    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile
    ctx.obj["config_file"] = config_file
    ctx.obj["debug"] = debug
    ctx.obj["output_format"] = output_format.lower()
    ctx.obj["client"] = None


def get_client(ctx: typer.Context) -> GhostClient:
    """Get the client for the selected profile, creating it on first use."""
    if ctx.obj.get("client") is None:
        config_manager = ConfigManager(ctx.obj.get("config_file"))
        profile = config_manager.resolve_profile(ctx.obj.get("profile"))
        ctx.obj["client"] = GhostClient.from_profile(profile)
    return ctx.obj["client"]


def handle_exceptions(func: Callable) -> Callable:
    """Decorator to handle common exceptions in commands."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GhostKitError as e:
            console.print(f"Error: {e.message}", style="red", markup=False, soft_wrap=True)
            ctx = typer.get_current_context()
            debug = ctx.obj.get("debug", False) if ctx.obj else False
            if not debug and not isinstance(e, ConfigError):
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
        except OSError as e:
            console.print(f"File error: {e}", style="red", markup=False, soft_wrap=True)
            raise typer.Exit(1)
    return wrapper


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(item.get("name", item)) if isinstance(item, dict) else str(item) for item in value)
    return str(value)


def output_records(
    ctx: typer.Context,
    records: Sequence[GhostModel],
    columns: List[str],
    title: Optional[str] = None,
    meta: Optional[Meta] = None,
) -> None:
    """Print records as a table or as JSON, following --output."""
    if ctx.obj.get("output_format") == "json":
        typer.echo(json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False))
        return

    if not records:
        console.print("[dim]No data to display[/dim]")
        return

    table = Table(title=title)
    for col in columns:
        table.add_column(col.replace("_", " ").title(), overflow="fold")

    for record in records:
        data = record.to_dict()
        table.add_row(*[_cell(data.get(col)) for col in columns])

    console.print(table)

    if meta is not None:
        pagination = meta.pagination
        console.print(
            f"[dim]Page {pagination.page} of {pagination.total_pages} "
            f"(showing {len(records)} of {pagination.total_items} total)[/dim]"
        )


def output_record(ctx: typer.Context, record: GhostModel) -> None:
    """Print a single record as key/value rows or as JSON."""
    data = record.to_dict()
    if ctx.obj.get("output_format") == "json":
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    for key, value in data.items():
        table.add_row(key, _cell(value))
    console.print(table)


_registered = False


def register_commands() -> None:
    """Register all command groups with the main app."""
    global _registered
    if _registered:
        return

    from .cmds import posts_app, pages_app, tags_app, site_app, images_app

    app.add_typer(posts_app, name="posts", help="Manage posts")
    app.add_typer(pages_app, name="pages", help="Manage pages")
    app.add_typer(tags_app, name="tags", help="Manage tags")
    app.add_typer(site_app, name="site", help="Show site information and settings")
    app.add_typer(images_app, name="images", help="Upload images")
    _registered = True


def cli() -> None:
    """Entry point for the CLI."""
    register_commands()

    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
