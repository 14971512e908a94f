"""Site information commands for the ghostkit CLI."""

import typer

from ..app import get_client, handle_exceptions, output_record, output_records

app = typer.Typer()


@app.command()
@handle_exceptions
def info(ctx: typer.Context) -> None:
    """Show site title, URL and Ghost version."""
    output_record(ctx, get_client(ctx).get_site())


@app.command()
@handle_exceptions
def settings(ctx: typer.Context) -> None:
    """Show all site settings."""
    response = get_client(ctx).get_settings()
    output_records(ctx, response.settings, ["key", "value"], title="Settings")
