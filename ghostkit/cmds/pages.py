"""Page management commands for the ghostkit CLI."""

from typing import Optional

import typer

from ..app import console, get_client, handle_exceptions, output_record, output_records

app = typer.Typer()

PAGE_COLUMNS = ["id", "title", "slug", "status", "published_at"]


@app.command("list")
@handle_exceptions
def list_pages(
    ctx: typer.Context,
    status: Optional[str] = typer.Option(None, "--status", help="Filter by status (draft, published, all)"),
    limit: int = typer.Option(0, "--limit", help="Number of pages to return (0 for server default)"),
) -> None:
    """List pages."""
    response = get_client(ctx).pages.list(status=status, limit=limit)
    output_records(ctx, response.pages, PAGE_COLUMNS, title="Pages", meta=response.meta)


@app.command()
@handle_exceptions
def get(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Page ID or slug"),
) -> None:
    """Get a specific page by ID or slug."""
    output_record(ctx, get_client(ctx).pages.get(id_or_slug))


@app.command()
@handle_exceptions
def publish(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Page ID or slug"),
) -> None:
    """Publish a page."""
    page = get_client(ctx).pages.publish(id_or_slug)
    console.print(f"[green]Published page {page.id}[/green]")


@app.command()
@handle_exceptions
def unpublish(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Page ID or slug"),
) -> None:
    """Revert a page to draft."""
    page = get_client(ctx).pages.unpublish(id_or_slug)
    console.print(f"[green]Page {page.id} is now a draft[/green]")
