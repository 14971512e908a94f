"""Tag management commands for the ghostkit CLI.

Tags whose name starts with ``#`` are internal tags: they can be used to
group content but are not shown on the site.
"""

from typing import Optional

import typer

from ..app import console, get_client, handle_exceptions, output_record, output_records
from ..models import Tag

app = typer.Typer()

TAG_COLUMNS = ["id", "name", "slug", "visibility", "count.posts"]


@app.command("list")
@handle_exceptions
def list_tags(
    ctx: typer.Context,
    limit: int = typer.Option(0, "--limit", help="Number of tags to return (0 for server default)"),
) -> None:
    """List tags with their post counts."""
    response = get_client(ctx).tags.list(limit=limit)
    output_records(ctx, response.tags, TAG_COLUMNS, title="Tags", meta=response.meta)


@app.command()
@handle_exceptions
def get(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Tag ID or slug"),
) -> None:
    """Get a specific tag by ID or slug."""
    output_record(ctx, get_client(ctx).tags.get(id_or_slug))


@app.command()
@handle_exceptions
def create(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Tag name (prefix with # for an internal tag)"),
    slug: Optional[str] = typer.Option(None, "--slug", help="Tag slug"),
    description: Optional[str] = typer.Option(None, "--description", help="Tag description"),
) -> None:
    """Create a new tag."""
    tag = get_client(ctx).tags.create(Tag(name=name, slug=slug, description=description))
    output_record(ctx, tag)


@app.command()
@handle_exceptions
def delete(
    ctx: typer.Context,
    tag_id: str = typer.Argument(..., help="Tag ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a tag. This removes it from every post that uses it."""
    if not force:
        typer.confirm(f"Delete tag {tag_id}?", abort=True)

    get_client(ctx).tags.delete(tag_id)
    console.print(f"[green]Deleted tag {tag_id}[/green]")
