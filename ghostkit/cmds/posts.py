"""Post management commands for the ghostkit CLI.

This module provides commands for listing, creating, deleting and changing
the status of Ghost posts.
"""

from pathlib import Path
from typing import List, Optional

import typer

from ..app import console, get_client, handle_exceptions, output_record, output_records
from ..exceptions import GhostKitError
from ..models import Post, Tag
from ..render import markdown_to_html

app = typer.Typer()

POST_COLUMNS = ["id", "title", "slug", "status", "published_at", "tags"]


@app.command("list")
@handle_exceptions
def list_posts(
    ctx: typer.Context,
    status: Optional[str] = typer.Option(None, "--status", help="Filter by status (draft, published, scheduled, all)"),
    limit: int = typer.Option(0, "--limit", help="Number of posts to return (0 for server default)"),
) -> None:
    """List posts.

    Examples:
        # List published posts only
        ghostkit posts list --status published

        # List the ten most recent posts
        ghostkit posts list --limit 10
    """
    response = get_client(ctx).posts.list(status=status, limit=limit)
    output_records(ctx, response.posts, POST_COLUMNS, title="Posts", meta=response.meta)


@app.command()
@handle_exceptions
def get(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Post ID or slug"),
) -> None:
    """Get a specific post by ID or slug."""
    post = get_client(ctx).posts.get(id_or_slug)
    output_record(ctx, post)


@app.command()
@handle_exceptions
def create(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Post title"),
    html: Optional[str] = typer.Option(None, "--html", help="Post content as HTML"),
    markdown_file: Optional[Path] = typer.Option(None, "--markdown", help="Read content from a Markdown file"),
    status: str = typer.Option("draft", "--status", help="Post status"),
    slug: Optional[str] = typer.Option(None, "--slug", help="Post slug (auto-generated if not provided)"),
    tags: Optional[List[str]] = typer.Option(None, "--tag", help="Tag names (can be repeated)"),
    excerpt: Optional[str] = typer.Option(None, "--excerpt", help="Custom excerpt"),
    featured: bool = typer.Option(False, "--featured", help="Mark as featured"),
) -> None:
    """Create a new post.

    Examples:
        # Create a draft from a Markdown file
        ghostkit posts create --title "From File" --markdown post.md

        # Create and publish with tags
        ghostkit posts create --title "News" --html "<p>Hi</p>" --status published --tag news
    """
    if html and markdown_file:
        raise GhostKitError("Use either --html or --markdown, not both")

    if markdown_file:
        html = markdown_to_html(markdown_file.read_text(encoding="utf-8"))

    post = Post(
        title=title,
        html=html,
        status=status,
        slug=slug,
        custom_excerpt=excerpt,
        featured=featured or None,
        tags=[Tag(name=name) for name in tags] if tags else None,
    )
    created = get_client(ctx).posts.create(post)
    output_record(ctx, created)


@app.command()
@handle_exceptions
def delete(
    ctx: typer.Context,
    post_id: str = typer.Argument(..., help="Post ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Permanently delete a post."""
    if not force:
        typer.confirm(f"Delete post {post_id}?", abort=True)

    get_client(ctx).posts.delete(post_id)
    console.print(f"[green]Deleted post {post_id}[/green]")


@app.command()
@handle_exceptions
def publish(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Post ID or slug"),
) -> None:
    """Publish a post."""
    post = get_client(ctx).posts.publish(id_or_slug)
    console.print(f"[green]Published post {post.id}[/green]")


@app.command()
@handle_exceptions
def unpublish(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Post ID or slug"),
) -> None:
    """Revert a post to draft."""
    post = get_client(ctx).posts.unpublish(id_or_slug)
    console.print(f"[green]Post {post.id} is now a draft[/green]")


@app.command()
@handle_exceptions
def schedule(
    ctx: typer.Context,
    id_or_slug: str = typer.Argument(..., help="Post ID or slug"),
    publish_at: str = typer.Argument(..., help="Publication time (ISO 8601, e.g. 2025-01-15T12:00:00Z)"),
) -> None:
    """Schedule a post for publication."""
    post = get_client(ctx).posts.schedule(id_or_slug, publish_at)
    console.print(f"[green]Post {post.id} scheduled for {post.published_at or publish_at}[/green]")
