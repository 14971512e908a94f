"""Image commands for the ghostkit CLI."""

from pathlib import Path

import typer

from ..app import get_client, handle_exceptions, output_records

app = typer.Typer()


@app.command()
@handle_exceptions
def upload(
    ctx: typer.Context,
    file_path: Path = typer.Argument(..., help="Path to image file"),
) -> None:
    """Upload an image file and print its URL.

    Examples:
        ghostkit images upload photo.jpg
    """
    response = get_client(ctx).upload_image(file_path)
    output_records(ctx, response.images, ["url", "ref"], title="Uploaded images")
