"""Markdown rendering for post and page bodies.

Ghost stores HTML; callers writing in Markdown convert it here before
sending it with ``source=html``.
"""

from typing import Union

import markdown

EXTENSIONS = [
    "tables",
    "fenced_code",
    "sane_lists",
    "toc",
]

EXTENSION_CONFIGS = {
    # Heading ids only, no permalink anchors
    "toc": {"permalink": False},
}


def markdown_to_html(text: Union[str, bytes]) -> str:
    """Convert Markdown to HTML.

    Headings get ``id`` attributes derived from their text, so that
    ``# Hello World`` renders as ``<h1 id="hello-world">Hello World</h1>``.
    Raw HTML in the input is passed through, so output shown on a web page
    should still be sanitized.

    Args:
        text: Markdown source, as text or UTF-8 bytes

    Returns:
        Rendered HTML
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")

    # Markdown instances keep toc state between conversions
    renderer = markdown.Markdown(extensions=EXTENSIONS, extension_configs=EXTENSION_CONFIGS)
    return renderer.convert(text)
