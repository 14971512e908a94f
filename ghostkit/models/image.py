"""Image model for Ghost CMS."""

from typing import List, Optional

from .base import GhostModel


class Image(GhostModel):
    """An uploaded image."""

    url: str = ""
    ref: Optional[str] = None


class ImagesResponse(GhostModel):
    images: List[Image] = []
