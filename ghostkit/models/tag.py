"""Tag model for Ghost CMS."""

from typing import List, Optional

from pydantic import Field

from .base import GhostModel, Meta


class Tag(GhostModel):
    """Ghost CMS Tag model.

    Tags whose name starts with ``#`` are internal and not shown on the site.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    feature_image: Optional[str] = None
    visibility: Optional[str] = None
    post_count: Optional[int] = Field(None, alias="count.posts")


class TagsResponse(GhostModel):
    """Collection wrapper for tag listings."""

    tags: List[Tag] = []
    meta: Optional[Meta] = None
