"""Post, Page and Author models for Ghost CMS."""

from typing import List, Optional

from .base import GhostModel, Meta
from .tag import Tag


class Author(GhostModel):
    """A Ghost staff user, returned by the users endpoint and on posts."""

    id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    profile_image: Optional[str] = None


class Page(GhostModel):
    """Ghost CMS Page model.

    Timestamps are kept as the ISO 8601 strings the API sends, so that
    ``updated_at`` can be echoed back unchanged for conflict detection.
    """

    id: Optional[str] = None
    uuid: Optional[str] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    html: Optional[str] = None
    mobiledoc: Optional[str] = None
    status: Optional[str] = None
    visibility: Optional[str] = None
    published_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    feature_image: Optional[str] = None
    tags: Optional[List[Tag]] = None
    authors: Optional[List[Author]] = None


class Post(Page):
    """Ghost CMS Post model."""

    excerpt: Optional[str] = None
    custom_excerpt: Optional[str] = None
    featured: Optional[bool] = None


class PostsResponse(GhostModel):
    """Collection wrapper for post listings."""

    posts: List[Post] = []
    meta: Optional[Meta] = None


class PagesResponse(GhostModel):
    """Collection wrapper for page listings."""

    pages: List[Page] = []
    meta: Optional[Meta] = None


class UsersResponse(GhostModel):
    """Collection wrapper for user listings."""

    users: List[Author] = []
    meta: Optional[Meta] = None
