"""Data models for the Ghost Admin API.

This package contains Pydantic models for Ghost CMS records and the
collection wrappers the API returns them in.
"""

from .base import GhostModel, Pagination, Meta, ErrorDetail, ErrorResponse
from .post import Post, Page, Author, PostsResponse, PagesResponse, UsersResponse
from .tag import Tag, TagsResponse
from .site import Site, SiteResponse
from .settings import Setting, SettingValue, SettingsResponse
from .newsletter import Newsletter, NewslettersResponse
from .webhook import Webhook, WebhooksResponse
from .image import Image, ImagesResponse

# Users are returned in the same shape as post authors
User = Author


__all__ = [
    # Base models
    "GhostModel",
    "Pagination",
    "Meta",
    "ErrorDetail",
    "ErrorResponse",

    # Records
    "Post",
    "Page",
    "Tag",
    "Author",
    "User",
    "Site",
    "Setting",
    "SettingValue",
    "Newsletter",
    "Webhook",
    "Image",

    # Collection wrappers
    "PostsResponse",
    "PagesResponse",
    "TagsResponse",
    "UsersResponse",
    "SiteResponse",
    "SettingsResponse",
    "NewslettersResponse",
    "WebhooksResponse",
    "ImagesResponse",
]
