"""Site model for Ghost CMS."""

from typing import Any

from pydantic import Field, field_validator

from .base import GhostModel


class Site(GhostModel):
    """General information about the Ghost installation.

    Every field is always present; ``null`` values (e.g. a site without a
    logo) are read as empty strings.
    """

    title: str = ""
    description: str = ""
    logo: str = ""
    icon: str = ""
    url: str = ""
    version: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class SiteResponse(GhostModel):
    site: Site = Field(default_factory=Site)
