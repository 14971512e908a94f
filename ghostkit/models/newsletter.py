"""Newsletter model for Ghost CMS."""

from typing import Any, List, Optional

from pydantic import field_validator

from .base import GhostModel


class Newsletter(GhostModel):
    """Ghost CMS Newsletter model."""

    id: str = ""
    name: str = ""
    description: str = ""
    status: str = ""
    slug: str = ""
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_reply_to: Optional[str] = None
    subscribe_on_signup: Optional[bool] = None

    @field_validator("id", "name", "description", "status", "slug", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Read ``null`` core fields as empty strings."""
        return "" if v is None else v


class NewslettersResponse(GhostModel):
    newsletters: List[Newsletter] = []
