"""Webhook model for Ghost CMS."""

from typing import List, Optional

from .base import GhostModel


class Webhook(GhostModel):
    """Ghost CMS Webhook model.

    Ghost calls ``target_url`` whenever ``event`` (e.g. "post.published")
    fires. ``secret`` is used to sign those outgoing requests.
    """

    id: Optional[str] = None
    event: Optional[str] = None
    target_url: Optional[str] = None
    name: Optional[str] = None
    secret: Optional[str] = None
    status: Optional[str] = None
    last_triggered_at: Optional[str] = None
    integration_id: Optional[str] = None


class WebhooksResponse(GhostModel):
    webhooks: List[Webhook] = []
