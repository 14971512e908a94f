"""Resource accessors for the Ghost Admin API.

Every collection endpoint (posts, pages, tags, users, newsletters,
webhooks) follows the same conventions: records travel inside an object
keyed by the plural resource name, single-record calls return a one-element
collection, and lookups accept either an id or a slug. The ``Resource``
classes implement those conventions once; each concrete accessor picks the
operations its endpoint supports.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, Union
from urllib.parse import quote

from pydantic import ValidationError

from .exceptions import EmptyResultError, GhostKitError, RecordValidationError, ResourceNotFoundError
from .models import (
    Author,
    GhostModel,
    Newsletter,
    NewslettersResponse,
    Page,
    PagesResponse,
    Post,
    PostsResponse,
    Tag,
    TagsResponse,
    UsersResponse,
    Webhook,
    WebhooksResponse,
)

logger = logging.getLogger(__name__)

Record = Union[GhostModel, Dict[str, Any]]


class Resource:
    """Shared plumbing for one collection endpoint."""

    plural: str = ""
    kind: str = ""
    model: Type[GhostModel] = GhostModel
    response_model: Type[GhostModel] = GhostModel
    # Query string for reads, for list calls (defaults to the read query),
    # and for create/update calls.
    read_query: str = ""
    list_query: Optional[str] = None
    write_query: str = ""

    def __init__(self, client: Any) -> None:
        """Initialize the accessor.

        Args:
            client: GhostClient used to execute requests
        """
        self._client = client

    def _path(self, *segments: str, query: str = "") -> str:
        parts = [self.plural] + [quote(segment, safe="") for segment in segments]
        path = "/" + "/".join(parts) + "/"
        if query:
            path += "?" + query
        return path

    def _records(self, response: GhostModel) -> List[Any]:
        return getattr(response, self.plural)

    def _fetch(self, path: str) -> GhostModel:
        return self._client.execute("GET", path, result=self.response_model)

    def _coerce(self, record: Record) -> GhostModel:
        """Build a model from a dict record, rejecting keys it cannot carry."""
        if not isinstance(record, dict):
            return record

        known = set()
        for name, field in self.model.model_fields.items():
            known.add(name)
            if field.alias:
                known.add(field.alias)
        unknown = sorted(set(record) - known)
        if unknown:
            raise RecordValidationError(f"Unknown {self.kind} field(s): {', '.join(unknown)}")

        try:
            return self.model.model_validate(record)
        except ValidationError as e:
            raise RecordValidationError(f"Invalid {self.kind}: {e}") from e

    def _write(self, method: str, path: str, record: Record) -> Any:
        """Send one record wrapped in a collection and unwrap the reply."""
        record = self._coerce(record)

        body = {self.plural: [record.to_dict()]}
        response = self._client.execute(method, path, body=body, result=self.response_model)
        records = self._records(response)
        if not records:
            raise EmptyResultError(self.kind)
        return records[0]


class ListMixin(Resource):
    def list(self, status: Optional[str] = None, limit: int = 0) -> Any:
        """List records.

        Args:
            status: Only return records with this status. Empty or "all"
                applies no filter.
            limit: Maximum number of records; 0 uses the server default

        Returns:
            The collection wrapper, including pagination metadata when sent
        """
        clauses = []
        query = self.read_query if self.list_query is None else self.list_query
        if query:
            clauses.append(query)
        if status and status != "all":
            clauses.append(f"filter=status:{status}")
        if limit > 0:
            clauses.append(f"limit={limit}")

        return self._fetch(self._path(query="&".join(clauses)))


class GetMixin(Resource):
    # Retry a failed id lookup under /slug/
    slug_lookup: bool = True

    def get(self, id_or_slug: str) -> Any:
        """Get a single record by id, falling back to slug.

        Any failure of the id lookup triggers the slug lookup, including
        network and server errors, not only 404s.

        Args:
            id_or_slug: Record id or slug

        Returns:
            The record

        Raises:
            ResourceNotFoundError: If the lookup returned no records
        """
        try:
            response = self._fetch(self._path(id_or_slug, query=self.read_query))
        except GhostKitError as e:
            if not self.slug_lookup:
                raise
            logger.debug("%s lookup by id %r failed (%s), trying slug", self.kind, id_or_slug, e)
            response = self._fetch(self._path("slug", id_or_slug, query=self.read_query))

        records = self._records(response)
        if not records:
            raise ResourceNotFoundError(self.kind, id_or_slug)
        return records[0]


class CreateMixin(Resource):
    def create(self, record: Record) -> Any:
        """Create a record and return it as stored by Ghost."""
        return self._write("POST", self._path(query=self.write_query), record)


class UpdateMixin(Resource):
    def update(self, record_id: str, record: Record) -> Any:
        """Update a record by id.

        Ghost rejects updates whose ``updated_at`` does not match the stored
        value, so ``record`` must carry the current ``updated_at``.
        """
        return self._write("PUT", self._path(record_id, query=self.write_query), record)


class DeleteMixin(Resource):
    def delete(self, record_id: str) -> None:
        """Permanently delete a record by id."""
        self._client.execute("DELETE", self._path(record_id))


class PublishMixin(GetMixin, UpdateMixin):
    """Status changes, each done as a fetch followed by an update."""

    def _set_status(self, id_or_slug: str, status: str, published_at: Optional[str] = None) -> Any:
        existing = self.get(id_or_slug)
        logger.debug("Setting %s %s status to %s", self.kind, existing.id, status)
        changes = self.model(
            updated_at=existing.updated_at,
            status=status,
            published_at=published_at,
        )
        return self.update(existing.id, changes)

    def publish(self, id_or_slug: str) -> Any:
        return self._set_status(id_or_slug, "published")

    def unpublish(self, id_or_slug: str) -> Any:
        """Return a record to draft."""
        return self._set_status(id_or_slug, "draft")

    def schedule(self, id_or_slug: str, publish_at: Union[str, datetime]) -> Any:
        """Schedule a record for publication.

        Args:
            id_or_slug: Record id or slug
            publish_at: Publication time, as an ISO 8601 string such as
                "2025-01-15T12:00:00Z" or a datetime

        Returns:
            The updated record
        """
        if isinstance(publish_at, datetime):
            if publish_at.tzinfo is None:
                publish_at = publish_at.replace(tzinfo=timezone.utc)
            publish_at = publish_at.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return self._set_status(id_or_slug, "scheduled", published_at=publish_at)


class PostResource(ListMixin, CreateMixin, DeleteMixin, PublishMixin):
    plural = "posts"
    kind = "post"
    model = Post
    response_model = PostsResponse
    read_query = "formats=html"
    write_query = "source=html&formats=html"


class PageResource(ListMixin, CreateMixin, DeleteMixin, PublishMixin):
    plural = "pages"
    kind = "page"
    model = Page
    response_model = PagesResponse
    read_query = "formats=html"
    # Pages take no source=html, unlike posts
    write_query = "formats=html"


class TagResource(ListMixin, GetMixin, CreateMixin, UpdateMixin, DeleteMixin):
    plural = "tags"
    kind = "tag"
    model = Tag
    response_model = TagsResponse
    list_query = "include=count.posts"


class UserResource(ListMixin, GetMixin):
    plural = "users"
    kind = "user"
    model = Author
    response_model = UsersResponse


class NewsletterResource(ListMixin, GetMixin):
    plural = "newsletters"
    kind = "newsletter"
    model = Newsletter
    response_model = NewslettersResponse
    slug_lookup = False


class WebhookResource(ListMixin, CreateMixin, DeleteMixin):
    plural = "webhooks"
    kind = "webhook"
    model = Webhook
    response_model = WebhooksResponse
