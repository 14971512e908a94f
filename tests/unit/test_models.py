"""Unit tests for the data models.

Tests decoding of API payloads and the omit-when-empty wire format.
"""

import json

import pytest
from pydantic import ValidationError

from ghostkit.models import (
    ErrorResponse,
    Image,
    Meta,
    Newsletter,
    Pagination,
    Post,
    PostsResponse,
    Setting,
    SettingsResponse,
    Site,
    Tag,
    Webhook,
)


class TestGhostModel:
    """Test cases for shared serialization behavior."""

    def test_empty_record_serializes_empty(self):
        """Test unset optional fields are omitted."""
        assert Post().to_dict() == {}
        assert Tag().to_dict() == {}
        assert Webhook().to_dict() == {}

    def test_post_round_trip(self):
        """Test a fully populated post survives decode and encode."""
        data = {
            "id": "64f0c1a2b3",
            "uuid": "2b9e7a51-3f2c-4d0e-9a3b-1f2e3d4c5b6a",
            "title": "Hello World",
            "slug": "hello-world",
            "html": "<p>Hi</p>",
            "mobiledoc": "{\"version\":\"0.3.1\",\"atoms\":[],\"cards\":[],\"markups\":[],\"sections\":[]}",
            "status": "published",
            "visibility": "public",
            "published_at": "2024-01-15T10:00:00.000Z",
            "created_at": "2024-01-14T09:00:00.000Z",
            "updated_at": "2024-01-15T10:00:00.000Z",
            "feature_image": "https://example.ghost.io/content/images/cover.jpg",
            "tags": [{"id": "t1", "name": "News", "slug": "news"}],
            "authors": [{"id": "u1", "name": "Jane", "slug": "jane", "email": "jane@example.com"}],
            "excerpt": "Hi",
            "custom_excerpt": "A greeting",
            "featured": True,
        }

        assert Post.model_validate(data).to_dict() == data

    def test_false_kept(self):
        """Test false booleans are not treated as empty."""
        assert Post(featured=False).to_dict() == {"featured": False}

    def test_unknown_fields_ignored(self):
        """Test fields the models do not know are dropped."""
        post = Post.model_validate({"id": "1", "reading_time": 3, "og_title": "x"})

        assert post.to_dict() == {"id": "1"}

    def test_to_json(self):
        """Test the JSON form matches the dict form."""
        post = Post(title="Hello", tags=[Tag(name="News")])

        assert json.loads(post.to_json()) == {"title": "Hello", "tags": [{"name": "News"}]}


class TestPagination:
    """Test cases for pagination metadata."""

    def test_wire_names(self):
        """Test pages and total decode into the long field names."""
        pagination = Pagination.model_validate(
            {"page": 1, "limit": 15, "pages": 3, "total": 42, "next": 2, "prev": None}
        )

        assert pagination.total_pages == 3
        assert pagination.total_items == 42
        assert pagination.next == 2
        assert pagination.prev is None

    def test_null_links_serialized(self):
        """Test next and prev are emitted as null rather than omitted."""
        data = Pagination(page=3, limit=15, total_pages=3, total_items=42, prev=2).to_dict()

        assert data == {"page": 3, "limit": 15, "pages": 3, "total": 42, "next": None, "prev": 2}
        assert '"next": null' in Pagination(prev=2).to_json()

    def test_meta_default(self):
        """Test meta always carries a pagination block."""
        assert Meta().pagination.page == 0

    def test_posts_response_with_meta(self):
        """Test a list payload decodes records and pagination."""
        response = PostsResponse.model_validate_json(
            '{"posts": [{"id": "1"}], "meta": {"pagination": {"page": 1, "limit": 15, "pages": 1, '
            '"total": 1, "next": null, "prev": null}}}'
        )

        assert response.posts[0].id == "1"
        assert response.meta.pagination.to_dict()["next"] is None


class TestTag:
    """Test cases for the Tag model."""

    def test_post_count_alias(self):
        """Test the post count uses its dotted wire name."""
        tag = Tag.model_validate({"name": "News", "count.posts": 5})

        assert tag.post_count == 5
        assert tag.to_dict() == {"name": "News", "count.posts": 5}

    def test_post_count_by_name(self):
        """Test the post count may be set by field name."""
        assert Tag(post_count=2).to_dict() == {"count.posts": 2}


class TestSetting:
    """Test cases for setting values."""

    @pytest.mark.parametrize("value", ["My Blog", True, False, 5, 1.5, None])
    def test_value_types_preserved(self, value):
        """Test each value kind decodes as itself."""
        setting = Setting.model_validate_json(json.dumps({"key": "k", "value": value}))

        assert setting.value == value
        assert type(setting.value) is type(value)

    def test_bool_not_coerced(self):
        """Test JSON booleans stay booleans rather than numbers."""
        setting = Setting.model_validate_json('{"key": "is_private", "value": true}')

        assert setting.value is True

    def test_null_value_serialized(self):
        """Test an unset value is written as null."""
        assert Setting(key="cover_image").to_dict() == {"key": "cover_image", "value": None}

    def test_other_values_rejected(self):
        """Test lists and objects are not setting values."""
        with pytest.raises(ValidationError):
            Setting.model_validate({"key": "navigation", "value": [{"label": "Home"}]})

    def test_settings_lookup(self):
        """Test looking up a setting by key."""
        settings = SettingsResponse(settings=[Setting(key="title", value="Blog")])

        assert settings.get("title") == "Blog"
        assert settings.get("missing") is None


class TestOtherModels:
    """Test cases for site, newsletter, image and error models."""

    def test_site_fields_always_present(self):
        """Test site fields serialize even when empty."""
        assert Site(title="Blog").to_dict() == {
            "title": "Blog",
            "description": "",
            "logo": "",
            "icon": "",
            "url": "",
            "version": "",
        }

    def test_site_null_fields(self):
        """Test null site fields read as empty strings."""
        site = Site.model_validate({"title": "Blog", "logo": None, "icon": None})

        assert site.logo == ""
        assert site.to_dict()["icon"] == ""

    def test_newsletter_null_fields(self):
        """Test null core newsletter fields read as empty strings."""
        newsletter = Newsletter.model_validate({"id": "n1", "description": None, "sender_name": None})

        assert newsletter.description == ""
        assert "sender_name" not in newsletter.to_dict()

    def test_newsletter_sender_omitted(self):
        """Test newsletter sender fields are omitted when unset."""
        data = Newsletter(id="n1", name="Weekly").to_dict()

        assert data == {"id": "n1", "name": "Weekly", "description": "", "status": "", "slug": ""}

    def test_newsletter_subscribe_false_kept(self):
        """Test an explicit false subscribe flag is kept."""
        assert Newsletter(subscribe_on_signup=False).to_dict()["subscribe_on_signup"] is False

    def test_image_ref_omitted(self):
        """Test an image without ref serializes only its URL."""
        assert Image(url="https://cdn/x.png").to_dict() == {"url": "https://cdn/x.png"}

    def test_error_response(self):
        """Test the error envelope decodes its entries."""
        envelope = ErrorResponse.model_validate_json(
            '{"errors": [{"message": "Validation failed", "context": "Title is required", "type": "ValidationError"}]}'
        )

        assert envelope.errors[0].message == "Validation failed"
        assert envelope.errors[0].context == "Title is required"
