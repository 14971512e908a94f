"""Ghost Admin API client.

This module provides the client that authenticates, sends and classifies
every Admin API request. Resource operations (posts, pages, tags, ...) are
exposed as accessor attributes built on top of ``GhostClient.execute``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Type, TypeVar, Union

import requests
from pydantic import ValidationError

from .config import Profile
from .exceptions import DecodeError, NetworkError, RateLimitError, error_class_for_status
from .models import (
    ErrorResponse,
    GhostModel,
    ImagesResponse,
    Site,
    SiteResponse,
    SettingsResponse,
)
from .resources import (
    NewsletterResource,
    PageResource,
    PostResource,
    TagResource,
    UserResource,
    WebhookResource,
)
from .utils.auth import JWTAuth

logger = logging.getLogger(__name__)

API_PATH = "/ghost/api/admin"

ModelT = TypeVar("ModelT", bound=GhostModel)


class GhostClient:
    """Client for the Ghost Admin API.

    The client holds no per-request state: every call mints its own token
    and owns its own request and response, so one instance may be shared by
    independent callers. Connection pooling, timeouts and proxies are those
    of the ``requests.Session`` it is given.
    """

    def __init__(
        self,
        url: str,
        admin_key: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize Ghost API client.

        Args:
            url: Ghost site URL, e.g. "https://mysite.ghost.io"
            admin_key: Admin API key in "id:secret" format
            session: Session used to send requests. A new one is created if
                not provided.
            timeout: Request timeout in seconds passed to every request
        """
        if url.endswith("/"):
            url = url[:-1]
        self._base_url = url + API_PATH
        self._auth = JWTAuth(admin_key)
        self.session = session or requests.Session()
        self.timeout = timeout

        self.posts = PostResource(self)
        self.pages = PageResource(self)
        self.tags = TagResource(self)
        self.users = UserResource(self)
        self.newsletters = NewsletterResource(self)
        self.webhooks = WebhookResource(self)

    @classmethod
    def from_profile(cls, profile: Profile, session: Optional[requests.Session] = None) -> "GhostClient":
        """Create a client from a configuration profile."""
        return cls(profile.url, profile.admin_key, session=session, timeout=profile.timeout)

    @property
    def base_url(self) -> str:
        """Return the base URL for API requests."""
        return self._base_url

    def _dispatch(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(f"Request failed: {e}") from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def send(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Send one authenticated request and return the raw response.

        Args:
            method: HTTP method
            path: Path relative to the API base, including any query string
            body: JSON-serializable request body

        Returns:
            The response, with its body fully read

        Raises:
            TokenError: If no token can be minted; nothing is sent
            NetworkError: If the request could not be completed
        """
        headers = self._auth.get_headers()
        data = None
        if body is not None:
            data = json.dumps(body)
            headers["Content-Type"] = "application/json"

        return self._dispatch(method, path, headers=headers, data=data)

    def execute(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        result: Optional[Type[ModelT]] = None,
    ) -> Optional[ModelT]:
        """Send a request and decode its response.

        Args:
            method: HTTP method
            path: Path relative to the API base, including any query string
            body: JSON-serializable request body
            result: Model to decode a successful response into

        Returns:
            The decoded ``result`` model, or None when no model was given

        Raises:
            TokenError: If no token can be minted
            NetworkError: If the request could not be completed
            APIError: If the server answered with status >= 400
            DecodeError: If a successful response does not match ``result``
        """
        response = self.send(method, path, body)
        return self._handle_response(response, result)

    def _handle_response(self, response: requests.Response, result: Optional[Type[ModelT]] = None) -> Optional[ModelT]:
        """Classify a response and decode its body.

        Args:
            response: Response object
            result: Model to decode a successful response into

        Returns:
            The decoded model, or None

        Raises:
            APIError: For status codes >= 400
            DecodeError: If a successful body cannot be decoded
        """
        if response.status_code >= 400:
            raise self._api_error(response)

        if result is None:
            return None

        try:
            return result.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Invalid {result.__name__} in response ({response.status_code}): {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _api_error(self, response: requests.Response) -> Exception:
        """Build the APIError for a failed response.

        The message comes from the first entry of the error envelope, or from
        the raw body when the body is not an envelope or lists no errors.
        """
        status = response.status_code
        try:
            envelope: Optional[ErrorResponse] = ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            envelope = None

        if envelope is not None and envelope.errors:
            first = envelope.errors[0]
            detail = first.message
            if first.context:
                detail += ": " + first.context
        else:
            detail = response.text

        error_class = error_class_for_status(status)
        kwargs: Dict[str, Any] = {
            "status_code": status,
            "response_data": envelope.to_dict() if envelope is not None else {},
            "errors": envelope.errors if envelope is not None else [],
        }
        if error_class is RateLimitError:
            retry_after = response.headers.get("Retry-After")
            kwargs["retry_after"] = int(retry_after) if retry_after and retry_after.isdigit() else None

        return error_class(f"API error ({status}): {detail}", **kwargs)

    # Site information methods
    def get_site(self) -> Site:
        """Get site information including title, description and version."""
        response = self.execute("GET", "/site/", result=SiteResponse)
        return response.site

    def get_settings(self) -> SettingsResponse:
        """Get the site settings as key/value pairs."""
        return self.execute("GET", "/settings/", result=SettingsResponse)

    # Image upload methods
    def upload_image(self, image_path: Union[str, Path]) -> ImagesResponse:
        """Upload an image file to Ghost CMS.

        Args:
            image_path: Path to image file

        Returns:
            Upload response data

        Raises:
            OSError: If the file cannot be opened; nothing is sent
        """
        with open(image_path, "rb") as f:
            return self.upload_image_stream(f, os.path.basename(image_path))

    def upload_image_stream(self, reader: BinaryIO, filename: str) -> ImagesResponse:
        """Upload image data read from a binary file object.

        Args:
            reader: Readable binary stream with the image contents
            filename: File name sent in the multipart Content-Disposition

        Returns:
            Upload response data
        """
        # requests sets the multipart Content-Type with its boundary
        headers = self._auth.get_headers()
        files = {"file": (filename, reader)}
        response = self._dispatch("POST", "/images/upload/", headers=headers, files=files)
        return self._handle_response(response, ImagesResponse)
