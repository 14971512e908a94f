"""Authentication utilities for the Ghost Admin API.

Ghost admin keys have the form ``{id}:{secret}`` where the secret is
hex-encoded. Each request carries a short-lived HS256 JWT signed with the
decoded secret, sent as ``Authorization: Ghost <token>``. Tokens are minted
per request and never cached.
"""

import binascii
import logging
import time
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple, Union

import jwt

from ..exceptions import MalformedCredentialError, TokenError

logger = logging.getLogger(__name__)

TOKEN_LIFETIME = 5 * 60
TOKEN_AUDIENCE = "/admin/"
TOKEN_ALGORITHM = "HS256"

Timestamp = Union[datetime, int, float]


def parse_admin_key(admin_key: str) -> Tuple[str, bytes]:
    """Split an admin API key into its id and decoded secret.

    Args:
        admin_key: Admin API key in format "id:secret"

    Returns:
        Tuple of (key id, secret bytes)

    Raises:
        MalformedCredentialError: If the key format is invalid or the secret
            is not valid hex
    """
    parts = admin_key.split(":")
    if len(parts) != 2:
        raise MalformedCredentialError("Invalid admin key format. Expected format: id:secret")

    key_id, secret = parts
    if not key_id:
        raise MalformedCredentialError("Invalid admin key format: id cannot be empty")
    if not secret:
        raise MalformedCredentialError("Invalid admin key format: secret cannot be empty")

    try:
        secret_bytes = binascii.unhexlify(secret)
    except ValueError as e:
        raise MalformedCredentialError(f"Invalid admin key secret: {e}") from e

    return key_id, secret_bytes


def _epoch_seconds(now: Timestamp) -> int:
    if isinstance(now, datetime):
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return int(now.timestamp())
    return int(now)


def generate_token_at(admin_key: str, now: Timestamp) -> str:
    """Generate a JWT for the Admin API issued at a given time.

    The result depends only on the key and ``now``, so two calls with the
    same arguments return the same token.

    Args:
        admin_key: Admin API key in format "id:secret"
        now: Issue time, as a datetime or epoch seconds. Naive datetimes
            are taken as UTC.

    Returns:
        JWT token string, valid for five minutes from ``now``

    Raises:
        MalformedCredentialError: If the admin key is invalid
    """
    key_id, secret = parse_admin_key(admin_key)

    iat = _epoch_seconds(now)
    payload = {
        "iat": iat,
        "exp": iat + TOKEN_LIFETIME,
        "aud": TOKEN_AUDIENCE,
    }
    header = {
        "typ": "JWT",
        "kid": key_id,
    }
    return jwt.encode(payload, secret, algorithm=TOKEN_ALGORITHM, headers=header)


def generate_token(admin_key: str) -> str:
    """Generate a JWT for the Admin API issued now."""
    return generate_token_at(admin_key, time.time())


class JWTAuth:
    """Produces Admin API authorization headers from an admin key."""

    def __init__(self, admin_key: str) -> None:
        """Initialize JWT authentication.

        The key is kept as given and parsed again on every token, so a
        malformed key only fails when a request is built.

        Args:
            admin_key: Ghost admin API key in format "id:secret"
        """
        self._admin_key = admin_key

    @property
    def key_id(self) -> Optional[str]:
        """Return the key id, or None if the key is malformed."""
        try:
            return parse_admin_key(self._admin_key)[0]
        except MalformedCredentialError:
            return None

    def validate(self) -> None:
        """Check the key format without minting a token.

        Raises:
            MalformedCredentialError: If the admin key is invalid
        """
        parse_admin_key(self._admin_key)

    def get_headers(self, now: Optional[Timestamp] = None) -> Dict[str, str]:
        """Get the authorization header for one request.

        Args:
            now: Issue time for the token; defaults to the current time

        Returns:
            Dictionary of HTTP headers

        Raises:
            TokenError: If a token cannot be minted from the admin key
        """
        try:
            token = generate_token_at(self._admin_key, time.time() if now is None else now)
        except MalformedCredentialError as e:
            raise TokenError(f"generating token: {e.message}") from e

        logger.debug("Minted admin token for key %s", self.key_id)
        return {"Authorization": f"Ghost {token}"}
