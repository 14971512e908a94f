"""ghostkit package.

A typed client for the Ghost Admin API. Provides token authentication,
request dispatch with classified errors, and accessors for posts, pages,
tags, users, newsletters, webhooks, settings and image uploads.
"""

__version__ = "0.1.0"
__description__ = "Typed client for the Ghost Admin API"

# Re-export main classes for convenience
from .client import GhostClient
from .config import ConfigManager, Profile
from .render import markdown_to_html
from .utils.auth import JWTAuth, parse_admin_key, generate_token, generate_token_at
from .exceptions import (
    GhostKitError,
    ConfigError,
    AuthenticationError,
    MalformedCredentialError,
    TokenError,
    NetworkError,
    DecodeError,
    RecordValidationError,
    APIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ResourceNotFoundError,
    EmptyResultError,
)

__all__ = [
    "__version__",
    "__description__",
    "GhostClient",
    "ConfigManager",
    "Profile",
    "markdown_to_html",
    "JWTAuth",
    "parse_admin_key",
    "generate_token",
    "generate_token_at",
    "GhostKitError",
    "ConfigError",
    "AuthenticationError",
    "MalformedCredentialError",
    "TokenError",
    "NetworkError",
    "DecodeError",
    "RecordValidationError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ResourceNotFoundError",
    "EmptyResultError",
]
