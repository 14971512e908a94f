"""Utility modules for ghostkit.

This package contains the token signer used to authenticate Admin API
requests.
"""

from .auth import JWTAuth, parse_admin_key, generate_token, generate_token_at

__all__ = [
    "JWTAuth",
    "parse_admin_key",
    "generate_token",
    "generate_token_at",
]
