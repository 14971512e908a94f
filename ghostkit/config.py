"""Configuration management for ghostkit.

Profiles supply the site URL and admin key a client needs. They are read
from a TOML file and may be overridden by environment variables:

    default_profile = "blog"

    [profiles.blog]
    url = "https://blog.example.com"
    admin_key = "6489...:a1b2..."
    timeout = 30

``GHOST_API_URL`` and ``GHOST_ADMIN_API_KEY`` take precedence over the file.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError, MalformedCredentialError
from .utils.auth import parse_admin_key

logger = logging.getLogger(__name__)

ENV_URL = "GHOST_API_URL"
ENV_ADMIN_KEY = "GHOST_ADMIN_API_KEY"


class Profile(BaseModel):
    """Connection settings for one Ghost site."""

    name: str = Field(..., description="Profile name")
    url: str = Field(..., description="Ghost site URL")
    admin_key: str = Field(..., description="Admin API key")
    timeout: float = Field(default=30, description="Request timeout in seconds")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the URL has an http(s) scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v

    @field_validator("admin_key")
    @classmethod
    def validate_admin_key(cls, v: str) -> str:
        """Validate admin key format."""
        try:
            parse_admin_key(v)
        except MalformedCredentialError as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout value."""
        if v <= 0:
            raise ValueError("Timeout must be greater than 0")
        if v > 300:  # 5 minutes max
            raise ValueError("Timeout cannot exceed 300 seconds")
        return v


class ConfigManager:
    """Reads connection profiles from a TOML file and the environment."""

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """Initialize configuration manager.

        Args:
            config_file: Configuration file path. If None, uses
                ~/.ghostkit/config.toml. A missing file means no profiles.
        """
        self.config_file = config_file or Path.home() / ".ghostkit" / "config.toml"
        self._profiles: Dict[str, Dict[str, Any]] = {}
        self._default_profile: Optional[str] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not self.config_file.exists():
            logger.debug("No configuration file at %s", self.config_file)
            return

        try:
            with open(self.config_file, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        profiles = config_data.get("profiles", {})
        if not isinstance(profiles, dict):
            raise ConfigError("'profiles' must be a table")

        self._profiles = profiles
        self._default_profile = config_data.get("default_profile")

    def _build_profile(self, name: str, data: Dict[str, Any]) -> Profile:
        merged = dict(data)
        if os.getenv(ENV_URL):
            merged["url"] = os.environ[ENV_URL]
        if os.getenv(ENV_ADMIN_KEY):
            merged["admin_key"] = os.environ[ENV_ADMIN_KEY]

        try:
            return Profile(name=name, **merged)
        except ValidationError as e:
            raise ConfigError(f"Invalid profile '{name}': {e}") from e

    def list_profiles(self) -> List[str]:
        """List the names of all profiles in the configuration file."""
        return sorted(self._profiles)

    def get_profile(self, name: str) -> Profile:
        """Get a specific profile by name.

        Args:
            name: Profile name

        Returns:
            Profile instance, with environment overrides applied

        Raises:
            ConfigError: If profile doesn't exist or is invalid
        """
        if name not in self._profiles:
            raise ConfigError(f"Profile '{name}' not found")

        return self._build_profile(name, self._profiles[name])

    def has_environment_config(self) -> bool:
        """Check if environment variables provide sufficient configuration."""
        return bool(os.getenv(ENV_URL) and os.getenv(ENV_ADMIN_KEY))

    def get_environment_profile(self) -> Profile:
        """Get a profile built from environment variables only.

        Raises:
            ConfigError: If insufficient environment configuration
        """
        if not os.getenv(ENV_URL):
            raise ConfigError(f"{ENV_URL} environment variable is required")
        if not os.getenv(ENV_ADMIN_KEY):
            raise ConfigError(f"{ENV_ADMIN_KEY} environment variable is required")

        return self._build_profile("env", {})

    def get_default_profile(self) -> Profile:
        """Get the default profile.

        Raises:
            ConfigError: If no default profile is set
        """
        if not self._default_profile:
            raise ConfigError("No default profile set")

        return self.get_profile(self._default_profile)

    def resolve_profile(self, name: Optional[str] = None) -> Profile:
        """Pick the profile to connect with.

        An explicit name wins, then the file's default profile, then the
        environment.

        Raises:
            ConfigError: If no usable configuration is found
        """
        if name:
            return self.get_profile(name)
        if self._default_profile:
            return self.get_default_profile()
        if self.has_environment_config():
            return self.get_environment_profile()

        raise ConfigError(
            f"No profile configured. Create {self.config_file} or set {ENV_URL} and {ENV_ADMIN_KEY}."
        )
