"""Unit tests for config.py module.

Tests the Profile model and the ConfigManager class, including TOML
loading, default profile selection and environment overrides.
"""

import pytest
from pydantic import ValidationError

from ghostkit.config import ConfigManager, Profile
from ghostkit.exceptions import ConfigError

ADMIN_KEY = "5f3d4a9b8c7e2f1a9b8c7e2f:1234567890abcdef1234567890abcdef12345678"
OTHER_KEY = "aaaa:bbbbbbbb"

CONFIG = f"""
default_profile = "blog"

[profiles.blog]
url = "https://blog.example.com"
admin_key = "{ADMIN_KEY}"

[profiles.staging]
url = "https://staging.example.com"
admin_key = "{OTHER_KEY}"
timeout = 10
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG)
    return path


class TestProfile:
    """Test cases for the Profile model."""

    def test_profile_creation(self):
        """Test creating a profile with minimal data."""
        profile = Profile(name="blog", url="https://blog.example.com", admin_key=ADMIN_KEY)

        assert profile.name == "blog"
        assert profile.timeout == 30

    @pytest.mark.parametrize("url", ["blog.example.com", "ftp://blog.example.com"])
    def test_invalid_url(self, url):
        """Test URLs without an http(s) scheme are rejected."""
        with pytest.raises(ValidationError, match="URL must start with"):
            Profile(name="blog", url=url, admin_key=ADMIN_KEY)

    @pytest.mark.parametrize("admin_key", ["nocolon", "id:", "id:nothex", "a:b:c"])
    def test_invalid_admin_key(self, admin_key):
        """Test malformed admin keys are rejected."""
        with pytest.raises(ValidationError, match="Invalid admin key"):
            Profile(name="blog", url="https://blog.example.com", admin_key=admin_key)

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_invalid_timeout(self, timeout):
        """Test timeouts outside (0, 300] are rejected."""
        with pytest.raises(ValidationError, match="Timeout"):
            Profile(name="blog", url="https://blog.example.com", admin_key=ADMIN_KEY, timeout=timeout)


class TestConfigManager:
    """Test cases for the ConfigManager class."""

    def test_missing_file_means_no_profiles(self, tmp_path):
        """Test a missing config file is not an error."""
        manager = ConfigManager(tmp_path / "missing.toml")

        assert manager.list_profiles() == []

    def test_list_profiles(self, config_file):
        """Test profile names are listed sorted."""
        assert ConfigManager(config_file).list_profiles() == ["blog", "staging"]

    def test_get_profile(self, config_file):
        """Test loading a named profile."""
        profile = ConfigManager(config_file).get_profile("staging")

        assert profile.name == "staging"
        assert profile.url == "https://staging.example.com"
        assert profile.admin_key == OTHER_KEY
        assert profile.timeout == 10

    def test_get_missing_profile(self, config_file):
        """Test requesting an unknown profile."""
        with pytest.raises(ConfigError, match="Profile 'prod' not found"):
            ConfigManager(config_file).get_profile("prod")

    def test_default_profile(self, config_file):
        """Test the default profile is used when none is named."""
        assert ConfigManager(config_file).resolve_profile().name == "blog"

    def test_explicit_profile_wins(self, config_file):
        """Test a named profile takes precedence over the default."""
        assert ConfigManager(config_file).resolve_profile("staging").name == "staging"

    def test_no_default_profile(self, tmp_path):
        """Test get_default_profile without a default set."""
        path = tmp_path / "config.toml"
        path.write_text(f'[profiles.blog]\nurl = "https://blog.example.com"\nadmin_key = "{ADMIN_KEY}"\n')

        with pytest.raises(ConfigError, match="No default profile"):
            ConfigManager(path).get_default_profile()

    def test_invalid_toml(self, tmp_path):
        """Test unparseable files raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("this is = = not toml")

        with pytest.raises(ConfigError, match="Failed to load configuration"):
            ConfigManager(path)

    def test_profiles_not_a_table(self, tmp_path):
        """Test a non-table profiles entry is rejected."""
        path = tmp_path / "config.toml"
        path.write_text('profiles = "blog"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            ConfigManager(path)

    def test_invalid_profile_values(self, tmp_path):
        """Test invalid profile contents surface as ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('[profiles.bad]\nurl = "blog.example.com"\nadmin_key = "x"\n')

        with pytest.raises(ConfigError, match="Invalid profile 'bad'"):
            ConfigManager(path).get_profile("bad")

    def test_nothing_configured(self, tmp_path):
        """Test resolving with neither file nor environment."""
        with pytest.raises(ConfigError, match="No profile configured"):
            ConfigManager(tmp_path / "missing.toml").resolve_profile()


class TestEnvironment:
    """Test cases for environment variable configuration."""

    def test_environment_profile(self, tmp_path, monkeypatch):
        """Test a profile built from the environment alone."""
        monkeypatch.setenv("GHOST_API_URL", "https://env.example.com")
        monkeypatch.setenv("GHOST_ADMIN_API_KEY", ADMIN_KEY)
        manager = ConfigManager(tmp_path / "missing.toml")

        assert manager.has_environment_config()
        profile = manager.resolve_profile()
        assert profile.name == "env"
        assert profile.url == "https://env.example.com"

    def test_partial_environment(self, tmp_path, monkeypatch):
        """Test a URL without a key is not enough."""
        monkeypatch.setenv("GHOST_API_URL", "https://env.example.com")
        manager = ConfigManager(tmp_path / "missing.toml")

        assert not manager.has_environment_config()
        with pytest.raises(ConfigError, match="GHOST_ADMIN_API_KEY"):
            manager.get_environment_profile()

    def test_environment_overrides_file(self, config_file, monkeypatch):
        """Test environment values take precedence over file values."""
        monkeypatch.setenv("GHOST_API_URL", "https://env.example.com")

        profile = ConfigManager(config_file).get_profile("blog")

        assert profile.url == "https://env.example.com"
        assert profile.admin_key == ADMIN_KEY
