"""Tests for application and reflection configuration."""

from pathlib import Path

import pytest

from typed_reflection import __version__
from typed_reflection.infrastructure.config import DEFAULT_CONFIG, Config, get_config

APP_ENV_KEYS = (
    "VERBOSE",
    "LOG_DIR",
    "MOD_SITE_BASE_URL",
    "MOD_SITE_PAGE_FORMAT",
    "MOD_SITE_VENDOR_KEY",
    "USER_AGENT",
    "HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear app settings; values loaded from .env files are removed on teardown too."""
    for key in APP_ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def no_env_file(tmp_path: Path) -> Path:
    return tmp_path / ".env"


@pytest.mark.unit
class TestConfig:
    """Test Config loading and validation."""

    def test_defaults(self, no_env_file: Path):
        config = Config.from_env(no_env_file)

        assert config.verbose is False
        assert config.log_dir is None
        assert config.mod_site_base_url == "https://community.playstarbound.com"
        assert config.mod_site_page_format == "resources/{}"
        assert config.mod_site_vendor_key == "Chucklefish"
        assert config.user_agent == f"typed-reflection/{__version__}"
        assert config.http_timeout == 10.0

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch, no_env_file: Path, tmp_path: Path):
        monkeypatch.setenv("VERBOSE", "yes")
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setenv("MOD_SITE_BASE_URL", "https://mods.example.org")
        monkeypatch.setenv("HTTP_TIMEOUT", "2.5")

        config = Config.from_env(no_env_file)

        assert config.verbose is True
        assert config.log_dir == tmp_path / "logs"
        assert config.mod_site_base_url == "https://mods.example.org"
        assert config.http_timeout == 2.5

    def test_from_env_file(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("MOD_SITE_VENDOR_KEY=Nexus\nUSER_AGENT=tester/1.0\n")

        config = Config.from_env(env_file)

        assert config.mod_site_vendor_key == "Nexus"
        assert config.user_agent == "tester/1.0"

    def test_environment_beats_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("MOD_SITE_VENDOR_KEY=FromFile\n")
        monkeypatch.setenv("MOD_SITE_VENDOR_KEY", "FromEnv")

        assert Config.from_env(env_file).mod_site_vendor_key == "FromEnv"

    def test_from_args_overrides(self, monkeypatch: pytest.MonkeyPatch, no_env_file: Path, tmp_path: Path):
        monkeypatch.setenv("VERBOSE", "true")

        config = Config.from_args(verbose=False, log_dir=tmp_path, env_path=no_env_file)

        assert config.verbose is False
        assert config.log_dir == tmp_path

    def test_from_args_keeps_env_when_unset(self, monkeypatch: pytest.MonkeyPatch, no_env_file: Path):
        monkeypatch.setenv("VERBOSE", "1")
        assert Config.from_args(env_path=no_env_file).verbose is True

    def test_validate_accepts_defaults(self):
        Config().validate()

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"mod_site_base_url": "ftp://example.org"}, "HTTP\\(S\\) URL"),
            ({"mod_site_page_format": "resources/"}, "placeholder"),
            ({"http_timeout": 0}, "timeout must be positive"),
        ],
    )
    def test_validate_rejects(self, overrides, message):
        with pytest.raises(ValueError, match=message):
            Config(**overrides).validate()

    def test_validate_rejects_file_as_log_dir(self, tmp_path: Path):
        log_file = tmp_path / "not-a-dir"
        log_file.write_text("")

        with pytest.raises(ValueError, match="not a directory"):
            Config(log_dir=log_file).validate()

    def test_ensure_log_dir(self, tmp_path: Path):
        config = Config(log_dir=tmp_path / "a" / "b")
        config.ensure_log_dir()

        assert (tmp_path / "a" / "b").is_dir()


@pytest.mark.unit
class TestReflectionConfig:
    """Test REFLECTION_* overrides."""

    def test_defaults(self):
        assert get_config() == DEFAULT_CONFIG

    def test_returns_copy(self):
        config = get_config()
        config["LOOKUP_CACHE_SIZE"] = 1

        assert DEFAULT_CONFIG["LOOKUP_CACHE_SIZE"] == 1024

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("1", True), ("ON", True), ("no", False), ("0", False)],
    )
    def test_bool_override(self, monkeypatch: pytest.MonkeyPatch, raw, expected):
        monkeypatch.setenv("REFLECTION_EAGER_TYPE_CHECK", raw)
        assert get_config()["EAGER_TYPE_CHECK"] is expected

    def test_int_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REFLECTION_LOOKUP_CACHE_SIZE", "16")
        assert get_config()["LOOKUP_CACHE_SIZE"] == 16

    def test_invalid_value_keeps_default(self, monkeypatch: pytest.MonkeyPatch, caplog):
        monkeypatch.setenv("REFLECTION_SEARCH_METACLASS", "maybe")
        monkeypatch.setenv("REFLECTION_LOOKUP_CACHE_SIZE", "lots")

        config = get_config()

        assert config["SEARCH_METACLASS"] is True
        assert config["LOOKUP_CACHE_SIZE"] == 1024
        assert "REFLECTION_SEARCH_METACLASS" in caplog.text

    def test_non_positive_cache_size(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REFLECTION_LOOKUP_CACHE_SIZE", "0")
        assert get_config()["LOOKUP_CACHE_SIZE"] == 1024
