"""Tests for the configuration store."""

import json

import pytest

from bling_connector.core.models import ClientSettings, ConfigurationError
from bling_connector.core.config_store import (
    get_base_dir,
    settings_path,
    save_json,
    load_json,
    validate_settings,
    load_settings,
    load_saved_settings,
    save_settings,
)


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Set up a temporary home directory for config storage."""
    monkeypatch.setenv("BLING_CONNECTOR_HOME", str(tmp_path))
    for name in ("BLING_API_BASE_URL", "BLING_TIMEOUT", "BLING_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_get_base_dir_with_env_var(temp_home):
    """Test get_base_dir uses BLING_CONNECTOR_HOME environment variable."""
    base_dir = get_base_dir()
    assert base_dir == temp_home
    assert base_dir.exists()


def test_get_base_dir_creates_directory(temp_home):
    """Test get_base_dir creates the directory if it doesn't exist."""
    temp_home.rmdir()
    assert not temp_home.exists()

    base_dir = get_base_dir()
    assert base_dir.exists()
    assert base_dir.is_dir()


def test_settings_path(temp_home):
    """Test settings_path points inside the base dir."""
    assert settings_path() == temp_home / "settings.json"


def test_save_and_load_json(temp_home):
    """Test saving and loading JSON data."""
    path = save_json(temp_home / "data.json", {"key": "value", "number": 42})

    assert path.exists()
    assert load_json(path) == {"key": "value", "number": 42}


def test_load_json_missing_file(temp_home):
    """Test loading a missing file raises ConfigurationError."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_json(temp_home / "missing.json")

    assert "not found" in str(exc_info.value)


def test_load_json_invalid(temp_home):
    """Test loading invalid JSON raises ConfigurationError."""
    path = temp_home / "broken.json"
    path.write_text("{ invalid json }")

    with pytest.raises(ConfigurationError) as exc_info:
        load_json(path)

    assert "Invalid JSON" in str(exc_info.value)


def test_load_json_not_an_object(temp_home):
    """Test that a JSON array is rejected."""
    path = temp_home / "list.json"
    path.write_text("[1, 2]")

    with pytest.raises(ConfigurationError):
        load_json(path)


def test_load_settings_defaults(temp_home):
    """Test that defaults apply without file or environment."""
    assert load_settings() == ClientSettings()


def test_save_and_load_settings(temp_home):
    """Test that saved settings are loaded back."""
    settings = ClientSettings(base_url="https://sandbox.test/v3", timeout_seconds=3.0, max_retries=5)

    path = save_settings(settings)

    assert path == temp_home / "settings.json"
    assert json.loads(path.read_text())["max_retries"] == 5
    assert load_settings() == settings


def test_environment_overrides_file(temp_home, monkeypatch):
    """Test that environment variables take precedence over the settings file."""
    save_settings(ClientSettings(base_url="https://file.test", max_retries=5))
    monkeypatch.setenv("BLING_API_BASE_URL", "https://env.test")
    monkeypatch.setenv("BLING_TIMEOUT", "2.5")

    settings = load_settings()

    assert settings.base_url == "https://env.test"
    assert settings.timeout_seconds == 2.5
    assert settings.max_retries == 5


def test_invalid_environment_value(temp_home, monkeypatch):
    """Test that an unparsable environment value raises ConfigurationError."""
    monkeypatch.setenv("BLING_MAX_RETRIES", "lots")

    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("name, value", [("BLING_TIMEOUT", "0"), ("BLING_MAX_RETRIES", "0")])
def test_out_of_range_values(temp_home, monkeypatch, name, value):
    """Test that non-positive timeout or retries are rejected."""
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        load_settings()


def test_null_base_url_in_file(temp_home):
    """Test that a JSON null base_url raises ConfigurationError."""
    (temp_home / "settings.json").write_text(json.dumps({"base_url": None}))

    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize(
    "settings",
    [ClientSettings(max_retries=0), ClientSettings(timeout_seconds=0)],
)
def test_save_settings_rejects_invalid(temp_home, settings):
    """Test that invalid settings are never written."""
    with pytest.raises(ConfigurationError):
        save_settings(settings)

    assert not (temp_home / "settings.json").exists()


def test_validate_settings_returns_settings():
    """Test validate_settings passes valid settings through."""
    settings = ClientSettings()
    assert validate_settings(settings) is settings


def test_load_saved_settings_without_file(temp_home):
    """Test that defaults are returned when no file exists."""
    assert load_saved_settings() == ClientSettings()


def test_load_saved_settings_ignores_environment(temp_home, monkeypatch):
    """Test that only the file is read, not environment overrides."""
    save_settings(ClientSettings(max_retries=5))
    monkeypatch.setenv("BLING_MAX_RETRIES", "7")

    assert load_saved_settings().max_retries == 5


@pytest.mark.parametrize(
    "content",
    ['{"max_retries": 0}', '{"base_url": null}', "{ invalid json }"],
)
def test_load_saved_settings_falls_back_on_broken_file(temp_home, content):
    """Test that an unusable settings file yields defaults instead of failing."""
    (temp_home / "settings.json").write_text(content)

    assert load_saved_settings() == ClientSettings()
