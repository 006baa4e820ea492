"""Tests for YAML-backed settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from osmgeom.exceptions import ConfigurationError
from osmgeom.settings import Settings, get_settings

DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "default.yaml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "osmgeom.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_default_config():
    """Test loading config/default.yaml."""
    settings = Settings.load(DEFAULT_CONFIG)

    assert settings.geometry.srid == 4326
    assert settings.geometry.segment_max_length is None
    assert settings.logging.level == "INFO"
    assert settings.logging.json_format is False


def test_load_custom_config(tmp_path):
    """Test loading a custom configuration file."""
    path = _write(
        tmp_path,
        "geometry:\n  srid: 3857\n  segment_max_length: 100.5\nlogging:\n  level: debug\n",
    )

    settings = Settings.load(path)

    assert settings.geometry.srid == 3857
    assert settings.geometry.segment_max_length == 100.5
    assert settings.logging.level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path):
    """Test loading an empty configuration file."""
    settings = Settings.load(_write(tmp_path, ""))

    assert settings == Settings()


def test_env_var_selects_config(tmp_path, monkeypatch):
    """Test OSMGEOM_CONFIG selecting the configuration file."""
    path = _write(tmp_path, "geometry:\n  srid: 3857\n")
    monkeypatch.setenv("OSMGEOM_CONFIG", str(path))

    assert Settings.load().geometry.srid == 3857


def test_missing_file(tmp_path):
    """Test loading a missing configuration file."""
    with pytest.raises(ConfigurationError) as excinfo:
        Settings.load(tmp_path / "absent.yaml")
    assert excinfo.value.details["path"].endswith("absent.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "geometry:\n  segment_max_length: 0\n",
        "geometry:\n  segment_max_length: -5\n",
        "geometry:\n  segment_max_length: .inf\n",
        "geometry:\n  srid: -1\n",
        "logging:\n  level: LOUD\n",
        "- just\n- a list\n",
        "geometry: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path, text):
    """Test loading invalid configurations."""
    with pytest.raises(ConfigurationError):
        Settings.load(_write(tmp_path, text))


def test_get_settings_is_cached():
    """Test that get_settings caches its result."""
    get_settings.cache_clear()
    first = get_settings(str(DEFAULT_CONFIG))
    assert get_settings(str(DEFAULT_CONFIG)) is first
    get_settings.cache_clear()
