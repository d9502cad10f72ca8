"""Unit tests for configuration loading."""

import pytest

from jdfill.utils.config import DEFAULTS, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("JDFILL_CONFIG", raising=False)
    monkeypatch.delenv("LOGS_PATH", raising=False)


@pytest.mark.unit
def test_defaults():
    """Test that defaults load when no override is given."""
    config = load_config()

    assert config.document.min_length == 100
    assert config.document.max_length == 5000
    assert config.latency.enabled is False
    assert config.logging.log_dir == DEFAULTS["logging"]["log_dir"]


@pytest.mark.unit
def test_yaml_override_merges_with_defaults(tmp_path):
    """Test that a YAML file overrides only the keys it sets."""
    path = tmp_path / "jdfill.yaml"
    path.write_text("document:\n  min_length: 50\nlatency:\n  enabled: true\n")

    config = load_config(path)

    assert config.document.min_length == 50
    assert config.document.max_length == 5000
    assert config.latency.enabled is True
    assert config.geo.jitter == 0.1


@pytest.mark.unit
def test_config_path_from_environment(tmp_path, monkeypatch):
    """Test that JDFILL_CONFIG names the override file."""
    path = tmp_path / "override.yaml"
    path.write_text("geo:\n  lat: 19.076\n")
    monkeypatch.setenv("JDFILL_CONFIG", str(path))

    assert load_config().geo.lat == 19.076


@pytest.mark.unit
def test_logs_path_overrides_log_dir(monkeypatch):
    """Test that LOGS_PATH takes precedence over the configured log dir."""
    monkeypatch.setenv("LOGS_PATH", "/tmp/jdfill-logs")
    assert load_config().logging.log_dir == "/tmp/jdfill-logs"


@pytest.mark.unit
def test_missing_override_file(tmp_path):
    """Test that naming a file that does not exist is an error."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")
