"""Unit tests for configuration."""

import pytest
from pydantic import ValidationError

from fieldcheck.config import FieldCheckConfig


def test_default_config_values():
    """Test default configuration values."""
    from fieldcheck.config import DEFAULT_CONFIG

    assert DEFAULT_CONFIG.tag_name == "validate"
    assert DEFAULT_CONFIG.label_tag == "msg"
    assert DEFAULT_CONFIG.serialized_tag == "json"
    assert DEFAULT_CONFIG.skip_sentinel == "-"
    assert DEFAULT_CONFIG.strict is False
    assert DEFAULT_CONFIG.label_separator == ""


def test_environment_overrides(monkeypatch):
    """Settings are read from FIELDCHECK_ environment variables."""
    monkeypatch.setenv("FIELDCHECK_STRICT", "true")
    monkeypatch.setenv("FIELDCHECK_TAG_NAME", "check")
    monkeypatch.setenv("FIELDCHECK_LABEL_SEPARATOR", ": ")

    config = FieldCheckConfig()

    assert config.strict is True
    assert config.tag_name == "check"
    assert config.label_separator == ": "


def test_empty_keys_rejected():
    with pytest.raises(ValidationError):
        FieldCheckConfig(tag_name="  ")


def test_config_is_frozen():
    config = FieldCheckConfig()

    with pytest.raises(ValidationError):
        config.strict = True
