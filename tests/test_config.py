"""Tests for runtime configuration loading."""

import pytest

from lincol.config import DEFAULTS, DuplicateKeyPolicy, IndexConfig, load_config
from lincol.parsers import Format
from lincol.utils.logging import logger


def test_defaults():
    config = load_config()
    assert config == IndexConfig()
    assert config.format is Format.AUTO
    assert config.duplicate_keys is DuplicateKeyPolicy.LAST
    assert DEFAULTS == {"format": "auto", "duplicate_keys": "last"}


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("LINCOL_FORMAT", "YAML")
    monkeypatch.setenv("LINCOL_DUPLICATE_KEYS", " first ")
    config = load_config()
    assert config.format is Format.YAML
    assert config.duplicate_keys is DuplicateKeyPolicy.FIRST


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("LINCOL_FORMAT", "yaml")
    config = load_config(format="json", duplicate_keys=DuplicateKeyPolicy.ERROR)
    assert config.format is Format.JSON
    assert config.duplicate_keys is DuplicateKeyPolicy.ERROR


def test_none_argument_means_not_given(monkeypatch):
    monkeypatch.setenv("LINCOL_FORMAT", "json")
    assert load_config(format=None).format is Format.JSON


def test_invalid_environment_value_warns_and_uses_default(monkeypatch, lincol_logs):
    monkeypatch.setenv("LINCOL_DUPLICATE_KEYS", "sometimes")
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        config = load_config()
    finally:
        logger.remove(handler_id)
    assert config.duplicate_keys is DuplicateKeyPolicy.LAST
    assert any("LINCOL_DUPLICATE_KEYS" in message for message in messages)


def test_invalid_argument_raises():
    with pytest.raises(ValueError):
        load_config(duplicate_keys="sometimes")


def test_unknown_option_raises():
    with pytest.raises(TypeError):
        load_config(colour="blue")


def test_config_is_frozen():
    config = IndexConfig()
    with pytest.raises(AttributeError):
        config.format = Format.JSON
