from __future__ import annotations

from dataclasses import replace
from unittest.mock import patch

import pytest

from strext.config import configure_logging, get_settings, validate_settings


def test_default_settings_are_valid():
    settings = get_settings()
    assert validate_settings(settings) is settings


def test_validate_settings_rejects_unknown_log_level():
    settings = replace(get_settings(), log_level="LOUD")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        validate_settings(settings)


def test_validate_settings_accepts_lowercase_log_level():
    settings = replace(get_settings(), log_level="debug")
    validate_settings(settings)


def test_validate_settings_rejects_negative_cache_size():
    settings = replace(get_settings(), wildcard_cache_size=-1)
    with pytest.raises(ValueError, match="STREXT_WILDCARD_CACHE_SIZE"):
        validate_settings(settings)


def test_validate_settings_accepts_zero_cache_size():
    settings = replace(get_settings(), wildcard_cache_size=0)
    assert validate_settings(settings) is settings


def test_cache_size_read_from_env_when_settings_built(monkeypatch):
    monkeypatch.setenv("STREXT_WILDCARD_CACHE_SIZE", " 32 ")
    assert get_settings().wildcard_cache_size == 32


def test_non_integer_cache_size_names_variable(monkeypatch):
    monkeypatch.setenv("STREXT_WILDCARD_CACHE_SIZE", "abc")
    with pytest.raises(ValueError, match="STREXT_WILDCARD_CACHE_SIZE"):
        get_settings()


@patch("strext.config.logging.basicConfig")
def test_configure_logging_uses_settings_level(mock_basic_config):
    configure_logging(replace(get_settings(), log_level=" warning "))
    mock_basic_config.assert_called_once_with(level="WARNING")


@patch("strext.config.logging.basicConfig")
def test_configure_logging_rejects_bad_level(mock_basic_config):
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        configure_logging(replace(get_settings(), log_level="chatty"))
    mock_basic_config.assert_not_called()
