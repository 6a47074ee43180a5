"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import EarthsimConfig
from core.errors import EarthsimConfigError


def test_from_env_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to INFO when no level is set."""
    monkeypatch.delenv("EARTHSIM_LOG_LEVEL", raising=False)

    config = EarthsimConfig.from_env()

    assert config.log_level == "INFO"


def test_from_env_normalizes_level_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept lower-case level names."""
    monkeypatch.setenv("EARTHSIM_LOG_LEVEL", " debug ")

    config = EarthsimConfig.from_env()

    assert config.log_level == "DEBUG"


def test_from_env_raises_for_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a level name logging does not know."""
    monkeypatch.setenv("EARTHSIM_LOG_LEVEL", "chatty")

    with pytest.raises(EarthsimConfigError, match="EARTHSIM_LOG_LEVEL"):
        EarthsimConfig.from_env()
