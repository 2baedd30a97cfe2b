"""
Tests for application settings.

Settings are read from the environment; defaults match the public
upstream APIs and a 10 second per-call timeout.
"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("POKEAPI_BASE_URL", "FUNTRANSLATIONS_BASE_URL", "UPSTREAM_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)

        assert config.pokeapi_base_url == "https://pokeapi.co/api/v2"
        assert config.funtranslations_base_url == "https://api.funtranslations.com"
        assert config.upstream_timeout_seconds == 10.0
        assert config.port == 8080

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:9000")
        monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "3")
        config = Settings(_env_file=None)

        assert config.pokeapi_base_url == "http://localhost:9000"
        assert config.upstream_timeout_seconds == 3.0

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, upstream_timeout_seconds=0)
