"""Test cases for Django settings."""

import importlib
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest
from django.test import TestCase

import bang_redirect.settings


@pytest.fixture(autouse=True)
def _restore_settings() -> Iterator[None]:
    yield
    importlib.reload(bang_redirect.settings)


class SettingsTest(TestCase):
    """Test cases for Django settings configuration."""

    def test_secret_key_missing_raises_error(self) -> None:
        """Test that missing SECRET_KEY environment variable raises error."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="SECRET_KEY environment variable is required"
            ) as context:
                importlib.reload(bang_redirect.settings)

            assert "SECRET_KEY environment variable is required" in str(
                context.value
            )

    def test_debug_flag(self) -> None:
        """Test DEBUG parsing from the environment."""
        with patch.dict(os.environ, {"SECRET_KEY": "test-key", "DEBUG": "True"}):
            importlib.reload(bang_redirect.settings)
            assert bang_redirect.settings.DEBUG is True

        with patch.dict(os.environ, {"SECRET_KEY": "test-key", "DEBUG": "no"}):
            importlib.reload(bang_redirect.settings)
            assert bang_redirect.settings.DEBUG is False

    def test_allowed_hosts_from_environment(self) -> None:
        """Test that ALLOWED_HOSTS is split on commas."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "test-key", "ALLOWED_HOSTS": "bangs.example, localhost,"},
        ):
            importlib.reload(bang_redirect.settings)

            assert bang_redirect.settings.ALLOWED_HOSTS == ["bangs.example", "localhost"]

    def test_bang_defaults(self) -> None:
        """Test the bang engine defaults."""
        with patch.dict(os.environ, {"SECRET_KEY": "test-key"}, clear=True):
            importlib.reload(bang_redirect.settings)

            assert bang_redirect.settings.BANGS_DATASET_URL == ""
            assert bang_redirect.settings.BANGS_FALLBACK_URL == "https://duckduckgo.com/?q={{{s}}}"
            assert bang_redirect.settings.BANGS_SUGGESTION_LIMIT == 5

    def test_bang_overrides(self) -> None:
        """Test configuring the bang engine from the environment."""
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "test-key",
                "BANGS_DATASET_URL": "https://example.com/bangs.json",
                "BANGS_SUGGESTION_LIMIT": "8",
            },
        ):
            importlib.reload(bang_redirect.settings)

            assert bang_redirect.settings.BANGS_DATASET_URL == "https://example.com/bangs.json"
            assert bang_redirect.settings.BANGS_SUGGESTION_LIMIT == 8

    def test_server_settings(self) -> None:
        """Test the gunicorn settings and their defaults."""
        with patch.dict(os.environ, {"SECRET_KEY": "test-key"}, clear=True):
            importlib.reload(bang_redirect.settings)
            assert bang_redirect.settings.SERVER_BIND == "0.0.0.0:8000"
            assert bang_redirect.settings.SERVER_WORKERS == 1

        with patch.dict(
            os.environ,
            {"SECRET_KEY": "test-key", "BIND": "127.0.0.1:9000", "WORKERS": "3", "THREADS": "2"},
        ):
            importlib.reload(bang_redirect.settings)
            assert bang_redirect.settings.SERVER_BIND == "127.0.0.1:9000"
            assert bang_redirect.settings.SERVER_WORKERS == 3
            assert bang_redirect.settings.SERVER_THREADS == 2
