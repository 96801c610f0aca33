"""Global pytest configuration for tests."""

import os
from typing import Any

import django
import pytest
from django.conf import settings

if not settings.configured:
    os.environ.setdefault("SECRET_KEY", "test-secret-key")
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bang_redirect.settings")
    django.setup()

from bangs.cache import BangCache
from bangs.cache import BangEntry
from bangs.catalog import BangCatalog
from bangs.catalog import get_catalog
from bangs.exceptions import DatasetFetchError
from bangs.store import DurableStore


class FakeSource:
    """Dataset source returning a fixed document and counting fetches."""

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self.document = document
        self.fetches = 0

    def fetch(self) -> dict[str, Any]:
        self.fetches += 1
        if self.document is None:
            msg = "dataset unavailable"
            raise DatasetFetchError(msg)
        return self.document


@pytest.fixture(autouse=True)
def _fresh_catalog() -> Any:
    """Drop the process-wide catalog between tests."""
    get_catalog.cache_clear()
    yield
    get_catalog.cache_clear()


@pytest.fixture
def document() -> dict[str, Any]:
    """A small dataset document."""
    return {
        "version": "1",
        "bangs": [
            {
                "t": "g",
                "d": "www.google.com",
                "u": "https://www.google.com/search?q={{{s}}}",
                "s": "Google",
            },
            {
                "t": "gh",
                "d": "github.com",
                "u": "https://github.com/search?q={{{s}}}",
                "s": "GitHub",
            },
            {
                "t": "yt",
                "d": "www.youtube.com",
                "u": "https://www.youtube.com/results?search_query={{{s}}}",
            },
            {"t": "home", "d": "example.org", "u": "https://example.org/"},
            {"t": "broken", "d": "broken.example"},
        ],
    }


@pytest.fixture
def source(document: dict[str, Any]) -> FakeSource:
    return FakeSource(document)


@pytest.fixture
def store(db: Any) -> DurableStore:  # noqa: ARG001
    """Durable store with database access."""
    return DurableStore()


@pytest.fixture
def catalog(source: FakeSource, store: DurableStore) -> BangCatalog:
    return BangCatalog(source=source, store=store)  # type: ignore[arg-type]


@pytest.fixture
def cache() -> BangCache:
    """A cache built directly, without syncing."""
    entries = [
        BangEntry(
            trigger="g",
            domain="www.google.com",
            url_template="https://example.com/search?q={{{s}}}",
            description="Google",
        ),
        BangEntry(
            trigger="gh",
            domain="github.com",
            url_template="https://github.com/search?q={{{s}}}",
            description="GitHub",
        ),
        BangEntry(
            trigger="gm",
            domain="maps.google.com",
            url_template="https://maps.google.com/{{{s}}}/{{{s}}}",
            description="Maps & Directions",
        ),
        BangEntry(trigger="home", domain="example.org", url_template="https://example.org/"),
        BangEntry(trigger="broken", domain="broken.example"),
    ]
    return BangCache(version="1", entries={e.trigger: e for e in entries})
