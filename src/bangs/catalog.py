"""Keep the in-memory bang cache in sync with the durable store and dataset.

The catalog is the only writer of the cache. Readers take ``catalog.cache``
once per operation and work on that snapshot; ``sync()`` publishes a new
snapshot with a single attribute assignment, so a reader sees either the
old or the new version, never a mix.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from django.conf import settings
from loguru import logger

from bangs.cache import BangCache
from bangs.dataset import DatasetSource
from bangs.dataset import build_entries
from bangs.exceptions import DatasetFetchError
from bangs.exceptions import StoreAccessError
from bangs.store import ENTRIES_KEY
from bangs.store import VERSION_KEY
from bangs.store import DurableStore


def adopt_stored(stored: Mapping[str, Any]) -> BangCache | None:
    """Return the durable copy as a cache, or None if it is absent or unreadable."""
    version = stored.get(VERSION_KEY)
    entries = stored.get(ENTRIES_KEY)
    if version is None or not isinstance(entries, dict):
        return None
    try:
        return BangCache.from_stored(version, entries)
    except (KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Stored bangs are unreadable: {e}")
        return None


class BangCatalog:
    """Owner of the process-wide BangCache."""

    def __init__(self, source: DatasetSource, store: DurableStore) -> None:
        self.source = source
        self.store = store
        self._cache: BangCache | None = None

    @property
    def cache(self) -> BangCache:
        """Current snapshot, empty until the first sync."""
        if self._cache is None:
            return BangCache.empty()
        return self._cache

    @property
    def is_loaded(self) -> bool:
        return self._cache is not None

    def ensure_loaded(self) -> BangCache:
        """Return a cache matching the durable version.

        A cold process syncs. A warm one adopts the durable copy when
        another process has synced a newer version since.
        """
        if self._cache is None:
            return self.sync()
        try:
            stored_version = self.store.get_many([VERSION_KEY]).get(VERSION_KEY)
            if stored_version is None or stored_version == self._cache.version:
                return self._cache
            stored = self.store.get_many([VERSION_KEY, ENTRIES_KEY])
        except StoreAccessError as e:
            logger.warning(f"Could not check stored bangs version: {e}")
            return self._cache

        cache = adopt_stored(stored)
        if cache is None:
            return self._cache
        logger.info(f"Adopting stored bangs version {cache.version}")
        self._cache = cache
        return cache

    def sync(self) -> BangCache:
        """Bring the cache up to date; safe to call repeatedly.

        Never raises: on failure the previous cache stays in place, and a
        process without one falls back to the durable copy or to an empty
        cache.
        """
        stored: dict[str, Any] = {}
        try:
            stored = self.store.get_many([VERSION_KEY, ENTRIES_KEY])
            document = self.source.fetch()
            stored_version = stored.get(VERSION_KEY)

            cache = None
            if stored_version is not None and stored_version == document["version"]:
                cache = adopt_stored(stored)

            if cache is None:
                cache = self._rebuild(stored_version, document)
            else:
                logger.info("Bangs are up to date")
        except DatasetFetchError as e:
            logger.warning(f"Failed to load bangs: {e}")
            return self._recover(stored)
        except StoreAccessError as e:
            logger.warning(f"Failed to load bangs: {e}")
            return self._recover({})

        self._cache = cache
        return cache

    def _rebuild(self, stored_version: Any, document: dict[str, Any]) -> BangCache:
        logger.info(
            f"Updating bangs: stored version {'none' if stored_version is None else stored_version}, "
            f"new version {document['version']}",
        )
        cache = BangCache(
            version=document["version"],
            entries=build_entries(document["bangs"]),
        )
        self.store.set_many(
            {
                VERSION_KEY: cache.version,
                ENTRIES_KEY: cache.serialize_entries(),
            },
        )
        logger.info(f"Updated to version {cache.version} with {len(cache)} bangs")
        return cache

    def _recover(self, stored: Mapping[str, Any]) -> BangCache:
        if self._cache is not None:
            return self._cache
        cache = adopt_stored(stored)
        if cache is None:
            cache = BangCache.empty()
        else:
            logger.info(f"Using stored bangs version {cache.version}")
        self._cache = cache
        return cache


@lru_cache(maxsize=1)
def get_catalog() -> BangCatalog:
    """Return the catalog for this process, configured from settings."""
    source = DatasetSource(getattr(settings, "BANGS_DATASET_URL", None))
    return BangCatalog(source=source, store=DurableStore())
