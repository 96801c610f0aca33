"""Fetch and parse the versioned bang dataset document.

The document looks like::

    {"version": "2024.1", "bangs": [{"t": "g", "d": "www.google.com",
                                     "u": "https://www.google.com/search?q={{{s}}}",
                                     "s": "Google"}]}
"""

import json
from collections.abc import Iterable
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import requests
from loguru import logger

from bangs.cache import BangEntry
from bangs.cache import template_or_none
from bangs.exceptions import DatasetFetchError

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent / "data" / "bangs.json"

# Source fields for the description, first non-empty wins.
DESCRIPTION_FIELDS = ("s", "d", "description")


class DatasetSource:
    """Load the dataset from an http(s) URL or a local JSON file."""

    def __init__(self, location: str | Path | None = None, timeout: int = 8) -> None:
        self.location = str(location or DEFAULT_DATASET_PATH)
        self.timeout = timeout

    def fetch(self) -> dict[str, Any]:
        """Return the validated dataset document."""
        if self.location.startswith(("http://", "https://")):
            document = self._fetch_remote()
        else:
            document = self._read_file()
        return validate_document(document)

    def _fetch_remote(self) -> Any:
        try:
            resp = requests.get(self.location, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            msg = f"Failed to fetch bang dataset from {self.location}: {e}"
            raise DatasetFetchError(msg) from e

    def _read_file(self) -> Any:
        try:
            with open(self.location, encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            msg = f"Failed to read bang dataset from {self.location}: {e}"
            raise DatasetFetchError(msg) from e


def validate_document(document: Any) -> dict[str, Any]:
    if not isinstance(document, dict):
        msg = "Bang dataset must be a JSON object"
        raise DatasetFetchError(msg)
    version = document.get("version")
    if version is None or isinstance(version, bool) or not isinstance(version, (str, int, float)):
        msg = f"Bang dataset has an invalid version: {version!r}"
        raise DatasetFetchError(msg)
    if not isinstance(document.get("bangs"), list):
        msg = "Bang dataset has no 'bangs' list"
        raise DatasetFetchError(msg)
    return document


def describe(record: Mapping[str, Any]) -> str:
    for name in DESCRIPTION_FIELDS:
        value = record.get(name)
        if value:
            return str(value)
    return ""


def to_entry(record: Mapping[str, Any]) -> BangEntry:
    return BangEntry(
        trigger=record["t"],
        domain=record.get("d") or "",
        url_template=template_or_none(record.get("u")),
        description=describe(record),
    )


def build_entries(records: Iterable[Any]) -> dict[str, BangEntry]:
    """Map dataset records to entries keyed by trigger."""
    entries: dict[str, BangEntry] = {}
    for record in records:
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed bang record: {record!r}")
            continue
        trigger = record.get("t")
        if not isinstance(trigger, str) or not trigger:
            logger.warning(f"Skipping bang record without trigger: {record!r}")
            continue
        entries[trigger] = to_entry(record)
    return entries
