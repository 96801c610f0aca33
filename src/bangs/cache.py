"""In-memory view of one version of the bang dataset."""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any

PLACEHOLDER = "{{{s}}}"


def template_or_none(value: Any) -> str | None:
    """Return ``value`` if it is a usable URL template string."""
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class BangEntry:
    """One redirect rule, keyed by its trigger."""

    trigger: str
    domain: str = ""
    # e.g. 'https://www.youtube.com/results?search_query={{{s}}}'
    url_template: str | None = None
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "trigger": self.trigger,
            "domain": self.domain,
            "url": self.url_template,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BangEntry":
        return cls(
            trigger=str(data["trigger"]),
            domain=data.get("domain") or "",
            url_template=template_or_none(data.get("url")),
            description=data.get("description") or "",
        )


@dataclass(frozen=True)
class BangCache:
    """Entries of exactly one dataset version.

    Instances are never mutated; a sync builds a new one and swaps it in.
    """

    version: str | int | None = None
    entries: Mapping[str, BangEntry] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "BangCache":
        return cls()

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, trigger: str) -> BangEntry | None:
        return self.entries.get(trigger)

    def serialize_entries(self) -> dict[str, dict[str, Any]]:
        """Return the entries in the durable store format."""
        return {trigger: entry.to_dict() for trigger, entry in self.entries.items()}

    @classmethod
    def from_stored(
        cls,
        version: str | int,
        stored: Mapping[str, Mapping[str, Any]],
    ) -> "BangCache":
        """Rebuild a cache from the durable store format."""
        entries = {
            trigger: BangEntry.from_dict({"trigger": trigger, **data})
            for trigger, data in stored.items()
        }
        return cls(version=version, entries=entries)
