"""Complete partially typed triggers for interactive suggestion lists."""

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from django.utils.html import escape

from bangs.cache import BangCache
from bangs.cache import BangEntry
from bangs.resolver import Query

DEFAULT_SUGGESTION_LIMIT = 5


@dataclass(frozen=True)
class Suggestion:
    completion: str
    label: str


def build_label(bang: BangEntry, prefix: str) -> str:
    """Describe ``bang`` with the typed prefix wrapped in <match> tags.

    All dynamic text is escaped; suggestion surfaces parse the label as
    markup and reject a bare '&'.
    """
    rest = bang.trigger[len(prefix):]
    highlighted = f"<match>{escape(prefix)}</match>{escape(rest)}" if prefix else escape(rest)
    return f"{highlighted} - {escape(bang.domain)}: {escape(bang.description)}"


def suggest(
    prefix_text: str,
    cache: BangCache,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> Iterator[Suggestion]:
    """Yield at most ``limit`` bangs whose trigger starts with the typed one."""
    query = Query.parse(prefix_text)
    if not query.text or limit <= 0:
        return

    matches = (
        bang
        for trigger, bang in cache.entries.items()
        if trigger.startswith(query.trigger)
    )
    for bang in islice(matches, limit):
        yield Suggestion(
            completion=f"{bang.trigger} {query.terms}",
            label=build_label(bang, query.trigger),
        )
