"""Pull the user's search text out of a search engine result URL."""

import re
from urllib.parse import parse_qs
from urllib.parse import unquote
from urllib.parse import urlsplit

# Checked in order, first present wins.
QUERY_PARAMS = ("q", "query", "p", "search", "wd")

SEARCH_SEGMENT = "search"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _decode_segment(segment: str) -> str | None:
    if _BAD_ESCAPE.search(segment):
        return None
    try:
        return unquote(segment, errors="strict")
    except UnicodeDecodeError:
        return None


def extract_query(navigation_url: str) -> str | None:
    """Return the search text in ``navigation_url``, or None.

    Works for query string shapes like ``https://www.google.com/search?q=cats``
    or ``https://www.baidu.com/s?wd=cats`` and path shapes like
    ``https://example.com/search/cats``.
    """
    try:
        parts = urlsplit(navigation_url)
    except ValueError:
        return None

    params = parse_qs(parts.query, keep_blank_values=True)
    for name in QUERY_PARAMS:
        if name in params:
            return params[name][0]

    segments = [s for s in parts.path.split("/") if s]
    if SEARCH_SEGMENT in segments:
        index = segments.index(SEARCH_SEGMENT)
        if index + 1 < len(segments):
            return _decode_segment(segments[index + 1])
    return None
