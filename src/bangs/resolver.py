"""Turn a typed bang query into the URL to send the browser to."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from loguru import logger

from bangs.cache import PLACEHOLDER
from bangs.cache import BangCache

MARKER = "!"
DEFAULT_FALLBACK_URL = "https://duckduckgo.com/?q={{{s}}}"


class Mode(str, Enum):
    """Which surface the query was typed into."""

    # "!yt cats": the marker arrives with the query
    SEARCH_BAR = "search-bar"
    # "yt cats": the surface already consumed the keyword
    OMNIBOX = "omnibox"


def normalize_query(text: str) -> str:
    """Trim and collapse whitespace runs to a single space."""
    return " ".join(text.split())


def encode_component(text: str) -> str:
    """Percent-encode like JavaScript's encodeURIComponent."""
    return quote(text, safe="-_.!~*'()")


def is_bang_query(text: str) -> bool:
    return normalize_query(text).startswith(MARKER)


@dataclass(frozen=True)
class Query:
    """Normalized query split into trigger and search terms."""

    text: str
    trigger: str
    terms: str
    has_marker: bool

    @classmethod
    def parse(cls, raw: str) -> "Query":
        # split "!g foo bar" to "!g", "foo bar"
        text = normalize_query(raw)
        token, _, terms = text.partition(" ")
        has_marker = token.startswith(MARKER)
        trigger = token[len(MARKER):] if has_marker else token
        return cls(text=text, trigger=trigger, terms=terms, has_marker=has_marker)


def substitute(template: str, terms: str) -> str:
    """Replace every placeholder in ``template`` with the encoded terms."""
    return template.replace(PLACEHOLDER, encode_component(terms))


def fallback_url_for(
    query: Query,
    mode: Mode,
    fallback_url: str = DEFAULT_FALLBACK_URL,
) -> str:
    """Build the generic web search URL for a query no bang handles.

    Omnibox queries get the marker back so the fallback engine can try
    the bang itself.
    """
    text = query.text
    if mode is Mode.OMNIBOX and text and not query.has_marker:
        text = MARKER + text
    return substitute(fallback_url, text)


def resolve(
    raw_query: str,
    cache: BangCache,
    mode: Mode | str = Mode.SEARCH_BAR,
    fallback_url: str = DEFAULT_FALLBACK_URL,
) -> str:
    """Return the redirect URL for ``raw_query``; never None.

    In search bar mode only a token carrying the marker is a trigger,
    anything else is a plain search. In omnibox mode the first token is
    a trigger with or without the marker.
    """
    mode = Mode(mode)
    query = Query.parse(raw_query)

    if query.trigger and (query.has_marker or mode is Mode.OMNIBOX):
        bang = cache.get(query.trigger)
        if bang is not None and bang.url_template:
            url = substitute(bang.url_template, query.terms)
            logger.debug(f"Resolved !{query.trigger} to {url}")
            return url

    url = fallback_url_for(query, mode, fallback_url)
    logger.debug(f"No bang for '{query.text}', falling back to {url}")
    return url
