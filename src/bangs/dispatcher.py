"""Send the browser to a resolved URL."""

from typing import Protocol
from typing import TypeVar

from django.core.exceptions import DisallowedRedirect
from django.http import HttpRequest
from django.http import HttpResponse
from django.http import HttpResponseRedirect
from django.shortcuts import render
from loguru import logger

from bangs.exceptions import DispatchError

# Tab identifier for the tab that sent the request.
CURRENT_TAB = "current"

T_co = TypeVar("T_co", covariant=True)


class Host(Protocol[T_co]):
    """Navigation primitives offered by the host."""

    def update_tab(self, tab_id: str, url: str) -> T_co:
        """Point an existing tab at ``url``; raise DispatchError on failure."""
        ...

    def create_tab(self, url: str) -> T_co:
        """Open ``url`` in a new tab."""
        ...


def dispatch(host: Host[T_co], target: str | None, url: str) -> T_co:
    """Navigate ``target`` to ``url``, opening a new tab if that fails.

    ``target`` None means there is no tab to reuse. Returns whatever the
    host call that succeeded returned.
    """
    if target is None:
        return host.create_tab(url)
    try:
        return host.update_tab(target, url)
    except DispatchError as e:
        logger.warning(f"Could not update tab {target}, opening a new one: {e}")
        return host.create_tab(url)


class ResponseHost:
    """Host for HTTP requests; every navigation becomes the response."""

    def __init__(self, request: HttpRequest) -> None:
        self.request = request

    def update_tab(self, tab_id: str, url: str) -> HttpResponse:  # noqa: ARG002
        try:
            return HttpResponseRedirect(url)
        except DisallowedRedirect as e:
            raise DispatchError(str(e)) from e

    def create_tab(self, url: str) -> HttpResponse:
        return render(self.request, "bangs/open.html", {"url": url})
