"""Views for the bangs application."""

from django.conf import settings
from django.http import HttpRequest
from django.http import HttpResponse
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET
from django.views.decorators.http import require_POST

from bangs.catalog import get_catalog
from bangs.dispatcher import CURRENT_TAB
from bangs.dispatcher import ResponseHost
from bangs.dispatcher import dispatch
from bangs.extractor import extract_query
from bangs.resolver import DEFAULT_FALLBACK_URL
from bangs.resolver import Mode
from bangs.resolver import is_bang_query
from bangs.resolver import resolve
from bangs.suggestions import DEFAULT_SUGGESTION_LIMIT
from bangs.suggestions import suggest


def _redirect(
    request: HttpRequest,
    query: str,
    mode: Mode,
    target: str | None,
) -> HttpResponse:
    cache = get_catalog().ensure_loaded()
    url = resolve(
        query,
        cache,
        mode,
        fallback_url=getattr(settings, "BANGS_FALLBACK_URL", DEFAULT_FALLBACK_URL),
    )
    return dispatch(ResponseHost(request), target, url)


@require_GET
def index(request: HttpRequest) -> HttpResponse:
    """Resolve a query typed into the browser's search bar."""
    query = request.GET.get("q", "")
    if not query.strip():
        return render(request, "bangs/index.html")
    return _redirect(request, query, Mode.SEARCH_BAR, CURRENT_TAB)


@require_GET
def navigate(request: HttpRequest) -> HttpResponse:
    """Intercept a search engine navigation carrying a bang query.

    Answers 204 when the URL holds no bang, so the navigation proceeds.
    """
    query = extract_query(request.GET.get("url", ""))
    if query is None or not is_bang_query(query):
        return HttpResponse(status=204)
    target = request.GET.get("tab") or None
    return _redirect(request, query, Mode.SEARCH_BAR, target)


@require_GET
def go(request: HttpRequest) -> HttpResponse:
    """Resolve text confirmed in the omnibox keyword mode."""
    return _redirect(request, request.GET.get("text", ""), Mode.OMNIBOX, CURRENT_TAB)


@require_GET
def suggestions(request: HttpRequest) -> JsonResponse:
    """Return trigger completions for partially typed omnibox text."""
    text = request.GET.get("text", "")
    limit = getattr(settings, "BANGS_SUGGESTION_LIMIT", DEFAULT_SUGGESTION_LIMIT)
    cache = get_catalog().ensure_loaded()
    items = [
        {"completion": s.completion, "label": s.label}
        for s in suggest(text, cache, limit)
    ]
    return JsonResponse({"query": text, "suggestions": items})


@csrf_exempt
@require_POST
def sync(request: HttpRequest) -> JsonResponse:  # noqa: ARG001
    """Re-synchronize the bang cache on an install, update or wake signal."""
    cache = get_catalog().sync()
    return JsonResponse({"version": cache.version, "count": len(cache)})
