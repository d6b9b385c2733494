"""Canonical URL redirects for index pages."""

import re

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

INDEX_RE = re.compile(r"/(.*)/index\.html\??(.*)$")


def request_target(request: Request) -> str:
    """Path plus query string, as sent on the request line."""
    query = request.url.query
    return request.url.path + ("?" + query if query else "")


class IndexRedirectMiddleware(BaseHTTPMiddleware):
    """Strip ``index.html`` from nested paths so a page and its directory share
    one URL, e.g. ``recipe/index.html?123`` -> ``recipe/?123``."""

    async def dispatch(self, request: Request, call_next) -> Response:
        target = request_target(request)
        if INDEX_RE.search(target):
            return RedirectResponse(target.replace("index.html", "", 1), status_code=302)
        return await call_next(request)


class RootIndexRedirectMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        if request_target(request) == "/index.html":
            return RedirectResponse("/", status_code=301)
        return await call_next(request)
