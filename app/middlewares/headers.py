from __future__ import annotations

from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

WORKER_SCRIPTS = ("service-worker.js", "worker.js")


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Open CORS: any origin, the headers a push client sends.

    Preflight ``OPTIONS`` requests are answered here, since neither the
    routes nor the static mount accept that method.
    """

    def __init__(
        self,
        app,
        allow_headers: Iterable[str] = ("Origin", "Content-Type", "Accept"),
        allow_methods: Iterable[str] = ("GET", "HEAD", "POST", "OPTIONS"),
    ) -> None:
        super().__init__(app)
        self.allow_headers = ", ".join(allow_headers)
        self.allow_methods = ", ".join(allow_methods)

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
            response.headers["Access-Control-Allow-Methods"] = self.allow_methods
        else:
            response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = self.allow_headers
        return response


class WorkerCacheMiddleware(BaseHTTPMiddleware):
    """Service worker scripts must be revalidated on every load."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        if request.url.path.split("/")[-1] in WORKER_SCRIPTS:
            response.headers["Cache-control"] = "public, max-age=0"
        return response
