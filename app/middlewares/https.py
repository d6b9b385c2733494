from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from app.middlewares.redirects import request_target

HSTS_VALUE = "max-age=15768000"


class HTTPSRedirectMiddleware(BaseHTTPMiddleware):
    """Send HSTS and force https for every host except localhost.

    The original scheme is read from ``X-Forwarded-Proto`` since the app
    is expected to sit behind a TLS-terminating proxy.
    """

    def __init__(self, app, local_prefix: str = "localhost") -> None:
        super().__init__(app)
        self.local_prefix = local_prefix

    async def dispatch(self, request: Request, call_next) -> Response:
        # without a Host header, fall back to the address the server was reached on
        host = request.headers.get("host") or request.url.netloc
        if host.startswith(self.local_prefix):
            return await call_next(request)

        if request.headers.get("x-forwarded-proto") != "https":
            response = RedirectResponse(f"https://{host}{request_target(request)}", status_code=302)
        else:
            response = await call_next(request)
        response.headers["Strict-Transport-Security"] = HSTS_VALUE
        return response
