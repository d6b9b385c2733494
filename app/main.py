# File: app\main.py
# Project: web-push-relay
# Auto-added for reference

import logging, time
from typing import Optional

from fastapi import FastAPI, Request

from app.core.config import Settings, VapidConfig, get_settings, vapid_config
from app.middlewares.headers import CORSHeadersMiddleware, WorkerCacheMiddleware
from app.middlewares.https import HTTPSRedirectMiddleware
from app.middlewares.redirects import IndexRedirectMiddleware, RootIndexRedirectMiddleware
from app.routers import push
from app.services.notify_push import PushSender
from app.static import PublicFiles

http_logger = logging.getLogger("app.http")


def create_app(settings: Optional[Settings] = None, vapid: Optional[VapidConfig] = None) -> FastAPI:
    settings = settings or get_settings()
    vapid = vapid or vapid_config(settings)

    app = FastAPI(title="Web Push Relay")
    app.state.settings = settings
    app.state.vapid = vapid
    app.state.push_sender = PushSender(vapid, timeout=settings.push_timeout)

    # Starlette runs the last added middleware first, so the chain is
    # registered innermost first: index redirect -> root redirect -> https
    # -> worker cache. CORS wraps all of them so redirects carry it too.
    app.add_middleware(WorkerCacheMiddleware)
    app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(RootIndexRedirectMiddleware)
    app.add_middleware(IndexRedirectMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            dur = round(time.time() - start, 4)
            http_logger.exception(f"{request.method} {request.url.path} EXC after {dur}s: {e}")
            raise
        dur = round(time.time() - start, 4)
        http_logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {dur}s")
        return response

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(push.router)
    app.mount("/", PublicFiles(directory=settings.static_dir, html=True), name="static")
    return app
