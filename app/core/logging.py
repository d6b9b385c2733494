"""
Console logging for the relay.

One format for everything the process prints: the per-request lines from
``app.http``, the relay's send/failure records from ``app.routers.push`` and
``app.services.notify_push``, and uvicorn's own server and access logs, all
at the level given by ``LOG_LEVEL``.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    level = (level or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)
