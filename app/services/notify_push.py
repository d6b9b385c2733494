#app\services\notify_push.py
import logging
from dataclasses import dataclass
from typing import Any, Optional

import anyio
import requests
from py_vapid import VapidException
from pywebpush import webpush, WebPushException

from app.core.config import VapidConfig

logger = logging.getLogger(__name__)

# four weeks, the push library default when a client sends no ttl
DEFAULT_TTL = 2419200


@dataclass
class SendResult:
    ok: bool
    reason: Optional[str] = None
    status_code: Optional[int] = None


def send_options(ttl: Any) -> dict:
    """Build the send options; a ttl that is not a whole number is left as
    sent so the send fails on it."""
    if ttl is None:
        return {"TTL": DEFAULT_TTL}
    if isinstance(ttl, float) and ttl.is_integer():
        ttl = int(ttl)
    elif isinstance(ttl, str) and ttl.strip().isdigit():
        ttl = int(ttl)
    return {"TTL": ttl}


class PushSender:
    """Relays one notification to the subscription's push service.

    Signing and payload encryption are left to pywebpush; this class only
    holds the VAPID details and turns the outcome into a SendResult.
    """

    def __init__(self, vapid: VapidConfig, timeout: Optional[float] = None):
        self.vapid = vapid
        self.timeout = timeout

    def _send_sync(self, subscription: Any, payload: Any, options: dict):
        if payload is not None and not isinstance(payload, (str, bytes)):
            raise TypeError(f"payload must be text, got {type(payload).__name__}")
        ttl = options.get("TTL", DEFAULT_TTL)
        if isinstance(ttl, bool) or not isinstance(ttl, int):
            raise TypeError(f"TTL must be a whole number of seconds, got {ttl!r}")
        if ttl < 0:
            raise ValueError(f"TTL must be at least 0, got {ttl}")
        return webpush(
            subscription_info=subscription,
            data=payload,
            vapid_private_key=self.vapid.private_key,
            vapid_claims=dict(self.vapid.claims),
            ttl=ttl,
            timeout=self.timeout,
        )

    async def send(self, subscription: Any, payload: Any, options: dict) -> SendResult:
        def _do():
            return self._send_sync(subscription, payload, options)

        try:
            await anyio.to_thread.run_sync(_do)
        except WebPushException as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning("push failed (status=%s): %s", status, e)
            return SendResult(ok=False, reason=str(e), status_code=status)
        except requests.RequestException as e:
            logger.warning("push service unreachable: %s", e)
            return SendResult(ok=False, reason=str(e))
        except (VapidException, ValueError, TypeError, KeyError, AttributeError) as e:
            # malformed subscription, payload, ttl or key material
            logger.exception("push rejected before sending")
            return SendResult(ok=False, reason=str(e))
        return SendResult(ok=True)
