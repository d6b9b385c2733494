import math
from typing import Any
from pydantic import BaseModel, ConfigDict


class SendNotificationIn(BaseModel):
    """Body of /sendNotification. Every field is taken as sent; values the
    push library cannot use make the send fail rather than the request."""

    model_config = ConfigDict(extra="ignore")

    subscription: Any = None
    payload: Any = None
    ttl: Any = None
    delay: Any = None

    def delay_seconds(self) -> float:
        try:
            delay = float(self.delay)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(delay) or delay < 0:
            return 0.0
        return delay
