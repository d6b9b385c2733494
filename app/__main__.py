import logging
import sys

import uvicorn

from app.core.config import MissingVapidConfig, get_settings, vapid_config
from app.core.logging import setup_logging
from app.core.vapid import generate_vapid_keys
from app.main import create_app

logger = logging.getLogger("app")


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        vapid = vapid_config(settings)
    except MissingVapidConfig as e:
        logger.error("%s", e)
        if "VAPID_SUBJECT" in e.missing:
            print("Set VAPID_SUBJECT to a contact URI, e.g. VAPID_SUBJECT=mailto:you@example.com")
        else:
            keys = generate_vapid_keys()
            print("You must set the VAPID_PUBLIC_KEY and VAPID_PRIVATE_KEY "
                  "environment variables. You can use the following ones:")
            print(f"VAPID_PUBLIC_KEY={keys['publicKey']}")
            print(f"VAPID_PRIVATE_KEY={keys['privateKey']}")
        return 1

    app = create_app(settings, vapid)
    logger.info("listening on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
