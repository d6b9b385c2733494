# File: app/routers/push.py
import asyncio
import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from app.core.config import VapidConfig
from app.core.deps import get_push_sender, get_vapid
from app.schemas.push import SendNotificationIn
from app.services.notify_push import PushSender, send_options

router = APIRouter(tags=["push"])
logger = logging.getLogger(__name__)


@router.get("/vapidPublicKey", response_class=PlainTextResponse)
def vapid_public_key(vapid: VapidConfig = Depends(get_vapid)):
    return vapid.public_key


@router.post("/register", status_code=201)
def register():
    # A real world application would store the subscription info.
    return Response(status_code=201)


@router.post("/sendNotification", status_code=201)
async def send_notification(body: SendNotificationIn, sender: PushSender = Depends(get_push_sender)):
    options = send_options(body.ttl)
    logger.info("Send data: %s %s %s", body.subscription, body.payload, options)

    delay = body.delay_seconds()
    if delay:
        await asyncio.sleep(delay)

    result = await sender.send(body.subscription, body.payload, options)
    if not result.ok:
        logger.error("sendNotification failed: %s", result.reason)
        return Response(status_code=500)
    return Response(status_code=201)
