from fastapi import Request

from app.core.config import VapidConfig
from app.services.notify_push import PushSender


def get_vapid(request: Request) -> VapidConfig:
    return request.app.state.vapid


def get_push_sender(request: Request) -> PushSender:
    return request.app.state.push_sender
