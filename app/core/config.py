# File: app\core\config.py
# Project: web-push-relay
# Auto-added for reference

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingVapidConfig(RuntimeError):
    """Raised when the environment lacks a value needed to sign pushes."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing environment variables: {', '.join(missing)}")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    .env file should contain:

    Required:
    - VAPID_PUBLIC_KEY=your-vapid-public-key (base64url)
    - VAPID_PRIVATE_KEY=your-vapid-private-key (base64url)
    - VAPID_SUBJECT=mailto:you@example.com

    Optional (with defaults):
    - PORT=3003
    - HOST=0.0.0.0
    - STATIC_DIR=.
    - PUSH_TIMEOUT=10
    - LOG_LEVEL=INFO
    """
    vapid_public_key: Optional[str] = Field(default=None, alias="VAPID_PUBLIC_KEY")
    vapid_private_key: Optional[str] = Field(default=None, alias="VAPID_PRIVATE_KEY")
    vapid_subject: Optional[str] = Field(default=None, alias="VAPID_SUBJECT")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3003, alias="PORT")
    static_dir: str = Field(default=".", alias="STATIC_DIR")
    push_timeout: float = Field(default=10.0, alias="PUSH_TIMEOUT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def missing_keys(self) -> list[str]:
        missing = []
        if not self.vapid_public_key:
            missing.append("VAPID_PUBLIC_KEY")
        if not self.vapid_private_key:
            missing.append("VAPID_PRIVATE_KEY")
        return missing


@dataclass(frozen=True)
class VapidConfig:
    subject: str
    public_key: str
    private_key: str

    @property
    def claims(self) -> dict:
        return {"sub": self.subject}


def vapid_config(settings: Settings) -> VapidConfig:
    """Build the signing config once at startup.

    The keypair is checked first so the caller can offer freshly generated
    keys; a missing subject is reported on its own.
    """
    missing = settings.missing_keys()
    if missing:
        raise MissingVapidConfig(missing)
    if not settings.vapid_subject:
        raise MissingVapidConfig(["VAPID_SUBJECT"])
    return VapidConfig(
        subject=settings.vapid_subject,
        public_key=settings.vapid_public_key,
        private_key=settings.vapid_private_key,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
