# app/static.py
import os

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.types import Scope


def is_hidden(path: str) -> bool:
    parts = path.replace(os.sep, "/").split("/")
    return any(p.startswith(".") and p not in (".", "..") for p in parts)


class PublicFiles(StaticFiles):
    """Static files with dotfiles (``.env``, ``.git/``) treated as missing."""

    async def get_response(self, path: str, scope: Scope):
        if is_hidden(path):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
