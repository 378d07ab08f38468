"""Bearer-token sources for the data service."""

from __future__ import annotations

import os
from typing import Optional, Protocol

from tsundoc.config import TOKEN_ENV


class TokenProvider(Protocol):
    """Produce a bearer token, or ``None`` when there is no session."""

    async def get_token(self) -> Optional[str]:
        ...


class StaticTokenProvider:
    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    async def get_token(self) -> Optional[str]:
        return self._token


class EnvTokenProvider:
    """Read the token from an environment variable on every request."""

    def __init__(self, variable: str = TOKEN_ENV) -> None:
        self._variable = variable

    async def get_token(self) -> Optional[str]:
        return os.environ.get(self._variable) or None
