from __future__ import annotations

from abc import ABC, abstractmethod


class TokenProvider(ABC):
    """为每个请求提供 Authorization 头的值（如 "bearer <token>"）"""

    @abstractmethod
    async def get_token(self) -> str:
        raise NotImplementedError


class StaticTokenProvider(TokenProvider):
    """固定令牌；获取与刷新由调用方负责"""

    def __init__(self, access_token: str) -> None:
        if not access_token:
            raise RuntimeError("Scheduler access token is not set")
        if not access_token.lower().startswith("bearer "):
            access_token = f"bearer {access_token}"
        self._token = access_token

    async def get_token(self) -> str:
        return self._token
