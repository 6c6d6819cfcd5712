from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.schemas.response import BaseResponse
from app.schemas.user import UserAccount

logger = logging.getLogger(__name__)


class UserAccountLookup(Protocol):
    async def get_user_account(self, mobile_number: str) -> BaseResponse[UserAccount]:  # pragma: no cover - interface
        ...


class UserAccountClient:
    """HTTP client for the account service's ``GET /users/{mobile}`` endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        self.http_client = http_client
        self.base_url = base_url

    async def get_user_account(self, mobile_number: str) -> BaseResponse[UserAccount]:
        url = f"{self.base_url.rstrip('/')}/users/{quote(mobile_number, safe='')}"
        resp = await self.http_client.get(url)
        try:
            return BaseResponse[UserAccount].model_validate_json(resp.content)
        except ValidationError:
            logger.warning(
                "[%s] Unexpected account service reply: %s %s",
                mobile_number,
                resp.status_code,
                resp.text,
            )
            if resp.is_success:
                return BaseResponse[UserAccount](code=424, message="Failed dependency")
            return BaseResponse[UserAccount](code=resp.status_code, message=resp.reason_phrase)
