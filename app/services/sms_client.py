from __future__ import annotations

import logging
from typing import Literal

import httpx

from app.schemas.auth import SendSmsRequest

logger = logging.getLogger(__name__)


def otp_sms_content(request: SendSmsRequest, expiry_minutes: int) -> str:
    return (
        f"Your verification code is {request.prefix}-{request.code}. "
        f"It expires in {expiry_minutes} minutes."
    )


class SmsClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        client_id: str | None,
        client_secret: str | None,
        sender_id: str,
        otp_expiry_minutes: int,
        mode: Literal["mock", "live"] | str = "live",
    ) -> None:
        self.http_client = http_client
        self.base_url = base_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.sender_id = sender_id
        self.otp_expiry_minutes = otp_expiry_minutes
        self.mode = mode

    async def send(self, mobile_number: str, request: SendSmsRequest) -> bool:
        """Send the OTP text. Returns False for any gateway or transport failure."""
        if self.mode == "mock":
            logger.debug(
                "[%s] Mock SMS send: %s",
                mobile_number,
                otp_sms_content(request, self.otp_expiry_minutes),
            )
            return True
        if not self.client_id:
            logger.error("[%s] SMS gateway client id is not configured", mobile_number)
            return False

        params = {
            "clientid": self.client_id,
            "clientsecret": self.client_secret or "",
            "from": self.sender_id,
            "to": mobile_number,
            "content": otp_sms_content(request, self.otp_expiry_minutes),
        }
        try:
            resp = await self.http_client.get(self.base_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL):
            logger.exception("An error occurred sending sms to user: %s", mobile_number)
            return False

        if resp.is_success:
            return True

        logger.error(
            "[%s] An error occurred sending sms to user: %s %s\nResponse => %s",
            mobile_number,
            resp.status_code,
            resp.reason_phrase,
            resp.text,
        )
        return False
