from __future__ import annotations

import logging
from datetime import timedelta

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.schemas.auth import OtpCode

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "authentication:otp"


class OtpDecodeError(ValueError):
    pass


def otp_key(mobile_number: str, request_id: str, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    return f"{prefix}:{mobile_number}:{request_id}"


class OtpStore:
    """OTP codes in Redis, one key per mobile number and request id.

    Entries expire through the Redis TTL only; nothing here deletes them.
    """

    def __init__(self, redis_client: Redis, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self.redis = redis_client
        self.key_prefix = key_prefix

    def key(self, mobile_number: str, request_id: str) -> str:
        return otp_key(mobile_number, request_id, self.key_prefix)

    async def put(self, key: str, otp_code: OtpCode, ttl: timedelta) -> bool:
        try:
            saved = await self.redis.set(key, otp_code.model_dump_json(), ex=ttl)
        except RedisError:
            logger.exception("Failed to store OTP code under %s", key)
            return False
        return bool(saved)

    async def get(self, key: str) -> OtpCode | None:
        stored = await self.redis.get(key)
        if stored is None:
            return None
        try:
            return OtpCode.model_validate_json(stored)
        except ValidationError as exc:
            raise OtpDecodeError(f"Stored OTP under {key} is not decodable") from exc
