import os
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

# Keep tests away from any real gateway configured in the environment
os.environ.setdefault("SMS_MODE", "mock")

from app.core.settings import Settings
from app.schemas.auth import OtpCode
from app.schemas.response import BaseResponse
from app.schemas.user import UserAccount
from app.services.auth import AuthService
from app.services.otp_codes import OtpCodeGenerator
from app.services.otp_store import OtpStore


MOBILE = "233200000000"


class InMemoryRedis:
    """Just enough of redis.asyncio.Redis for the OTP store."""

    def __init__(self):
        self.values: dict[str, bytes] = {}
        self.ttls: dict[str, timedelta] = {}

    async def set(self, key, value, ex=None):
        self.values[key] = value.encode() if isinstance(value, str) else value
        self.ttls[key] = ex
        return True

    async def get(self, key):
        return self.values.get(key)


class FixedGenerator(OtpCodeGenerator):
    def __init__(self, otp_code: OtpCode):
        super().__init__()
        self.otp_code = otp_code

    def new_otp_code(self) -> OtpCode:
        return self.otp_code


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        sms_mode="mock",
        otp_code_expiry_in_minutes=5,
        bearer_token_key="test-signing-key-test-signing-key",
        bearer_token_issuer="otp-auth-tests",
        bearer_token_audience="otp-auth-test-clients",
    )


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def store(fake_redis):
    return OtpStore(fake_redis)


@pytest.fixture
def stored_code():
    return OtpCode(prefix="ABCD", code=654321, request_id="r1")


@pytest.fixture
def user():
    return UserAccount(id="u-1", mobile_number=MOBILE, username="ama")


@pytest.fixture
def users(user):
    lookup = AsyncMock()
    lookup.get_user_account.return_value = BaseResponse(code=200, message="Ok", data=user)
    return lookup


@pytest.fixture
def sms():
    client = AsyncMock()
    client.send.return_value = True
    return client


@pytest.fixture
def service(users, store, sms, settings, stored_code):
    return AuthService(
        users=users,
        store=store,
        sms=sms,
        settings=settings,
        generator=FixedGenerator(stored_code),
    )
