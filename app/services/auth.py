from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from app.core.responses import (
    bad_request_response,
    failed_dependency_response,
    forward_response,
    internal_server_error_response,
    ok_response,
)
from app.core.settings import Settings
from app.schemas.auth import (
    LoginResponse,
    OtpCodeResponse,
    SendSmsRequest,
    VerifyOtpRequest,
)
from app.schemas.response import BaseResponse
from app.services.otp_codes import OtpCodeGenerator
from app.services.otp_store import OtpDecodeError, OtpStore
from app.services.sms_client import SmsClient
from app.services.token_generator import generate_token
from app.services.user_accounts import UserAccountLookup

logger = logging.getLogger(__name__)

OTP_NOT_FOUND_MESSAGE = "OTP verification failed"
OTP_MISMATCH_MESSAGE = "Incorrect authentication code"


class AuthService:
    """Issues OTP codes over SMS and exchanges verified codes for bearer tokens.

    Every path returns a ``BaseResponse``; collaborator faults are logged and
    turned into an error envelope here rather than raised to the caller.
    """

    def __init__(
        self,
        users: UserAccountLookup,
        store: OtpStore,
        sms: SmsClient,
        settings: Settings,
        generator: OtpCodeGenerator | None = None,
    ) -> None:
        self.users = users
        self.store = store
        self.sms = sms
        self.settings = settings
        self.generator = generator or OtpCodeGenerator()

    @property
    def otp_ttl(self) -> timedelta:
        return timedelta(minutes=self.settings.otp_code_expiry_in_minutes)

    async def request_otp_code(self, mobile_number: str) -> BaseResponse[OtpCodeResponse]:
        try:
            user_response = await self.users.get_user_account(mobile_number)
            if user_response.code != 200:
                return forward_response(user_response)

            otp_code = self.generator.new_otp_code()
            key = self.store.key(mobile_number, otp_code.request_id)
            saved = await self.store.put(key, otp_code, self.otp_ttl)
            if not saved:
                return failed_dependency_response()

            # A failed send leaves the stored code to expire on its own.
            sms_sent = await self.sms.send(
                mobile_number,
                SendSmsRequest(code=otp_code.code, prefix=otp_code.prefix),
            )
            if not sms_sent:
                return internal_server_error_response()

            payload = OtpCodeResponse(
                prefix=otp_code.prefix,
                request_id=otp_code.request_id,
                expires_at=datetime.now(timezone.utc) + self.otp_ttl,
            )
            return ok_response(payload, "OTP code sent successfully")
        except Exception:
            logger.exception("[%s] An error occurred sending otp to user", mobile_number)
            return internal_server_error_response()

    async def verify_otp_code(
        self, mobile_number: str, request: VerifyOtpRequest
    ) -> BaseResponse[LoginResponse]:
        try:
            key = self.store.key(mobile_number, request.request_id)
            try:
                otp_data = await self.store.get(key)
            except OtpDecodeError:
                logger.exception("[%s] Stored OTP could not be decoded", mobile_number)
                return failed_dependency_response()

            if otp_data is None:
                return bad_request_response(OTP_NOT_FOUND_MESSAGE)

            if otp_data.code != request.code or otp_data.prefix != request.prefix:
                return bad_request_response(OTP_MISMATCH_MESSAGE)

            # The code stays valid until its TTL runs out, even after this succeeds.
            user_response = await self.users.get_user_account(mobile_number)
            if user_response.code != 200:
                return forward_response(user_response)
            if user_response.data is None:
                return failed_dependency_response()

            token = generate_token(user_response.data, self.settings.bearer_token_config())
            payload = LoginResponse(
                bearer_token=token.bearer_token,
                expiry=token.expiry,
                user=user_response.data,
            )
            return ok_response(payload, "Verification successful")
        except Exception:
            logger.exception(
                "[%s] An error occurred verifying user otp request\nRequest => %s",
                mobile_number,
                request.model_dump_json(indent=2),
            )
            return internal_server_error_response()
