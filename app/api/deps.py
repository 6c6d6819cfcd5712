from fastapi import Depends, Request

from app.core.settings import Settings, get_settings
from app.services.auth import AuthService
from app.services.otp_store import OtpStore
from app.services.sms_client import SmsClient
from app.services.user_accounts import UserAccountClient


def get_auth_service(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AuthService:
    state = request.app.state
    store = OtpStore(state.redis, key_prefix=settings.otp_key_prefix)
    sms = SmsClient(
        http_client=state.sms_http,
        base_url=settings.sms_base_url,
        client_id=settings.sms_client_id,
        client_secret=settings.sms_client_secret,
        sender_id=settings.sms_sender_id,
        otp_expiry_minutes=settings.otp_code_expiry_in_minutes,
        mode=settings.sms_mode,
    )
    users = UserAccountClient(state.users_http, settings.user_service_base_url)
    return AuthService(users=users, store=store, sms=sms, settings=settings)
