from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class BearerTokenConfig:
    key: str
    issuer: str
    audience: str


class Settings(BaseSettings):
    app_name: str = "otp-auth"
    api_prefix: str = "/api"
    env: str = "dev"
    allow_origins: str = "http://localhost:3000"
    log_level: str = "INFO"

    redis_url: str = "redis://localhost:6379/0"

    otp_code_expiry_in_minutes: int = 5
    otp_key_prefix: str = "authentication:otp"

    # Account lookup service
    user_service_base_url: str = "http://localhost:8001"
    user_service_timeout_seconds: float = 10.0

    # SMS gateway. "mock" never leaves the process.
    sms_mode: str = "mock"
    sms_base_url: str = "https://smsc.hubtel.com/v1/messages/send"
    sms_client_id: str | None = None
    sms_client_secret: str | None = None
    sms_sender_id: str = "OTPAuth"
    sms_timeout_seconds: float = 15.0

    bearer_token_key: str = "dev-secret-dev-secret-dev-secret!"
    bearer_token_issuer: str = "otp-auth"
    bearer_token_audience: str = "otp-auth-clients"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def bearer_token_config(self) -> BearerTokenConfig:
        return BearerTokenConfig(
            key=self.bearer_token_key,
            issuer=self.bearer_token_issuer,
            audience=self.bearer_token_audience,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
