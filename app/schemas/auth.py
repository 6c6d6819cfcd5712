from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import UserAccount


class OtpCode(BaseModel):
    prefix: str
    code: int
    request_id: str

    model_config = ConfigDict(frozen=True)


class SendSmsRequest(BaseModel):
    code: int
    prefix: str


class VerifyOtpRequest(BaseModel):
    request_id: str
    code: int
    prefix: str


MOBILE_NUMBER_PATTERN = r"^\+?\d+$"


class OtpRequest(BaseModel):
    mobile_number: str = Field(min_length=1, pattern=MOBILE_NUMBER_PATTERN)


class OtpVerify(VerifyOtpRequest):
    mobile_number: str = Field(min_length=1, pattern=MOBILE_NUMBER_PATTERN)


class OtpCodeResponse(BaseModel):
    prefix: str
    request_id: str
    expires_at: datetime


class GenerateTokenResponse(BaseModel):
    bearer_token: str
    expiry: int


class LoginResponse(GenerateTokenResponse):
    user: UserAccount
