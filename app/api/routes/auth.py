from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_auth_service
from app.schemas.auth import LoginResponse, OtpCodeResponse, OtpRequest, OtpVerify, VerifyOtpRequest
from app.schemas.response import BaseResponse
from app.services.auth import AuthService

router = APIRouter()


def _envelope(response: BaseResponse) -> JSONResponse:
    status_code = response.code if 100 <= response.code <= 599 else 500
    return JSONResponse(response.model_dump(mode="json"), status_code=status_code)


@router.post("/request-otp", response_model=BaseResponse[OtpCodeResponse])
async def request_otp_code(
    payload: OtpRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    response = await service.request_otp_code(payload.mobile_number)
    return _envelope(response)


@router.post("/verify-otp", response_model=BaseResponse[LoginResponse])
async def verify_otp_code(
    payload: OtpVerify,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    request = VerifyOtpRequest(
        request_id=payload.request_id,
        code=payload.code,
        prefix=payload.prefix,
    )
    response = await service.verify_otp_code(payload.mobile_number, request)
    return _envelope(response)
