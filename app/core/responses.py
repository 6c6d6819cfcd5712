from __future__ import annotations

from typing import TypeVar

from app.schemas.response import BaseResponse

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Something bad happened, try again later"
FAILED_DEPENDENCY_MESSAGE = "Failed dependency"


def ok_response(data: T, message: str = "Ok") -> BaseResponse[T]:
    return BaseResponse(code=200, message=message, data=data)


def bad_request_response(message: str) -> BaseResponse:
    return BaseResponse(code=400, message=message)


def failed_dependency_response(message: str = FAILED_DEPENDENCY_MESSAGE) -> BaseResponse:
    return BaseResponse(code=424, message=message)


def internal_server_error_response(message: str = DEFAULT_ERROR_MESSAGE) -> BaseResponse:
    return BaseResponse(code=500, message=message)


def forward_response(upstream: BaseResponse) -> BaseResponse:
    """Carry another service's code and message over without its data."""
    return BaseResponse(code=upstream.code, message=upstream.message)
