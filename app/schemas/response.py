from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class BaseResponse(BaseModel, Generic[T]):
    code: int
    message: str
    data: T | None = None

    @property
    def is_success(self) -> bool:
        return self.code == 200
