from __future__ import annotations

import random
import secrets
import string
import uuid
from typing import Callable

from app.schemas.auth import OtpCode

PREFIX_ALPHABET = string.ascii_uppercase + string.digits
PREFIX_LENGTH = 4
CODE_MIN = 100000
CODE_MAX = 999999


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class OtpCodeGenerator:
    def __init__(
        self,
        rng: random.Random | None = None,
        request_id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.rng = rng or secrets.SystemRandom()
        self.request_id_factory = request_id_factory or _uuid4_str

    def new_prefix(self) -> str:
        return "".join(self.rng.choice(PREFIX_ALPHABET) for _ in range(PREFIX_LENGTH))

    def new_code(self) -> int:
        return self.rng.randint(CODE_MIN, CODE_MAX)

    def new_otp_code(self) -> OtpCode:
        return OtpCode(
            prefix=self.new_prefix(),
            code=self.new_code(),
            request_id=self.request_id_factory(),
        )


_default_generator = OtpCodeGenerator()


def new_otp_code() -> OtpCode:
    return _default_generator.new_otp_code()
