from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from app.core.settings import BearerTokenConfig
from app.schemas.auth import GenerateTokenResponse
from app.schemas.user import UserAccount

ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=12)
CLOCK_SKEW = timedelta(milliseconds=30)
USER_CLAIM = "http://schemas.microsoft.com/ws/2008/06/identity/claims/thumbprint"


def generate_token(
    user: UserAccount,
    config: BearerTokenConfig,
    now: datetime | None = None,
) -> GenerateTokenResponse:
    """Mint a signed bearer token carrying the whole user record as one claim.

    Valid from 30ms before ``now`` until 12 hours after it. Tokens are not
    tracked anywhere, so there is no way to revoke one before it expires.
    """
    now = now or datetime.now(timezone.utc)
    expires_at = now + TOKEN_LIFETIME
    payload = {
        USER_CLAIM: user.model_dump_json(),
        "iss": config.issuer,
        "aud": config.audience,
        "nbf": int((now - CLOCK_SKEW).timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, config.key.encode("ascii"), algorithm=ALGORITHM)
    return GenerateTokenResponse(bearer_token=token, expiry=payload["exp"])


def decode_token(token: str, config: BearerTokenConfig) -> dict:
    return jwt.decode(
        token,
        config.key.encode("ascii"),
        algorithms=[ALGORITHM],
        audience=config.audience,
        issuer=config.issuer,
    )


def user_from_claims(claims: dict) -> UserAccount:
    return UserAccount.model_validate_json(claims[USER_CLAIM])
