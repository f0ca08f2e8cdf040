"""Bearer tokens for training center and trainer accounts."""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

import jwt

from training_center.core import config
from training_center.models.user import User

ACCESS_TOKEN_TYPE = "access"
REQUIRED_CLAIMS = ["sub", "exp", "iat"]


def create_access_token(
    subject: str,
    role_ids: Iterable[int] = (),
    expires_minutes: int | None = None,
) -> str:
    lifetime = timedelta(minutes=expires_minutes or config.JWT_EXPIRES_MINUTES)
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": subject,
        "roles": sorted(role_ids),
        "typ": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def issue_token_for(user: User) -> str:
    return create_access_token(user.email, role_ids=user.role_ids)


def decode_access_token(token: str) -> dict:
    """Raises jwt.InvalidTokenError for expired, malformed or non-access tokens."""
    claims = jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
    if claims.get("typ") != ACCESS_TOKEN_TYPE:
        raise jwt.InvalidTokenError("Not an access token")
    return claims
