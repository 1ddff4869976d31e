"""Signed session tokens for admins (HS256 by default).

A token carries the admin id in `sub` and the admin role; it expires after
ACCESS_TOKEN_EXPIRE_MINUTES. Logging out does not revoke it: the client
discards it.
"""

from datetime import timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from hradmin.core.config import get_settings
from hradmin.shared.utils.datetime import utc_now


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Sign the given claims with iat and exp added.

    Args:
        data: Claims (sub = admin id, role).
        expires_delta: Lifetime; defaults to settings.access_token_expire_minutes.
    """
    settings = get_settings()
    issued_at = utc_now()
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {**data, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(
        claims, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def verify_token(token: str) -> dict[str, Any]:
    """Return the claims of a valid token.

    Raises:
        ValueError: If the token is expired, badly signed, malformed, or has no subject.
    """
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True},
        )
    except ExpiredSignatureError as e:
        raise ValueError("Token has expired") from e
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not claims.get("sub"):
        raise ValueError("Token has no subject")
    return claims
