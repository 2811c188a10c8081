"""Bearer token helpers built on python-jose."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from agora_forum.core.settings import settings


class TokenError(ValueError):
    """Raised when a bearer token cannot be decoded into a username."""


def create_access_token(username: str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a JWT access token whose subject is ``username``."""
    to_encode: dict[str, object] = {"sub": username}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> str:
    """Return the username carried by ``token``.

    Raises:
        TokenError: If the signature, expiry or subject claim is invalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise TokenError("Could not validate credentials") from err

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise TokenError("Could not validate credentials")
    return subject
