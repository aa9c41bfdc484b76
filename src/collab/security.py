"""JWT helpers for bearer tokens."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from collab.config import settings


def create_access_token(user_name: str, user_id: int, expires_delta: timedelta | None = None) -> str:
    """Issue a signed access token whose subject is the user name."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_name,
        "user_id": user_id,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": now + (expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Verify and decode a token; raises ValueError when it is not acceptable."""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as exc:
        raise ValueError(f"Invalid token: {exc}") from exc
