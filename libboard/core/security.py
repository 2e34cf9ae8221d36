"""Bearer token verification for the board.

Members are registered and logged in elsewhere; the board only needs to know
which member email a token was issued for (the ``sub`` claim).
"""

from fastapi import HTTPException, status
from jose import JWTError, jwt

from libboard.config import settings


# JWT settings
ALGORITHM = "HS256"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def member_email_from_token(token: str) -> str:
    """Verify ``token`` and return its subject.

    Raises:
        HTTPException: 401 if the token is invalid, expired or has no subject
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise _unauthorized() from e

    email = payload.get("sub")
    if not isinstance(email, str) or not email:
        raise _unauthorized()
    return email
