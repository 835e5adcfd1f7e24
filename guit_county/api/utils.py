"""
JWT utilities for issuing and verifying access tokens.

Functions
---------
create_access_token(data: dict) -> str
    Creates a signed JWT access token with an expiration (`exp`) claim.
verify_token(token: str) -> str | None
    Verify a JWT's signature & expiration and return the subject (`sub`) if valid.
extract_token(cookie_token, authorization) -> str | None
    Pick the token from the `token` cookie or an `Authorization: Bearer` header.

Environment contract (from `settings`)
--------------------------------------
SECRET_KEY : str
    HMAC signing key for JWTs.
ALGORITHM : str
    JWT signing algorithm (e.g., "HS256").
ACCESS_TOKEN_EXPIRE_MINUTES : int
    Token lifetime window in minutes.
"""

import logging
from datetime import datetime
from typing import Optional

from jose import jwt, JWTError

from guit_county.database.config.config import settings

logger = logging.getLogger("uvicorn")


def create_access_token(data: dict) -> str:
    """
    Create a signed JWT access token.

    Parameters
    ----------
    data : dict
        Claims to embed in the token; the account id goes in `sub`.

    Returns
    -------
    str
        Encoded JWT string.

    Notes
    ----------
    - Adds an `exp` (expiration) claim calculated from ACCESS_TOKEN_EXPIRE_MINUTES.
    - Uses `settings.SECRET_KEY` and `settings.ALGORITHM` for signing.
    """
    expiration_time = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    encoding = data.copy()
    # exp is a NumericDate (seconds since epoch)
    expires = int(datetime.now().timestamp()) + (int(expiration_time) * 60)
    encoding.update({"exp": expires})
    return jwt.encode(encoding, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Optional[str]:
    """
    Verify a JWT and return its subject.

    Parameters
    ----------
    token : str
        Encoded JWT string from the client (cookie or Authorization header).

    Returns
    ----------
    str | None
        The `sub` claim if the token is valid, otherwise None (invalid
        signature, expired or malformed token).
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload.get("sub")
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        return None


def extract_token(cookie_token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    """Return the cookie token, else the token of a `Bearer` Authorization header."""
    if cookie_token:
        return cookie_token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip()
    return None
