"""
Security helpers for password hashing and HTTP Basic authentication.

Passwords are hashed using PBKDF2‑HMAC with SHA‑256 and a random
salt; the stored form is ``<salt hex>$<hash hex>``.  The
``require_basic_auth`` dependency guards the mutating instrument
routes: it runs before the route handler and rejects the request with
HTTP 401 when the ``Authorization: Basic`` credentials are missing or
do not match the account configured in the application settings.
"""

import hashlib
import hmac
import logging
import os
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .config import settings

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for malformed stored values instead of raising.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


security = HTTPBasic(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def require_basic_auth(
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
) -> str:
    """Dependency that validates HTTP Basic credentials.

    Use it on a route via ``dependencies=[Depends(require_basic_auth)]``
    or as a parameter default.  On success the authenticated username
    is returned; otherwise an HTTP 401 error with a
    ``WWW-Authenticate: Basic`` header is raised and the route handler
    never runs.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    # Compare usernames in constant time as well so that response timing
    # does not reveal whether the account name was correct.
    username_ok = hmac.compare_digest(
        credentials.username.encode("utf-8"),
        settings.basic_auth_username.encode("utf-8"),
    )
    password_ok = bool(settings.basic_auth_password_hash) and verify_password(
        credentials.password, settings.basic_auth_password_hash
    )
    if not (username_ok and password_ok):
        logger.warning("Rejected credentials for user %r", credentials.username)
        raise _unauthorized("Invalid credentials")
    return credentials.username
