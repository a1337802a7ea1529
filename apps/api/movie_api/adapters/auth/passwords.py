"""Salted one-way password hashing."""

from __future__ import annotations

import logging

from passlib.context import CryptContext

# pbkdf2_sha256 is salted and iterated; passlib compares digests in constant time.
_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(candidate: str, password_hash: str) -> bool:
    """Return whether ``candidate`` matches ``password_hash``.

    A malformed or unrecognised stored hash counts as a mismatch instead of
    raising into the response layer.
    """
    if not candidate or not password_hash:
        return False
    try:
        return _pwd.verify(candidate, password_hash)
    except (ValueError, TypeError):
        logger.warning("password.verify_failed reason=malformed_hash")
        return False


__all__ = ["hash_password", "verify_password"]
