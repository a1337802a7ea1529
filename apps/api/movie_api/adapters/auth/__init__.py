"""Authentication strategies and token adapters."""

from .base import AuthStrategy, CredentialStore
from .bearer import BearerTokenStrategy
from .local import LocalStrategy
from .passwords import hash_password, verify_password
from .tokens import JWT_ALGORITHM, TokenDecoder, TokenIssuer

__all__ = [
    "AuthStrategy",
    "BearerTokenStrategy",
    "CredentialStore",
    "JWT_ALGORITHM",
    "LocalStrategy",
    "TokenDecoder",
    "TokenIssuer",
    "hash_password",
    "verify_password",
]
