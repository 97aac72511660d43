"""
==============================================================================
Security Module - Password Hashing
==============================================================================

Password management for the login gate.

This module implements:
- SecurityManager: cached holder of the passlib hashing context
- Password hashing and verification using bcrypt

Passwords are never stored or compared in plain text.

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from passlib.context import CryptContext


# Module logger
logger = logging.getLogger(__name__)


class SecurityManager:
    """
    Centralized password hashing.

    Attributes:
        _pwd_context: Passlib context for password hashing

    Example:
        >>> security = SecurityManager()
        >>> hashed = security.hash_password("secret123")
        >>> security.verify_password("secret123", hashed)
        True
    """

    # =========================================================================
    # CLASS CONSTANTS
    # =========================================================================

    BCRYPT_SCHEMES = ["bcrypt"]
    BCRYPT_DEPRECATED = "auto"

    def __init__(self) -> None:
        """Set up the password hashing context."""
        self._pwd_context = CryptContext(
            schemes=self.BCRYPT_SCHEMES,
            deprecated=self.BCRYPT_DEPRECATED
        )

        logger.debug("SecurityManager initialized")

    # =========================================================================
    # PASSWORD HASHING METHODS
    # =========================================================================

    def hash_password(self, plain_password: str) -> str:
        """
        Hash a plain text password using bcrypt.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Bcrypt hash string (includes algorithm, salt, and hash)

        Raises:
            ValueError: If the password is empty
        """
        if not plain_password:
            raise ValueError("Password cannot be empty")

        hashed = self._pwd_context.hash(plain_password)
        logger.debug("Password hashed successfully")
        return hashed

    def verify_password(
        self,
        plain_password: str,
        hashed_password: str
    ) -> bool:
        """
        Verify a plain text password against a bcrypt hash.

        Malformed hashes count as a mismatch.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        try:
            is_valid = self._pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification error: {type(e).__name__}")
            return False

        if is_valid:
            logger.debug("Password verification successful")
        else:
            logger.debug("Password verification failed")

        return is_valid


@lru_cache(maxsize=1)
def get_security_manager() -> SecurityManager:
    """Get the global SecurityManager instance."""
    return SecurityManager()
