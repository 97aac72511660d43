"""
==============================================================================
Authentication Service Module
==============================================================================

Login gate in front of the catalog.

Authentication Flow:
-------------------
    ┌─────────────┐     ┌─────────────┐
    │   Check     │────▶│   Empty     │ → EMPTY_CREDENTIALS
    │   Input     │     │   Input     │
    └──────┬──────┘     └─────────────┘
           │
    ┌──────▼──────┐     ┌─────────────┐
    │ Find User   │────▶│ User Not    │ → INVALID_CREDENTIALS
    └──────┬──────┘     │   Found     │
           │            └─────────────┘
    ┌──────▼──────┐     ┌─────────────┐
    │  Verify     │────▶│  Password   │ → INVALID_CREDENTIALS
    │  Password   │     │   Wrong     │
    └──────┬──────┘     └─────────────┘
           │
    ┌──────▼──────┐     ┌─────────────┐
    │   Check     │────▶│  Account    │ → ACCOUNT_DISABLED
    │   Active    │     │  Disabled   │
    └──────┬──────┘     └─────────────┘
           │
    ┌──────▼──────┐
    │   Return    │
    │ UserSession │
    └─────────────┘

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shoestore.core import exceptions
from shoestore.core.security import SecurityManager, get_security_manager
from shoestore.db.models import User
from shoestore.schemas.auth import LoginRequest, UserSession


# Module logger
logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service for the login gate.

    Attributes:
        _db: Database session for user queries
        _security: SecurityManager for password verification

    Example:
        >>> auth_service = AuthService(db_session)
        >>> session = auth_service.login("manager", "manager123")
        >>> print(session.role)
        'manager'
        >>> auth_service.continue_as_guest() is None
        True
    """

    def __init__(
        self,
        db: Session,
        security: Optional[SecurityManager] = None
    ) -> None:
        """
        Initialize the authentication service.

        Args:
            db: SQLAlchemy database session
            security: Optional SecurityManager (uses shared one if None)
        """
        self._db = db
        self._security = security or get_security_manager()

    # =========================================================================
    # AUTHENTICATION METHODS
    # =========================================================================

    def login(self, login: str, password: str) -> UserSession:
        """
        Authenticate a user by login and password.

        Args:
            login: Login name, surrounding whitespace ignored
            password: Plain text password, taken as typed

        Returns:
            UserSession for the authenticated user

        Raises:
            ValidationError: EMPTY_CREDENTIALS if login or password is empty
            AuthenticationError: INVALID_CREDENTIALS if unknown user, wrong
                password or a row that cannot form a session
            AuthenticationError: ACCOUNT_DISABLED if the account is inactive
            DataAccessError: LOGIN_FAILED if the database cannot be read
        """
        if not (login or "").strip() or not password:
            logger.info("Login rejected: empty credentials")
            raise exceptions.empty_credentials()

        try:
            request = LoginRequest(login=login, password=password)
        except SchemaValidationError:
            logger.warning("Login failed: malformed login")
            raise exceptions.invalid_credentials() from None

        try:
            user = self._db.query(User).filter(
                User.login == request.login
            ).first()
        except SQLAlchemyError as e:
            logger.error(f"Login failed: database error - {e}")
            raise exceptions.login_failed(e) from e

        if not user:
            logger.warning(f"Login failed: user not found - {request.login}")
            raise exceptions.invalid_credentials()

        if not self._security.verify_password(request.password, user.password_hash):
            logger.warning(f"Login failed: invalid password - {request.login}")
            raise exceptions.invalid_credentials()

        if not user.is_active:
            logger.warning(f"Login failed: account disabled - {request.login}")
            raise exceptions.account_disabled()

        try:
            user_session = UserSession.from_user(user)
        except SchemaValidationError as e:
            logger.error(f"Login failed: unusable account {request.login} - {e}")
            raise exceptions.invalid_credentials() from e

        logger.info(f"User authenticated: {user.login} ({user.role.value})")

        return user_session

    def continue_as_guest(self) -> Optional[UserSession]:
        """Enter the catalog without logging in."""
        logger.info("Continuing as guest")
        return None
