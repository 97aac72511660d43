"""
==============================================================================
Authentication Tests
==============================================================================

Tests for the login gate and password hashing.

==============================================================================
"""

import pytest
from pydantic import ValidationError as SchemaValidationError

from shoestore.core.exceptions import (
    AuthenticationError,
    DataAccessError,
    ValidationError,
)
from shoestore.core.security import SecurityManager
from shoestore.db.database import DatabaseManager
from shoestore.db.models import UserRole
from shoestore.schemas.auth import UserSession
from shoestore.services.auth_service import AuthService


class TestLogin:
    """Tests for AuthService.login."""

    def test_login_success(self, db, manager_user):
        """Test successful login returns a session for the user."""
        session = AuthService(db).login("manager", "manager123")

        assert session.user_id == manager_user.id
        assert session.login == "manager"
        assert session.display_name == "Степанов Михаил"
        assert session.role == UserRole.MANAGER

    def test_login_trims_login(self, db, customer_user):
        """Test whitespace around the login is ignored."""
        session = AuthService(db).login("  client ", "client123")
        assert session.role == UserRole.CUSTOMER

    def test_password_not_trimmed(self, db, customer_user):
        """Test the password is compared exactly as typed."""
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("client", "client123 ")
        assert exc_info.value.code == "INVALID_CREDENTIALS"

    @pytest.mark.parametrize("login,password", [
        ("", "secret"),
        ("   ", "secret"),
        ("admin", ""),
        ("", ""),
        (None, None),
    ])
    def test_empty_credentials(self, db, login, password):
        """Test empty login or password is rejected before any lookup."""
        with pytest.raises(ValidationError) as exc_info:
            AuthService(db).login(login, password)

        assert exc_info.value.code == "EMPTY_CREDENTIALS"
        assert exc_info.value.message == "Введите логин и пароль!"

    def test_unknown_user(self, db, admin_user):
        """Test an unknown login is rejected."""
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("nobody", "admin123")

        assert exc_info.value.code == "INVALID_CREDENTIALS"
        assert exc_info.value.message == "Неверный логин или пароль!"

    def test_wrong_password(self, db, admin_user):
        """Test a wrong password gives the same error as an unknown user."""
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("admin", "wrongpassword")
        assert exc_info.value.code == "INVALID_CREDENTIALS"

    def test_login_too_long(self, db, admin_user):
        """Test an over-long login is treated as invalid credentials."""
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("a" * 51, "admin123")
        assert exc_info.value.code == "INVALID_CREDENTIALS"

    def test_disabled_account(self, db, disabled_user):
        """Test a correct password on a disabled account is refused."""
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("former", "former123")
        assert exc_info.value.code == "ACCOUNT_DISABLED"

    def test_disabled_account_wrong_password(self, db, disabled_user):
        """Test a disabled account with a wrong password reveals nothing."""
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("former", "nope")
        assert exc_info.value.code == "INVALID_CREDENTIALS"

    def test_row_without_session_role(self, db, customer_user, monkeypatch):
        """Test an account whose role cannot form a session is refused as invalid."""
        def guest_session(cls, user):
            return cls(
                user_id=user.id,
                login=user.login,
                display_name=user.full_name,
                role=UserRole.GUEST,
            )

        monkeypatch.setattr(UserSession, "from_user", classmethod(guest_session))

        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(db).login("client", "client123")

        assert exc_info.value.code == "INVALID_CREDENTIALS"
        assert isinstance(exc_info.value.__cause__, SchemaValidationError)

    def test_database_failure(self):
        """Test a database error during lookup raises LOGIN_FAILED."""
        manager = DatabaseManager("sqlite://")
        session = manager.get_session()
        try:
            with pytest.raises(DataAccessError) as exc_info:
                AuthService(session).login("admin", "admin123")
        finally:
            session.close()
            manager.dispose()

        assert exc_info.value.code == "LOGIN_FAILED"
        assert exc_info.value.details["causes"]

    def test_continue_as_guest(self, db):
        """Test guest entry has no session."""
        assert AuthService(db).continue_as_guest() is None


class TestSecurityManager:
    """Tests for password hashing."""

    def test_hash_and_verify(self):
        """Test a hashed password verifies and a wrong one does not."""
        security = SecurityManager()
        hashed = security.hash_password("manager123")

        assert hashed != "manager123"
        assert security.verify_password("manager123", hashed) is True
        assert security.verify_password("manager124", hashed) is False

    def test_empty_password_not_hashed(self):
        """Test hashing an empty password is refused."""
        with pytest.raises(ValueError):
            SecurityManager().hash_password("")

    def test_malformed_hash(self):
        """Test a stored value that is not a hash never verifies."""
        assert SecurityManager().verify_password("admin123", "admin123") is False
