"""
==============================================================================
Authentication Schemas Module
==============================================================================

Login input and the session handed to the catalog after login.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shoestore.db.models import User, UserRole


class LoginRequest(BaseModel):
    """Login credentials; the login is trimmed, the password is not."""
    login: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)

    @field_validator("login", mode="before")
    @classmethod
    def strip_login(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class UserSession(BaseModel):
    """
    Logged-in user as seen by the catalog.

    A guest has no session at all (None).
    """
    model_config = ConfigDict(frozen=True)

    user_id: int
    login: str
    display_name: str
    role: UserRole

    @field_validator("role")
    @classmethod
    def reject_guest(cls, v: UserRole) -> UserRole:
        if v == UserRole.GUEST:
            raise ValueError("A guest is represented by the absence of a session")
        return v

    @classmethod
    def from_user(cls, user: User) -> "UserSession":
        """Create a session from an authenticated user row."""
        return cls(
            user_id=user.id,
            login=user.login,
            display_name=user.full_name,
            role=user.role,
        )
