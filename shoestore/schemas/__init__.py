"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Input and session schemas using Pydantic for validation.

==============================================================================
"""

from .auth import LoginRequest, UserSession

__all__ = [
    "LoginRequest",
    "UserSession",
]
