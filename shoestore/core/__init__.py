"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy and error factory functions
- security: SecurityManager for password hashing
- access: Role to capability lookup and the access level presenter

Usage:
------
    from shoestore.core import AppException, capabilities_for

    from shoestore.core import exceptions
    raise exceptions.invalid_credentials()

==============================================================================
"""

from .exceptions import (
    AppException,
    AuthenticationError,
    DataAccessError,
    ValidationError,
)
from .security import SecurityManager, get_security_manager
from .access import AccessLevelPresenter, Capabilities, capabilities_for

__all__ = [
    # Exceptions
    "AppException",
    "AuthenticationError",
    "DataAccessError",
    "ValidationError",
    # Security
    "SecurityManager",
    "get_security_manager",
    # Access
    "AccessLevelPresenter",
    "Capabilities",
    "capabilities_for",
]
