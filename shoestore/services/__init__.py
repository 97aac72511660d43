"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes between the application shell and the database layer.

This package provides:
- AuthService: Login gate
- StorefrontSession: Catalog state for one user or guest

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   Application   │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← Data Access (via ORM)
    └─────────────────┘

==============================================================================
"""

from .auth_service import AuthService
from .storefront_service import StorefrontSession

__all__ = [
    "AuthService",
    "StorefrontSession",
]
