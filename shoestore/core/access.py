"""
==============================================================================
Access Level Module
==============================================================================

Role based visibility of catalog controls.

Capability Table:
----------------
    ┌──────────┬───────────────┬─────────────┬─────────────┐
    │ Role     │ Search/Filter │ View Orders │ Add Product │
    ├──────────┼───────────────┼─────────────┼─────────────┤
    │ guest    │      no       │     no      │     no      │
    │ customer │      yes      │     no      │     no      │
    │ manager  │      yes      │     yes     │     no      │
    │ admin    │      yes      │     yes     │     yes     │
    └──────────┴───────────────┴─────────────┴─────────────┘

==============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, TYPE_CHECKING

from shoestore.db.models import UserRole

if TYPE_CHECKING:
    from shoestore.schemas.auth import UserSession


@dataclass(frozen=True)
class Capabilities:
    """Controls enabled for a role."""

    search_and_filter: bool = False
    view_orders: bool = False
    add_product: bool = False


CAPABILITIES: Dict[UserRole, Capabilities] = {
    UserRole.GUEST: Capabilities(),
    UserRole.CUSTOMER: Capabilities(search_and_filter=True),
    UserRole.MANAGER: Capabilities(search_and_filter=True, view_orders=True),
    UserRole.ADMIN: Capabilities(search_and_filter=True, view_orders=True, add_product=True),
}


def capabilities_for(role: UserRole) -> Capabilities:
    """Look up the enabled controls for a role."""
    return CAPABILITIES[role]


class AccessLevelPresenter:
    """
    Tells the catalog view which controls to show for a session.

    Example:
        >>> presenter = AccessLevelPresenter(None)
        >>> presenter.caption
        'Гость'
        >>> presenter.capabilities.search_and_filter
        False
    """

    def __init__(self, session: Optional["UserSession"]) -> None:
        """
        Args:
            session: Logged-in user, or None for a guest
        """
        self._session = session

    @property
    def role(self) -> UserRole:
        if self._session is None:
            return UserRole.GUEST
        return self._session.role

    @property
    def capabilities(self) -> Capabilities:
        return capabilities_for(self.role)

    @property
    def caption(self) -> str:
        """Header text: 'Гость' or '<full name> (<role label>)'."""
        if self._session is None:
            return UserRole.GUEST.display_name
        return f"{self._session.display_name} ({self.role.display_name})"
