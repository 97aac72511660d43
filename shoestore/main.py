"""
==============================================================================
Shoe Store Catalog - Application Entry Point
==============================================================================

Application shell for the storefront client:
- Logging and database setup on startup
- Login gate (user login or guest)
- One StorefrontSession per login, discarded on logout

A rendering layer drives Application and draws StorefrontSession.cards().

Usage:
------
    # Create tables, default administrator and (optionally) demo data,
    # then print the guest catalog
    SEED_DEMO_DATA=true python -m shoestore.main

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from shoestore.catalog.formatting import DisplayFormatter
from shoestore.catalog.loader import CatalogLoader
from shoestore.config import Settings, get_settings
from shoestore.core.exceptions import AppException
from shoestore.db.database import DatabaseManager, get_database_manager
from shoestore.db.init_db import init_db
from shoestore.services.auth_service import AuthService
from shoestore.services.storefront_service import StorefrontSession


logger = logging.getLogger(__name__)


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Storefront application shell.

    Handles the application lifecycle:
    - Startup (logging, database initialization)
    - Login / guest entry into the catalog
    - Logout back to the login gate
    - Shutdown
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db_manager: Optional[DatabaseManager] = None
    ) -> None:
        self._settings = settings or get_settings()
        self._db_manager = db_manager or get_database_manager()
        self._loader = CatalogLoader(self._db_manager.get_session)
        self._formatter = DisplayFormatter(currency=self._settings.currency_label)
        self._current: Optional[StorefrontSession] = None

    @property
    def current(self) -> Optional[StorefrontSession]:
        """The open storefront session, None at the login gate."""
        return self._current

    def startup(self) -> None:
        """Application startup tasks."""
        configure_logging(self._settings)

        logger.info("=" * 60)
        logger.info(f"Starting {self._settings.app_name}")
        logger.info("=" * 60)

        self._settings.ensure_directories()
        init_db(self._db_manager, self._settings)

        logger.info(f"{self._settings.app_name} ready")

    def shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("Shutting down...")
        if self._current is not None:
            self.logout()
        self._db_manager.dispose()
        logger.info("Shutdown complete")

    # =========================================================================
    # LOGIN GATE
    # =========================================================================

    def login(self, login: str, password: str) -> StorefrontSession:
        """
        Log in and open a storefront session.

        Raises:
            ValidationError: Empty login or password
            AuthenticationError: Wrong credentials or disabled account
            DataAccessError: Database unavailable
        """
        db = self._db_manager.get_session()
        try:
            user = AuthService(db).login(login, password)
        finally:
            db.close()

        return self._open(StorefrontSession(user, self._loader, self._formatter))

    def continue_as_guest(self) -> StorefrontSession:
        """Open a storefront session without logging in."""
        return self._open(StorefrontSession(None, self._loader, self._formatter))

    def logout(self) -> None:
        """Close the current storefront session and return to the gate."""
        if self._current is None:
            return
        self._current.logout()
        self._current = None

    def _open(self, storefront: StorefrontSession) -> StorefrontSession:
        if self._current is not None:
            self.logout()
        self._current = storefront
        logger.info(f"Storefront opened: {storefront.caption}")
        return storefront


# ============================================================================
# ENTRY POINT
# ============================================================================

def main() -> int:
    """Initialize the database and print the catalog as a guest sees it."""
    application = Application()

    try:
        application.startup()
        storefront = application.continue_as_guest()
        storefront.open_catalog()
        for card in storefront.cards():
            print(f"{card.title:<40} {card.final_price:>16}  {card.stock}")
    except AppException as e:
        logger.error(e.message)
        return 1
    finally:
        application.shutdown()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
