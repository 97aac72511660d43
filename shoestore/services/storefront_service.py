"""
==============================================================================
Storefront Service Module
==============================================================================

One catalog session: who is looking, what is loaded, what is shown.

Session Lifecycle:
-----------------
    login / guest ──▶ open_catalog() ──▶ criteria changes ──▶ logout()
                           │  ▲
                           │  │ manual retry
                           ▼  │
                      DataAccessError
                  (previous catalog kept)

==============================================================================
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import List, Optional

from shoestore.catalog.controller import CatalogViewController
from shoestore.catalog.formatting import DisplayFormatter, ProductCard
from shoestore.catalog.loader import CatalogLoader
from shoestore.catalog.models import DisplayRecord
from shoestore.core.access import AccessLevelPresenter, Capabilities
from shoestore.core.exceptions import DataAccessError
from shoestore.schemas.auth import UserSession


# Module logger
logger = logging.getLogger(__name__)


class StorefrontSession:
    """
    Catalog view state for one logged-in user or guest.

    Attributes:
        _user: Session of the logged-in user, None for a guest
        _loader: CatalogLoader used by open_catalog
        _presenter: Access level presenter for the user
        _controller: Catalog view controller
        _formatter: Formatter for product cards

    Example:
        >>> storefront = StorefrontSession(None, CatalogLoader(db_manager.get_session))
        >>> storefront.open_catalog()
        >>> cards = storefront.cards()
    """

    def __init__(
        self,
        user: Optional[UserSession],
        loader: CatalogLoader,
        formatter: Optional[DisplayFormatter] = None
    ) -> None:
        self._user = user
        self._loader = loader
        self._presenter = AccessLevelPresenter(user)
        self._controller = CatalogViewController(self._presenter.capabilities)
        self._formatter = formatter or DisplayFormatter()
        self._closed = False

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def user(self) -> Optional[UserSession]:
        return self._user

    @property
    def is_guest(self) -> bool:
        return self._user is None

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def caption(self) -> str:
        return self._presenter.caption

    @property
    def capabilities(self) -> Capabilities:
        return self._presenter.capabilities

    @property
    def controller(self) -> CatalogViewController:
        return self._controller

    # =========================================================================
    # CATALOG LOADING
    # =========================================================================

    def open_catalog(self) -> List[DisplayRecord]:
        """
        Load the catalog and show it with the current criteria.

        On failure the previously shown catalog stays as it was and the
        error is re-raised for the caller to present.

        Raises:
            DataAccessError: If the catalog cannot be loaded
        """
        self._ensure_open()

        try:
            records = self._loader.load_catalog()
        except DataAccessError as e:
            logger.error(f"Catalog not refreshed for {self.caption}: {e.code}")
            raise

        return self._controller.load(records)

    def open_catalog_in_background(self, executor: Executor) -> Future:
        """
        Start loading on a worker.

        The future resolves to the loaded records; pass them to
        apply_loaded() on the interaction thread.
        """
        self._ensure_open()
        return executor.submit(self._loader.load_catalog)

    def apply_loaded(self, records: List[DisplayRecord]) -> List[DisplayRecord]:
        """Show records produced by open_catalog_in_background()."""
        self._ensure_open()
        return self._controller.load(records)

    # =========================================================================
    # PRESENTATION
    # =========================================================================

    def cards(self) -> List[ProductCard]:
        """Formatted cards for the records currently shown."""
        return [self._formatter.format(record) for record in self._controller.visible_set]

    def logout(self) -> None:
        """Discard the catalog; the session cannot be used afterwards."""
        self._controller.clear()
        self._closed = True
        logger.info(f"Logged out: {self.caption}")

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Storefront session is closed")
