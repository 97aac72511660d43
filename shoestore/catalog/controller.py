"""
==============================================================================
Catalog View Controller Module
==============================================================================

Derives the visible part of the catalog from the loaded records and the
current criteria.

Derivation Order:
----------------
1. Search   - case-insensitive substring over name, description,
              manufacturer and article number
2. Filter   - in stock / discounted / not discounted
3. Sort     - by final price or by name, stable

Every criteria change recomputes the visible set from the full set.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from shoestore.catalog.models import (
    CatalogCriteria,
    DisplayRecord,
    FilterMode,
    SortMode,
)
from shoestore.core import exceptions
from shoestore.core.access import Capabilities, capabilities_for
from shoestore.db.models import UserRole


# Module logger
logger = logging.getLogger(__name__)


FILTERS: Dict[FilterMode, Callable[[DisplayRecord], bool]] = {
    FilterMode.IN_STOCK: lambda record: record.stock_quantity > 0,
    FilterMode.DISCOUNTED: lambda record: record.discount > 0,
    FilterMode.NOT_DISCOUNTED: lambda record: record.discount == 0,
}

# sort mode -> (key, descending)
SORTS: Dict[SortMode, Tuple[Callable[[DisplayRecord], object], bool]] = {
    SortMode.PRICE_ASC: (lambda record: record.final_price, False),
    SortMode.PRICE_DESC: (lambda record: record.final_price, True),
    SortMode.NAME_ASC: (lambda record: record.name.casefold(), False),
    SortMode.NAME_DESC: (lambda record: record.name.casefold(), True),
}


def matches_search(record: DisplayRecord, needle: str) -> bool:
    """Check whether any searchable field contains the lowercased needle."""
    fields = (
        record.name,
        record.description,
        record.manufacturer_name,
        record.article_number,
    )
    return any(value is not None and needle in value.casefold() for value in fields)


def apply_criteria(
    full_set: Sequence[DisplayRecord],
    criteria: CatalogCriteria
) -> List[DisplayRecord]:
    """
    Compute the visible records for the given criteria.

    Pure function of its two arguments; full_set is not modified.

    Args:
        full_set: All loaded records in load order
        criteria: Search text, filter and sort to apply

    Returns:
        New list with the matching records in display order
    """
    visible = list(full_set)

    if criteria.search_text.strip():
        needle = criteria.search_text.casefold()
        visible = [record for record in visible if matches_search(record, needle)]

    predicate = FILTERS.get(criteria.filter_mode)
    if predicate is not None:
        visible = [record for record in visible if predicate(record)]

    ordering = SORTS.get(criteria.sort_mode)
    if ordering is not None:
        key, descending = ordering
        visible = sorted(visible, key=key, reverse=descending)

    return visible


class CatalogViewController:
    """
    Holds the loaded catalog and the subset currently shown.

    State is owned by one interaction thread; nothing here locks.

    Attributes:
        _capabilities: Enabled controls for the current session
        _full_set: Loaded records, None until the catalog is loaded
        _criteria: Current criteria
        _visible_set: Records currently shown

    Example:
        >>> controller = CatalogViewController(capabilities_for(UserRole.CUSTOMER))
        >>> controller.load(loader.load_catalog())
        >>> controller.set_filter_mode(FilterMode.DISCOUNTED)
        >>> for record in controller.visible_set:
        ...     print(record.name, record.final_price)
    """

    def __init__(self, capabilities: Optional[Capabilities] = None) -> None:
        """
        Initialize an empty controller.

        Args:
            capabilities: Enabled controls (guest capabilities if None)
        """
        self._capabilities = capabilities or capabilities_for(UserRole.GUEST)
        self._full_set: Optional[Tuple[DisplayRecord, ...]] = None
        self._criteria = CatalogCriteria()
        self._visible_set: List[DisplayRecord] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def is_loaded(self) -> bool:
        return self._full_set is not None

    @property
    def full_set(self) -> List[DisplayRecord]:
        """All loaded records (empty before loading)."""
        return list(self._full_set or ())

    @property
    def criteria(self) -> CatalogCriteria:
        return self._criteria

    @property
    def visible_set(self) -> List[DisplayRecord]:
        """Records currently shown, in display order."""
        return list(self._visible_set)

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self, records: Sequence[DisplayRecord]) -> List[DisplayRecord]:
        """
        Replace the full set and recompute the visible set.

        Args:
            records: Freshly loaded records

        Returns:
            The new visible set
        """
        self._full_set = tuple(records)
        logger.debug(f"Catalog loaded into view: {len(self._full_set)} records")
        return self._recompute()

    def clear(self) -> None:
        """Forget the loaded catalog; criteria are kept."""
        self._full_set = None
        self._visible_set = []

    # =========================================================================
    # CRITERIA
    # =========================================================================

    def apply_criteria(self, criteria: CatalogCriteria) -> List[DisplayRecord]:
        """
        Store new criteria and recompute the visible set.

        Before the catalog is loaded the criteria are only stored.

        Raises:
            AppException: FORBIDDEN if the session may not search or filter
        """
        if criteria != self._criteria and not self._capabilities.search_and_filter:
            raise exceptions.forbidden("Search and filtering are not available")

        self._criteria = criteria
        return self._recompute()

    def set_search_text(self, text: str) -> List[DisplayRecord]:
        return self.apply_criteria(self._criteria.model_copy(update={"search_text": text}))

    def set_filter_mode(self, mode: FilterMode) -> List[DisplayRecord]:
        return self.apply_criteria(self._criteria.model_copy(update={"filter_mode": mode}))

    def set_sort_mode(self, mode: SortMode) -> List[DisplayRecord]:
        return self.apply_criteria(self._criteria.model_copy(update={"sort_mode": mode}))

    def reset_criteria(self) -> List[DisplayRecord]:
        """Return to no search, no filter, no sort."""
        return self.apply_criteria(CatalogCriteria())

    def _recompute(self) -> List[DisplayRecord]:
        if self._full_set is None:
            return []

        self._visible_set = apply_criteria(self._full_set, self._criteria)
        return self.visible_set
