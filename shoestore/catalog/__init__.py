"""
==============================================================================
Catalog Package - Product Presentation
==============================================================================

Loading the product catalog and deriving what the catalog view shows.

Classes:
--------
- ProductRecord / DisplayRecord: product rows and their derived fields
- CatalogCriteria, FilterMode, SortMode: view criteria
- CatalogLoader: reads active products from the database
- CatalogViewController: search, filter and sort over the loaded records
- DisplayFormatter: strings and colors for the renderer

==============================================================================
"""

from .models import (
    CatalogCriteria,
    DisplayRecord,
    FilterMode,
    ProductRecord,
    SortMode,
)
from .loader import CatalogLoader
from .controller import CatalogViewController, apply_criteria
from .formatting import DisplayFormatter, ProductCard

__all__ = [
    "CatalogCriteria",
    "DisplayRecord",
    "FilterMode",
    "ProductRecord",
    "SortMode",
    "CatalogLoader",
    "CatalogViewController",
    "apply_criteria",
    "DisplayFormatter",
    "ProductCard",
]
