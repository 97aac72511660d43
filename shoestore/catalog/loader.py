"""
==============================================================================
Catalog Loader Module
==============================================================================

Reads active products from the database and converts them to display
records.

Loading Flow:
------------
    ┌──────────────────┐
    │  Open session    │
    └────────┬─────────┘
             │
    ┌────────▼─────────┐     ┌───────────────────┐
    │ Query products   │────▶│ SQLAlchemyError   │ → CATALOG_LOAD_FAILED
    │ (active, joined) │     └───────────────────┘
    └────────┬─────────┘
             │
    ┌────────▼─────────┐     ┌───────────────────┐
    │ Map each row     │────▶│ Missing relation  │ → CATALOG_INTEGRITY
    │ to DisplayRecord │     │ or invalid value  │
    └────────┬─────────┘     └───────────────────┘
             │
    ┌────────▼─────────┐
    │ Close session    │
    └──────────────────┘

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from shoestore.catalog.models import DisplayRecord, ProductRecord
from shoestore.core import exceptions
from shoestore.db.database import get_database_manager
from shoestore.db.models import Product


# Module logger
logger = logging.getLogger(__name__)


RELATIONS = ("category", "manufacturer", "supplier", "unit")


class CatalogLoader:
    """
    Loads the catalog once per catalog-open.

    Attributes:
        _session_factory: Callable returning a new SQLAlchemy session

    Example:
        >>> loader = CatalogLoader(db_manager.get_session)
        >>> records = loader.load_catalog()
        >>> print(records[0].final_price)
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None) -> None:
        """
        Initialize the loader.

        Args:
            session_factory: Session factory (shared DatabaseManager if None)
        """
        self._session_factory = session_factory or get_database_manager().get_session

    def load_catalog(self) -> List[DisplayRecord]:
        """
        Load all active products as display records.

        Returns:
            Display records ordered by product id

        Raises:
            DataAccessError: CATALOG_LOAD_FAILED on database errors
            DataAccessError: CATALOG_INTEGRITY on rows that cannot be mapped
        """
        try:
            session = self._session_factory()
        except SQLAlchemyError as e:
            logger.error(f"Catalog load failed: cannot open session: {e}")
            raise exceptions.catalog_load_failed(e) from e

        try:
            products = (
                session.query(Product)
                .options(*(joinedload(getattr(Product, name)) for name in RELATIONS))
                .filter(Product.is_active.is_(True))
                .order_by(Product.id)
                .all()
            )
            records = [self.to_display_record(product) for product in products]
        except SQLAlchemyError as e:
            logger.error(f"Catalog load failed: {e}")
            raise exceptions.catalog_load_failed(e) from e
        finally:
            session.close()

        logger.info(f"Loaded {len(records)} products")
        return records

    @staticmethod
    def to_product_record(product: Product) -> ProductRecord:
        """
        Flatten an ORM product into a ProductRecord.

        Raises:
            DataAccessError: CATALOG_INTEGRITY if a relation is missing or a
                value is out of range
        """
        for name in RELATIONS:
            if getattr(product, name) is None:
                logger.error(f"Product {product.id} has no {name}")
                raise exceptions.catalog_integrity(product.id, f"missing {name}")

        try:
            return ProductRecord(
                id=product.id,
                article_number=product.article_number,
                name=product.name,
                description=product.description,
                category_name=product.category.name,
                manufacturer_name=product.manufacturer.name,
                supplier_name=product.supplier.name,
                unit_name=product.unit.name,
                price=product.price,
                discount=product.current_discount,
                stock_quantity=product.stock_quantity,
                photo=product.photo,
            )
        except SchemaValidationError as e:
            logger.error(f"Product {product.id} failed validation: {e}")
            raise exceptions.catalog_integrity(
                product.id, f"{e.error_count()} invalid field(s)"
            ) from e

    @classmethod
    def to_display_record(cls, product: Product) -> DisplayRecord:
        """Map an ORM product straight to a DisplayRecord."""
        return DisplayRecord.from_record(cls.to_product_record(product))
