"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for catalog records and view criteria.

- ProductRecord: flat product row with related names resolved
- DisplayRecord: ProductRecord plus derived price/discount/stock fields
- FilterMode, SortMode, CatalogCriteria: what the catalog view shows

All records are frozen; changing criteria produces new sequences, never
modified records.

==============================================================================
"""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


PHOTO_DIRECTORY = "/Resources/"
PLACEHOLDER_PHOTO = "picture.png"

HIGH_DISCOUNT_THRESHOLD = Decimal("15")


class ProductRecord(BaseModel):
    """
    Product as read from the database, with reference names resolved.

    Attributes:
        id: Product identifier
        article_number: Vendor article code, if recorded
        name: Product name
        description: Free-text description
        category_name: Resolved category
        manufacturer_name: Resolved manufacturer
        supplier_name: Resolved supplier
        unit_name: Resolved unit of measure
        price: Unit price before discount
        discount: Discount percentage, 0-100
        stock_quantity: Units in stock
        photo: Image file name
    """

    model_config = ConfigDict(frozen=True)

    id: int
    article_number: Optional[str] = None
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    category_name: str = Field(..., min_length=1)
    manufacturer_name: str = Field(..., min_length=1)
    supplier_name: str = Field(..., min_length=1)
    unit_name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    stock_quantity: int = Field(default=0, ge=0)
    photo: Optional[str] = None


class DisplayRecord(ProductRecord):
    """
    Product record with the values the catalog view derives from it.

    Example:
        >>> record = DisplayRecord(
        ...     id=1, name="Trail", category_name="Мужская обувь",
        ...     manufacturer_name="Kari", supplier_name="Kari",
        ...     unit_name="шт.", price=Decimal("80"), discount=Decimal("20"),
        ...     stock_quantity=0
        ... )
        >>> record.final_price
        Decimal('64.0')
        >>> record.is_out_of_stock
        True
    """

    @computed_field
    @property
    def final_price(self) -> Decimal:
        """Price after discount; equals price when there is no discount."""
        if self.discount > 0:
            return self.price * (1 - self.discount / 100)
        return self.price

    @computed_field
    @property
    def has_discount(self) -> bool:
        return self.discount > 0

    @computed_field
    @property
    def has_high_discount(self) -> bool:
        return self.discount > HIGH_DISCOUNT_THRESHOLD

    @computed_field
    @property
    def is_out_of_stock(self) -> bool:
        return self.stock_quantity == 0

    @computed_field
    @property
    def photo_path(self) -> str:
        """Resource path of the photo, or of the placeholder image."""
        if not self.photo:
            return PHOTO_DIRECTORY + PLACEHOLDER_PHOTO
        return PHOTO_DIRECTORY + self.photo

    @classmethod
    def from_record(cls, record: ProductRecord) -> "DisplayRecord":
        """Create a display record from a raw product record."""
        return cls(**record.model_dump())


class FilterMode(str, enum.Enum):
    """Catalog filter selection."""

    NONE = "none"
    IN_STOCK = "in_stock"
    DISCOUNTED = "discounted"
    NOT_DISCOUNTED = "not_discounted"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Return human-readable filter label."""
        return {
            "none": "Все товары",
            "in_stock": "Товары в наличии",
            "discounted": "Товары со скидкой",
            "not_discounted": "Товары без скидки",
        }[self.value]


class SortMode(str, enum.Enum):
    """Catalog sort selection."""

    NONE = "none"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Return human-readable sort label."""
        return {
            "none": "Без сортировки",
            "price_asc": "По цене (возрастание)",
            "price_desc": "По цене (убывание)",
            "name_asc": "По наименованию (А-Я)",
            "name_desc": "По наименованию (Я-А)",
        }[self.value]


class CatalogCriteria(BaseModel):
    """Search text, filter and sort currently applied to the catalog."""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    filter_mode: FilterMode = FilterMode.NONE
    sort_mode: SortMode = SortMode.NONE
