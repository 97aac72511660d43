"""
==============================================================================
Display Formatting Module
==============================================================================

Turns display records into the strings and colors a renderer draws.

Labels and colors live in one mapping table so the rendering layer can
override them without touching the catalog logic.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from shoestore.catalog.models import DisplayRecord


DEFAULT_LABELS: Dict[str, str] = {
    "currency": "руб",
    "discount": "Скидка: {discount}%",
    "in_stock": "На складе: {quantity} {unit}",
    "out_of_stock": "Нет в наличии",
    "in_stock_color": "#4CAF50",
    "out_of_stock_color": "#FF0000",
    "high_discount_color": "#2E8B57",
}


class ProductCard(BaseModel):
    """Strings and colors for one catalog row."""

    model_config = ConfigDict(frozen=True)

    product_id: int
    title: str
    price: str
    final_price: str
    show_original_price: bool
    discount: str
    stock: str
    stock_color: str
    highlight_color: Optional[str] = None
    photo_path: str


class DisplayFormatter:
    """
    Formats DisplayRecords with a label/color table.

    Example:
        >>> formatter = DisplayFormatter()
        >>> formatter.format_price(Decimal("4990"))
        '4 990,00 руб'
    """

    def __init__(
        self,
        labels: Optional[Dict[str, str]] = None,
        currency: Optional[str] = None
    ) -> None:
        """
        Args:
            labels: Overrides merged over DEFAULT_LABELS
            currency: Currency suffix, overrides labels["currency"]
        """
        self._labels = {**DEFAULT_LABELS, **(labels or {})}
        if currency is not None:
            self._labels["currency"] = currency

    def format_price(self, value: Decimal) -> str:
        """Two decimals, space thousands separator, comma decimal mark."""
        number = f"{value:,.2f}".replace(",", " ").replace(".", ",")
        return f"{number} {self._labels['currency']}"

    def format_discount(self, discount: Decimal) -> str:
        # 5.00 -> 5, 12.50 -> 12.5
        text = format(discount.normalize(), "f")
        return self._labels["discount"].format(discount=text)

    def format_stock(self, record: DisplayRecord) -> str:
        if record.is_out_of_stock:
            return self._labels["out_of_stock"]
        return self._labels["in_stock"].format(
            quantity=record.stock_quantity,
            unit=record.unit_name,
        )

    def stock_color(self, record: DisplayRecord) -> str:
        if record.is_out_of_stock:
            return self._labels["out_of_stock_color"]
        return self._labels["in_stock_color"]

    def format(self, record: DisplayRecord) -> ProductCard:
        """Build the card a renderer shows for one record."""
        return ProductCard(
            product_id=record.id,
            title=f"{record.category_name} | {record.name}",
            price=self.format_price(record.price),
            final_price=self.format_price(record.final_price),
            show_original_price=record.has_discount,
            discount=self.format_discount(record.discount),
            stock=self.format_stock(record),
            stock_color=self.stock_color(record),
            highlight_color=(
                self._labels["high_discount_color"] if record.has_high_discount else None
            ),
            photo_path=record.photo_path,
        )
