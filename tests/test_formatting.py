"""
==============================================================================
Display Formatting Tests
==============================================================================

Tests for price, discount and stock labels and product cards.

==============================================================================
"""

import pytest
from decimal import Decimal

from shoestore.catalog.formatting import DisplayFormatter


class TestValues:
    """Tests for individual value formatting."""

    @pytest.mark.parametrize("value,expected", [
        (Decimal("4990"), "4 990,00 руб"),
        (Decimal("64.0"), "64,00 руб"),
        (Decimal("0"), "0,00 руб"),
        (Decimal("1234567.8"), "1 234 567,80 руб"),
    ])
    def test_format_price(self, value, expected):
        """Test two decimals with space grouping and comma decimal mark."""
        assert DisplayFormatter().format_price(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (Decimal("5.00"), "Скидка: 5%"),
        (Decimal("12.50"), "Скидка: 12.5%"),
        (Decimal("20"), "Скидка: 20%"),
        (Decimal("0"), "Скидка: 0%"),
    ])
    def test_format_discount(self, value, expected):
        """Test trailing zeros are dropped from the percentage."""
        assert DisplayFormatter().format_discount(value) == expected

    def test_currency_override(self):
        """Test the currency suffix can be replaced."""
        assert DisplayFormatter(currency="₽").format_price(Decimal("10")) == "10,00 ₽"


class TestCards:
    """Tests for whole product cards."""

    def test_discounted_out_of_stock(self, runner_and_trail):
        """Test the Trail card shows both prices, highlight and out of stock."""
        card = DisplayFormatter().format(runner_and_trail[1])

        assert card.product_id == 2
        assert card.title == "Мужская обувь | Trail"
        assert card.price == "80,00 руб"
        assert card.final_price == "64,00 руб"
        assert card.show_original_price is True
        assert card.discount == "Скидка: 20%"
        assert card.stock == "Нет в наличии"
        assert card.stock_color == "#FF0000"
        assert card.highlight_color == "#2E8B57"
        assert card.photo_path == "/Resources/picture.png"

    def test_regular_in_stock(self, runner_and_trail):
        """Test the Runner card has a single price and a stock count."""
        card = DisplayFormatter().format(runner_and_trail[0])

        assert card.final_price == "100,00 руб"
        assert card.show_original_price is False
        assert card.stock == "На складе: 5 шт."
        assert card.stock_color == "#4CAF50"
        assert card.highlight_color is None

    def test_small_discount_not_highlighted(self, record_factory):
        """Test discounts up to 15% are not highlighted."""
        card = DisplayFormatter().format(record_factory(1, "Boot", 100, discount=15))
        assert card.show_original_price is True
        assert card.highlight_color is None

    def test_label_overrides(self, runner_and_trail):
        """Test labels and colors come from the mapping table."""
        formatter = DisplayFormatter(labels={
            "out_of_stock": "Sold out",
            "out_of_stock_color": "gray",
            "discount": "-{discount}%",
        })
        card = formatter.format(runner_and_trail[1])

        assert card.stock == "Sold out"
        assert card.stock_color == "gray"
        assert card.discount == "-20%"
        assert card.price == "80,00 руб"
