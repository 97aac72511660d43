"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM models for the shoe store catalog.

This module defines:
- UserRole: Enum for access levels
- User: Account model for the login gate
- Category, Manufacturer, Supplier, UnitOfMeasure: Product reference data
- Product: Catalog item

Database Schema:
---------------

    ┌──────────────────────────────────────────────┐
    │                    users                     │
    ├──────────────────────────────────────────────┤
    │ id (INTEGER, PK)                             │
    │ login (VARCHAR, UNIQUE, NOT NULL)            │
    │ password_hash (VARCHAR, NOT NULL)            │
    │ full_name (VARCHAR, NOT NULL)                │
    │ role (ENUM: customer, manager, admin)        │
    │ is_active (BOOLEAN, DEFAULT true)            │
    │ created_at (DATETIME, DEFAULT now)           │
    └──────────────────────────────────────────────┘

    ┌────────────┐ ┌───────────────┐ ┌───────────┐ ┌──────────────────┐
    │ categories │ │ manufacturers │ │ suppliers │ │ units_of_measure │
    └─────┬──────┘ └───────┬───────┘ └─────┬─────┘ └────────┬─────────┘
          │ 1:N            │ 1:N           │ 1:N            │ 1:N
          ▼                ▼               ▼                ▼
    ┌──────────────────────────────────────────────┐
    │                   products                   │
    ├──────────────────────────────────────────────┤
    │ id (INTEGER, PK)                             │
    │ article_number (VARCHAR, UNIQUE, NULLABLE)   │
    │ name (VARCHAR, NOT NULL)                     │
    │ description (TEXT, NULLABLE)                 │
    │ category_id / manufacturer_id /              │
    │ supplier_id / unit_id (FK)                   │
    │ price (NUMERIC(10,2), NOT NULL)              │
    │ current_discount (NUMERIC(5,2), DEFAULT 0)   │
    │ stock_quantity (INTEGER, DEFAULT 0)          │
    │ photo (VARCHAR, NULLABLE)                    │
    │ is_active (BOOLEAN, DEFAULT true)            │
    │ created_at (DATETIME, DEFAULT now)           │
    └──────────────────────────────────────────────┘

=============================================================================
"""

from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship, Mapped

from shoestore.db.database import Base


# =============================================================================
# ENUMS
# =============================================================================

class UserRole(str, enum.Enum):
    """
    Access level enumeration.

    - GUEST: Not logged in, browse only
    - CUSTOMER: Authenticated customer, may search and filter
    - MANAGER: Customer capabilities plus order management
    - ADMIN: Full access including adding products

    GUEST is never stored in the database; it stands for the absence of a
    logged-in user.
    """

    GUEST = "guest"
    CUSTOMER = "customer"
    MANAGER = "manager"
    ADMIN = "admin"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value

    @property
    def display_name(self) -> str:
        """Return human-readable role label."""
        return {
            "guest": "Гость",
            "customer": "Авторизированный клиент",
            "manager": "Менеджер",
            "admin": "Администратор",
        }[self.value]

    @classmethod
    def from_label(cls, label: Optional[str]) -> "UserRole":
        """
        Resolve a role from its value or a legacy text label.

        Accepts the enum values, the display labels and the alternative
        spelling 'Авторизованный клиент'. Unknown or empty labels resolve to
        GUEST.
        """
        if not label:
            return cls.GUEST

        normalized = label.strip().casefold()
        for role in cls:
            if normalized in (role.value, role.display_name.casefold()):
                return role

        if normalized == "авторизованный клиент":
            return cls.CUSTOMER

        return cls.GUEST


# =============================================================================
# USER MODEL
# =============================================================================

class User(Base):
    """
    User account model.

    Attributes:
        id: Unique identifier
        login: Unique login name
        password_hash: Bcrypt hashed password
        full_name: Name shown in the catalog header
        role: Access level (customer/manager/admin)
        is_active: Account status
        created_at: Account creation timestamp

    Example:
        >>> user = User(
        ...     login="manager",
        ...     password_hash=hash_password("secret"),
        ...     full_name="Иванов Иван",
        ...     role=UserRole.MANAGER
        ... )
        >>> session.add(user)
        >>> session.commit()
    """

    __tablename__ = "users"

    # Enum columns store member names; a guest is never a stored account
    __table_args__ = (
        CheckConstraint("role != 'GUEST'", name="ck_users_role_not_guest"),
    )

    # =========================================================================
    # COLUMNS
    # =========================================================================

    id: int = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Unique user identifier"
    )

    login: str = Column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        doc="Unique login name"
    )

    password_hash: str = Column(
        String(255),
        nullable=False,
        doc="Bcrypt hashed password"
    )

    full_name: str = Column(
        String(150),
        nullable=False,
        doc="Display name"
    )

    role: UserRole = Column(
        Enum(UserRole),
        default=UserRole.CUSTOMER,
        nullable=False,
        doc="Access level"
    )

    is_active: bool = Column(
        Boolean,
        default=True,
        nullable=False,
        doc="Account status"
    )

    created_at: datetime = Column(
        DateTime,
        default=func.now(),
        nullable=False,
        doc="Account creation timestamp"
    )

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"User(id={self.id!r}, "
            f"login={self.login!r}, "
            f"role={self.role.value!r}, "
            f"is_active={self.is_active})"
        )

    def __str__(self) -> str:
        """User-friendly string representation."""
        return f"{self.full_name} ({self.role.display_name})"


# =============================================================================
# REFERENCE DATA MODELS
# =============================================================================

class Category(Base):
    """Product category (e.g. men's shoes, women's shoes)."""

    __tablename__ = "categories"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(100), unique=True, nullable=False)

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="category"
    )

    def __repr__(self) -> str:
        return f"Category(id={self.id!r}, name={self.name!r})"


class Manufacturer(Base):
    """Product manufacturer."""

    __tablename__ = "manufacturers"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(100), unique=True, nullable=False)

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="manufacturer"
    )

    def __repr__(self) -> str:
        return f"Manufacturer(id={self.id!r}, name={self.name!r})"


class Supplier(Base):
    """Product supplier."""

    __tablename__ = "suppliers"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(100), unique=True, nullable=False)

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="supplier"
    )

    def __repr__(self) -> str:
        return f"Supplier(id={self.id!r}, name={self.name!r})"


class UnitOfMeasure(Base):
    """Unit a product is sold in (e.g. pair)."""

    __tablename__ = "units_of_measure"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(30), unique=True, nullable=False)

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="unit"
    )

    def __repr__(self) -> str:
        return f"UnitOfMeasure(id={self.id!r}, name={self.name!r})"


# =============================================================================
# PRODUCT MODEL
# =============================================================================

class Product(Base):
    """
    Catalog product model.

    Attributes:
        id: Unique identifier
        article_number: Vendor article code
        name: Product display name
        description: Free-text description
        price: Unit price before discount
        current_discount: Discount percentage, 0-100
        stock_quantity: Units in stock
        photo: Image file name relative to the resources directory
        is_active: Whether the product is shown in the catalog

    Relationships:
        category, manufacturer, supplier, unit: Reference data rows

    Example:
        >>> product = Product(
        ...     article_number="A112T4",
        ...     name="Ботинки",
        ...     price=Decimal("4990.00"),
        ...     current_discount=Decimal("3"),
        ...     stock_quantity=6,
        ...     category=category,
        ...     manufacturer=manufacturer,
        ...     supplier=supplier,
        ...     unit=unit
        ... )
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint(
            "current_discount >= 0 AND current_discount <= 100",
            name="ck_products_discount_range"
        ),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
    )

    # =========================================================================
    # COLUMNS
    # =========================================================================

    id: int = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Unique product identifier"
    )

    article_number: Optional[str] = Column(
        String(20),
        unique=True,
        nullable=True,
        index=True,
        doc="Vendor article code"
    )

    name: str = Column(
        String(200),
        nullable=False,
        doc="Product name"
    )

    description: Optional[str] = Column(
        Text,
        nullable=True,
        doc="Product description"
    )

    category_id: int = Column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True
    )

    manufacturer_id: int = Column(
        Integer,
        ForeignKey("manufacturers.id"),
        nullable=False,
        index=True
    )

    supplier_id: int = Column(
        Integer,
        ForeignKey("suppliers.id"),
        nullable=False,
        index=True
    )

    unit_id: int = Column(
        Integer,
        ForeignKey("units_of_measure.id"),
        nullable=False
    )

    price: Decimal = Column(
        Numeric(10, 2),
        nullable=False,
        doc="Unit price before discount"
    )

    current_discount: Decimal = Column(
        Numeric(5, 2),
        default=Decimal("0"),
        nullable=False,
        doc="Discount percentage"
    )

    stock_quantity: int = Column(
        Integer,
        default=0,
        nullable=False,
        doc="Units in stock"
    )

    photo: Optional[str] = Column(
        String(255),
        nullable=True,
        doc="Image file name"
    )

    is_active: bool = Column(
        Boolean,
        default=True,
        nullable=False,
        index=True,
        doc="Shown in catalog"
    )

    created_at: datetime = Column(
        DateTime,
        default=func.now(),
        nullable=False
    )

    # =========================================================================
    # RELATIONSHIPS
    # =========================================================================

    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="products"
    )

    manufacturer: Mapped["Manufacturer"] = relationship(
        "Manufacturer",
        back_populates="products"
    )

    supplier: Mapped["Supplier"] = relationship(
        "Supplier",
        back_populates="products"
    )

    unit: Mapped["UnitOfMeasure"] = relationship(
        "UnitOfMeasure",
        back_populates="products"
    )

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"Product(id={self.id!r}, "
            f"article_number={self.article_number!r}, "
            f"name={self.name!r}, "
            f"is_active={self.is_active})"
        )
