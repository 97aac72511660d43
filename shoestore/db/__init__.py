"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM models.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
├── models.py     - SQLAlchemy ORM model classes
└── init_db.py    - DatabaseInitializer for setup and demo data

Usage:
------
    from shoestore.db import DatabaseManager, Product, init_db

    db_manager = DatabaseManager()
    with db_manager.session_scope() as session:
        products = session.query(Product).all()

==============================================================================
"""

from .database import Base, DatabaseManager, get_database_manager
from .models import (
    Category,
    Manufacturer,
    Product,
    Supplier,
    UnitOfMeasure,
    User,
    UserRole,
)
from .init_db import DatabaseInitializer, init_db

__all__ = [
    # Database management
    "Base",
    "DatabaseManager",
    "get_database_manager",
    # Models
    "Category",
    "Manufacturer",
    "Product",
    "Supplier",
    "UnitOfMeasure",
    "User",
    # Enums
    "UserRole",
    # Initialization
    "DatabaseInitializer",
    "init_db",
]
