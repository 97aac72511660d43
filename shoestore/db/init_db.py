"""
==============================================================================
Database Initialization Module
==============================================================================

Database initialization and setup utilities.

This module implements:
- DatabaseInitializer: Class for database setup operations
- Table creation
- Default administrator creation
- Demo data seeding (reference data, one user per role, products)

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. Create default administrator if no administrator exists
3. Seed demo data when enabled in settings
4. Verify the connection

Usage:
------
    from shoestore.db import init_db, DatabaseInitializer

    init_db()

    initializer = DatabaseInitializer(db_manager)
    initializer.create_tables()
    initializer.seed_demo_data()

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shoestore.config import Settings, get_settings
from shoestore.db.database import DatabaseManager, get_database_manager
from shoestore.db.models import (
    Category,
    Manufacturer,
    Product,
    Supplier,
    UnitOfMeasure,
    User,
    UserRole,
)
from shoestore.core.security import get_security_manager


# Module logger
logger = logging.getLogger(__name__)


# login, password, full name, role label as kept in the legacy user list
DEMO_USERS = [
    ("manager", "manager123", "Степанов Михаил Артёмович", "Менеджер"),
    ("client", "client123", "Никифорова Весения Николаевна", "Авторизованный клиент"),
]

# article, name, description, category, manufacturer, supplier,
# price, discount, stock, photo, active
DEMO_PRODUCTS = [
    ("A112T4", "Ботинки", "Женские ботинки демисезонные kari",
     "Женская обувь", "Kari", "Kari", "4990.00", "3", 6, "1.jpg", True),
    ("F635R4", "Ботинки", "Ботинки Marco Tozzi женские демисезонные, размер 39, цвет бежевый",
     "Женская обувь", "Marco Tozzi", "Обувь для вас", "3244.00", "2", 13, "2.jpg", True),
    ("H782T5", "Туфли", "Туфли kari мужские классика MYZ21AW-450A, размер 43, цвет: черный",
     "Мужская обувь", "Kari", "Kari", "4499.00", "4", 5, "3.jpg", True),
    ("G783F5", "Ботинки", "Мужские ботинки Рос-Обувь кожаные с натуральным мехом",
     "Мужская обувь", "Рос", "Kari", "5900.00", "2", 8, "4.jpg", True),
    ("J384T6", "Ботинки", "B3430/14 Полуботинки мужские Rieker",
     "Мужская обувь", "Rieker", "Обувь для вас", "3800.00", "2", 16, "5.jpg", True),
    ("D572U8", "Кроссовки", "129615-4 Кроссовки мужские",
     "Мужская обувь", "Рос", "Обувь для вас", "4100.00", "3", 6, "6.jpg", True),
    ("F572H7", "Туфли", "Туфли Marco Tozzi женские летние, размер 39, цвет черный",
     "Женская обувь", "Marco Tozzi", "Kari", "2700.00", "2", 14, None, True),
    ("D329H3", "Полуботинки", "Полуботинки Alessio Nesca женские 3-30797-47, размер 37, цвет: бордовый",
     "Женская обувь", "Alessio Nesca", "Обувь для вас", "1890.00", "4", 4, None, True),
    ("B320R5", "Туфли", "Туфли Rieker женские демисезонные, размер 41, цвет коричневый",
     "Женская обувь", "Rieker", "Kari", "4300.00", "2", 6, None, True),
    ("G432E4", "Туфли", "Туфли kari женские TR-YR-413017, размер 37, цвет: черный",
     "Женская обувь", "Kari", "Kari", "2800.00", "3", 15, None, True),
    ("S213E3", "Полуботинки", "407700/01-01 Полуботинки мужские CROSBY",
     "Мужская обувь", "CROSBY", "Обувь для вас", "2156.00", "3", 6, None, True),
    ("E482R4", "Полуботинки", "Полуботинки kari женские MYZ20S-149, размер 41, цвет: черный",
     "Женская обувь", "Kari", "Kari", "1800.00", "2", 14, None, True),
    ("S634B5", "Кеды", "Кеды Caprice мужские демисезонные, размер 42, цвет черный",
     "Мужская обувь", "Caprice", "Обувь для вас", "5500.00", "3", 0, None, True),
    ("K345R4", "Полуботинки", "407700/01-02 Полуботинки мужские CROSBY",
     "Мужская обувь", "CROSBY", "Обувь для вас", "2100.00", "2", 3, None, True),
    ("O754F4", "Туфли", "Туфли женские демисезонные Rieker артикул 55073-68/37",
     "Женская обувь", "Rieker", "Обувь для вас", "5400.00", "4", 18, None, True),
    ("G531F4", "Ботинки", "Ботинки женские зимние ROMER арт. 893167-01 Черный",
     "Женская обувь", "Kari", "Kari", "6600.00", "12", 9, None, True),
    ("J542F5", "Тапочки", "Тапочки мужские Арт.70701-55-67син р.41",
     "Мужская обувь", "Kari", "Kari", "500.00", "13", 0, None, True),
    ("B431R5", "Ботинки", "Мужские кожаные ботинки/мужские ботинки",
     "Мужская обувь", "Alessio Nesca", "Обувь для вас", "2700.00", "2", 5, None, True),
    ("P764G4", "Туфли", "Туфли женские, ARGO, размер 38",
     "Женская обувь", "CROSBY", "Kari", "6800.00", "15", 15, None, True),
    ("C436G5", "Ботинки", "Ботинки женские, ARGO, размер 40",
     "Женская обувь", "Alessio Nesca", "Kari", "10200.00", "15", 9, None, True),
    ("F427R5", "Ботинки", "Ботинки на молнии с декоративной пряжкой FRAU",
     "Женская обувь", "Rieker", "Обувь для вас", "11800.00", "15", 11, None, True),
    ("N457T5", "Полуботинки", "Полуботинки Ботинки черные зимние, мех",
     "Женская обувь", "CROSBY", "Kari", "4600.00", "3", 13, None, True),
    ("D364R4", "Туфли", "Туфли Luiza Belly женские Kate-lazo черные из натуральной замши",
     "Женская обувь", "Kari", "Kari", "12400.00", "16", 5, None, True),
    ("S326R5", "Тапочки", "Мужские кожаные тапочки \"Профиль С.Дали\"",
     "Мужская обувь", "CROSBY", "Обувь для вас", "9900.00", "17", 15, None, True),
    ("L754R4", "Полуботинки", "Полуботинки kari женские WB2020SS-26, размер 38, цвет: черный",
     "Женская обувь", "Kari", "Kari", "1700.00", "2", 7, None, False),
]


class DatabaseInitializer:
    """
    Database initialization manager.

    Handles creating tables, setting up the default administrator and
    seeding demo data for development.

    Attributes:
        _db_manager: DatabaseManager instance
        _security: SecurityManager for password hashing
        _settings: Application settings

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        settings: Optional[Settings] = None
    ) -> None:
        """
        Initialize the database initializer.

        Args:
            db_manager: Optional DatabaseManager instance (shared one if None)
            settings: Optional settings (global settings if None)
        """
        self._db_manager = db_manager or get_database_manager()
        self._security = get_security_manager()
        self._settings = settings or get_settings()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables from ORM models."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()

    def drop_tables(self) -> None:
        """
        Drop all database tables.

        WARNING: This will delete all data.
        """
        logger.warning("Dropping all database tables...")
        self._db_manager.drop_tables()

    # =========================================================================
    # ADMIN USER OPERATIONS
    # =========================================================================

    def create_default_admin(self) -> Optional[User]:
        """
        Create the default administrator if none exists.

        Credentials come from DEFAULT_ADMIN_LOGIN / DEFAULT_ADMIN_PASSWORD.

        Returns:
            Created User object, or None if an administrator already exists
        """
        session = self._db_manager.get_session()

        try:
            existing_admin = session.query(User).filter(
                User.role == UserRole.ADMIN
            ).first()

            if existing_admin:
                logger.info(f"Administrator already exists: {existing_admin.login}")
                return None

            admin_user = User(
                login=self._settings.default_admin_login,
                password_hash=self._security.hash_password(
                    self._settings.default_admin_password
                ),
                full_name=self._settings.default_admin_full_name,
                role=UserRole.ADMIN,
                is_active=True
            )

            session.add(admin_user)
            session.commit()
            session.refresh(admin_user)

            logger.info(f"Default administrator created: {admin_user.login}")
            logger.warning("Please change the default administrator password immediately!")

            return admin_user

        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Failed to create default administrator: {e}")
            raise
        finally:
            session.close()

    # =========================================================================
    # DEMO DATA
    # =========================================================================

    def seed_demo_data(self) -> int:
        """
        Seed reference data, demo users and products.

        Existing rows (matched by login or article number) are left alone,
        so seeding twice is harmless.

        Returns:
            Number of products added

        Raises:
            RuntimeError: When called in production
            ValueError: If a demo user carries an unknown role label
        """
        if self._settings.is_production:
            logger.error("Cannot seed demo data in production!")
            raise RuntimeError("Demo data seeding not allowed in production")

        session = self._db_manager.get_session()

        try:
            logger.info("Seeding demo data...")

            for login, password, full_name, role_label in DEMO_USERS:
                if session.query(User).filter(User.login == login).first():
                    continue
                session.add(User(
                    login=login,
                    password_hash=self._security.hash_password(password),
                    full_name=full_name,
                    role=self.stored_role(role_label),
                    is_active=True
                ))
                logger.info(f"Created demo user: {login}")

            categories: Dict[str, Category] = {}
            manufacturers: Dict[str, Manufacturer] = {}
            suppliers: Dict[str, Supplier] = {}
            units: Dict[str, UnitOfMeasure] = {}
            unit = self._get_or_create(session, UnitOfMeasure, "шт.", units)

            added = 0
            for (article, name, description, category, manufacturer, supplier,
                 price, discount, stock, photo, active) in DEMO_PRODUCTS:
                exists = session.query(Product).filter(
                    Product.article_number == article
                ).first()
                if exists:
                    continue

                session.add(Product(
                    article_number=article,
                    name=name,
                    description=description,
                    category=self._get_or_create(session, Category, category, categories),
                    manufacturer=self._get_or_create(
                        session, Manufacturer, manufacturer, manufacturers
                    ),
                    supplier=self._get_or_create(session, Supplier, supplier, suppliers),
                    unit=unit,
                    price=Decimal(price),
                    current_discount=Decimal(discount),
                    stock_quantity=stock,
                    photo=photo,
                    is_active=active
                ))
                added += 1

            session.commit()
            logger.info(f"Demo data seeded: {added} products added")
            return added

        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Failed to seed demo data: {e}")
            raise
        finally:
            session.close()

    @staticmethod
    def stored_role(label: str) -> UserRole:
        """
        Parse a legacy role label into a role an account can hold.

        Raises:
            ValueError: If the label is unknown or names the guest role
        """
        role = UserRole.from_label(label)
        if role == UserRole.GUEST:
            raise ValueError(f"Not an account role: {label!r}")
        return role

    @staticmethod
    def _get_or_create(session: Session, model: Type, name: str, cache: Dict):
        """Find a reference row by name, creating it if missing."""
        if name in cache:
            return cache[name]

        row = session.query(model).filter(model.name == name).first()
        if row is None:
            row = model(name=name)
            session.add(row)

        cache[name] = row
        return row

    # =========================================================================
    # INITIALIZATION METHODS
    # =========================================================================

    def initialize(self) -> None:
        """
        Perform full database initialization.

        Creates tables, the default administrator and, when enabled,
        the demo data.
        """
        logger.info("=" * 60)
        logger.info("Initializing database...")
        logger.info("=" * 60)

        self.create_tables()
        self.create_default_admin()

        if self._settings.seed_demo_data:
            self.seed_demo_data()

        if self._db_manager.verify_connection():
            logger.info("Database connection verified")
        else:
            logger.warning("Database connection check failed")

        logger.info("Database initialization complete")

    def reset(self) -> None:
        """
        Reset the database to initial state.

        WARNING: This deletes all data and recreates tables.

        Raises:
            RuntimeError: When called in production
        """
        if self._settings.is_production:
            logger.error("Cannot reset database in production!")
            raise RuntimeError("Database reset not allowed in production")

        logger.warning("RESETTING DATABASE - ALL DATA WILL BE LOST")

        self.drop_tables()
        self.create_tables()
        self.create_default_admin()

        logger.warning("Database reset complete")

    def get_stats(self) -> dict:
        """
        Get database statistics.

        Returns:
            Dictionary with table counts
        """
        session = self._db_manager.get_session()

        try:
            return {
                "users": {
                    "total": session.query(User).count(),
                    "active": session.query(User).filter(
                        User.is_active.is_(True)
                    ).count(),
                },
                "products": {
                    "total": session.query(Product).count(),
                    "active": session.query(Product).filter(
                        Product.is_active.is_(True)
                    ).count(),
                },
            }
        finally:
            session.close()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def init_db(
    db_manager: Optional[DatabaseManager] = None,
    settings: Optional[Settings] = None
) -> None:
    """
    Initialize the database.

    Usage:
        from shoestore.db import init_db
        init_db()
    """
    DatabaseInitializer(db_manager, settings=settings).initialize()
