"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, user, product and display record fixtures.

==============================================================================
"""

import pytest
from decimal import Decimal
from typing import Callable, Generator, List
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from shoestore.catalog.models import DisplayRecord
from shoestore.core.security import get_security_manager
from shoestore.db.database import Base
from shoestore.db.models import (
    Category,
    Manufacturer,
    Product,
    Supplier,
    UnitOfMeasure,
    User,
    UserRole,
)


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db: Session) -> Callable[[], Session]:
    """Factory handing out new sessions on the test database."""
    return TestingSessionLocal


# ============================================================================
# USER FIXTURES
# ============================================================================

def _create_user(db: Session, login: str, password: str, full_name: str,
                 role: UserRole, is_active: bool = True) -> User:
    user = User(
        login=login,
        password_hash=get_security_manager().hash_password(password),
        full_name=full_name,
        role=role,
        is_active=is_active
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db: Session) -> User:
    """Create an administrator in the test database."""
    return _create_user(db, "admin", "admin123", "Ковалев Антон", UserRole.ADMIN)


@pytest.fixture
def manager_user(db: Session) -> User:
    """Create a manager in the test database."""
    return _create_user(db, "manager", "manager123", "Степанов Михаил", UserRole.MANAGER)


@pytest.fixture
def customer_user(db: Session) -> User:
    """Create an authenticated customer in the test database."""
    return _create_user(db, "client", "client123", "Никифорова Весения", UserRole.CUSTOMER)


@pytest.fixture
def disabled_user(db: Session) -> User:
    """Create a deactivated customer in the test database."""
    return _create_user(db, "former", "former123", "Бывший Клиент",
                        UserRole.CUSTOMER, is_active=False)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def products(db: Session) -> List[Product]:
    """
    Create reference data and four products, one of them inactive.

    Insert order: Ботинки Kari, Туфли Rieker, Кеды (no article),
    inactive Полуботинки.
    """
    women = Category(name="Женская обувь")
    men = Category(name="Мужская обувь")
    kari = Manufacturer(name="Kari")
    rieker = Manufacturer(name="Rieker")
    supplier = Supplier(name="Обувь для вас")
    pair = UnitOfMeasure(name="шт.")

    rows = [
        Product(article_number="A112T4", name="Ботинки",
                description="Женские ботинки демисезонные", category=women,
                manufacturer=kari, supplier=supplier, unit=pair,
                price=Decimal("4990.00"), current_discount=Decimal("3"),
                stock_quantity=6, photo="1.jpg", is_active=True),
        Product(article_number="B320R5", name="Туфли",
                description=None, category=women,
                manufacturer=rieker, supplier=supplier, unit=pair,
                price=Decimal("4300.00"), current_discount=Decimal("20"),
                stock_quantity=0, photo=None, is_active=True),
        Product(article_number=None, name="Кеды",
                description="Мужские кеды", category=men,
                manufacturer=kari, supplier=supplier, unit=pair,
                price=Decimal("2500.00"), current_discount=Decimal("0"),
                stock_quantity=12, photo="", is_active=True),
        Product(article_number="L754R4", name="Полуботинки",
                description="Снято с продажи", category=women,
                manufacturer=kari, supplier=supplier, unit=pair,
                price=Decimal("1700.00"), current_discount=Decimal("2"),
                stock_quantity=7, photo=None, is_active=False),
    ]
    db.add_all(rows)
    db.commit()
    return rows


# ============================================================================
# DISPLAY RECORD FIXTURES
# ============================================================================

def make_record(record_id: int, name: str, price, discount=0, stock=1,
                description=None, manufacturer="Kari", article=None) -> DisplayRecord:
    """Build a display record with sensible defaults for the other fields."""
    return DisplayRecord(
        id=record_id,
        article_number=article,
        name=name,
        description=description,
        category_name="Мужская обувь",
        manufacturer_name=manufacturer,
        supplier_name="Kari",
        unit_name="шт.",
        price=Decimal(str(price)),
        discount=Decimal(str(discount)),
        stock_quantity=stock,
    )


@pytest.fixture
def runner_and_trail() -> List[DisplayRecord]:
    """Runner (100, no discount, 5 in stock) and Trail (80, 20%, out of stock)."""
    return [
        make_record(1, "Runner", 100, discount=0, stock=5),
        make_record(2, "Trail", 80, discount=20, stock=0),
    ]


@pytest.fixture
def record_factory() -> Callable[..., DisplayRecord]:
    """Expose make_record to tests."""
    return make_record
