"""
Test configuration and shared fixtures for the WebStore reports test suite.
Provides database setup, a shared sample dataset, and the API test client.
"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, List
from sqlalchemy import create_engine, insert
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from webstore.app import create_app
from webstore.core.database import Base, get_db
from webstore.store.models import (
    Category,
    Customer,
    Order,
    OrderItem,
    Product,
    Stock,
    Store,
    product_categories,
)
from webstore.store.snapshot import Snapshot


# Reference point for every order date in the sample dataset
NOW = datetime.now().replace(microsecond=0)


# ===== SAMPLE DATASET =====
#
# Ann owns orders 1, 2 and 5 (5 has no items), Bob owns 3 and 4, Cara has none.
# Headphones and Cable share a price; Headphones is stocked equally in two stores;
# Cable has no stock anywhere.

SAMPLE_DATA: Dict[str, List[Dict[str, Any]]] = {
    "customers": [
        {"customer_id": 1, "first_name": "Ann", "last_name": "Lee", "email": "ann@example.com"},
        {"customer_id": 2, "first_name": "Bob", "last_name": "Smith", "email": "bob@example.com"},
        {"customer_id": 3, "first_name": "Cara", "last_name": "Jones", "email": "cara@example.com"},
    ],
    "categories": [
        {"category_id": 1, "category_name": "Electronics"},
        {"category_id": 2, "category_name": "Computers"},
        {"category_id": 3, "category_name": "Books"},
    ],
    "products": [
        {"product_id": 1, "product_name": "Laptop", "price": Decimal("1000.00")},
        {"product_id": 2, "product_name": "Headphones", "price": Decimal("150.00")},
        {"product_id": 3, "product_name": "Novel", "price": Decimal("15.00")},
        {"product_id": 4, "product_name": "Cable", "price": Decimal("150.00")},
    ],
    "product_categories": [
        {"product_id": 1, "category_id": 1},
        {"product_id": 1, "category_id": 2},
        {"product_id": 2, "category_id": 1},
        {"product_id": 3, "category_id": 3},
        {"product_id": 4, "category_id": 1},
    ],
    "stores": [
        {"store_id": 1, "store_name": "Downtown"},
        {"store_id": 2, "store_name": "Mall"},
    ],
    "stocks": [
        {"product_id": 1, "store_id": 1, "quantity_in_stock": 5},
        {"product_id": 1, "store_id": 2, "quantity_in_stock": 12},
        {"product_id": 2, "store_id": 1, "quantity_in_stock": 30},
        {"product_id": 2, "store_id": 2, "quantity_in_stock": 30},
        {"product_id": 3, "store_id": 2, "quantity_in_stock": 100},
    ],
    "orders": [
        {"order_id": 1, "customer_id": 1, "order_date": NOW - timedelta(days=3), "order_status": "Pending"},
        {"order_id": 2, "customer_id": 1, "order_date": NOW - timedelta(days=45), "order_status": "Shipped"},
        {"order_id": 3, "customer_id": 2, "order_date": NOW - timedelta(days=10), "order_status": "Pending"},
        {"order_id": 4, "customer_id": 2, "order_date": NOW - timedelta(days=30), "order_status": "Cancelled"},
        {"order_id": 5, "customer_id": 1, "order_date": NOW - timedelta(days=1), "order_status": "Processing"},
    ],
    "order_items": [
        {"order_item_id": 1, "order_id": 1, "product_id": 1, "quantity": 1, "unit_price": Decimal("1000.00"), "discount": Decimal("10")},
        {"order_item_id": 2, "order_id": 1, "product_id": 3, "quantity": 2, "unit_price": Decimal("15.00"), "discount": Decimal("0")},
        {"order_item_id": 3, "order_id": 2, "product_id": 2, "quantity": 1, "unit_price": Decimal("150.00"), "discount": Decimal("0")},
        {"order_item_id": 4, "order_id": 3, "product_id": 4, "quantity": 2, "unit_price": Decimal("150.00"), "discount": Decimal("5")},
        {"order_item_id": 5, "order_id": 3, "product_id": 3, "quantity": 1, "unit_price": Decimal("15.00"), "discount": Decimal("0")},
        {"order_item_id": 6, "order_id": 4, "product_id": 3, "quantity": 3, "unit_price": Decimal("15.00"), "discount": Decimal("0")},
    ],
}


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def snapshot() -> Snapshot:
    """Snapshot of the sample dataset built without a database"""
    return Snapshot(**SAMPLE_DATA)


# ===== DATABASE SETUP =====

@pytest.fixture(scope="session")
def db_engine():
    """Create in-memory SQLite engine for the WebStore database"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    from webstore.store import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture(scope="function")
def db_session(db_engine) -> Session:
    """Create a database session for the WebStore database"""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()  # Rollback any uncommitted changes
        session.close()
        # Clean up all data after each test
        Base.metadata.drop_all(bind=db_engine)
        Base.metadata.create_all(bind=db_engine)


@pytest.fixture
def sample_data(db_session) -> Dict[str, List[Dict[str, Any]]]:
    """Insert the sample dataset into the test database"""
    for model, key in [
        (Customer, "customers"),
        (Category, "categories"),
        (Product, "products"),
        (Store, "stores"),
        (Order, "orders"),
    ]:
        db_session.add_all([model(**record) for record in SAMPLE_DATA[key]])
    db_session.flush()

    db_session.add_all([OrderItem(**record) for record in SAMPLE_DATA["order_items"]])
    db_session.add_all([Stock(**record) for record in SAMPLE_DATA["stocks"]])
    db_session.execute(insert(product_categories), SAMPLE_DATA["product_categories"])
    db_session.commit()
    return SAMPLE_DATA


@pytest.fixture
def client(db_session):
    """Create FastAPI test client with database overrides"""
    app = create_app()

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
