#!/usr/bin/env python3
"""Script to create sample data for the WebStore reports."""

from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import delete

from webstore.core.database import SessionLocal, init_db
from webstore.store.models import (
    Category,
    Customer,
    Order,
    OrderItem,
    OrderStatus,
    Product,
    Stock,
    Store,
    product_categories,
)


def create_sample_data():
    """Create a small, consistent WebStore dataset."""

    init_db()
    db = SessionLocal()

    try:
        # Clear existing data first
        print("Clearing existing data...")
        db.query(Stock).delete()
        db.query(OrderItem).delete()
        db.query(Order).delete()
        db.execute(delete(product_categories))
        db.query(Product).delete()
        db.query(Category).delete()
        db.query(Store).delete()
        db.query(Customer).delete()
        db.commit()

        print("Creating sample data...")
        now = datetime.now().replace(microsecond=0)

        electronics = Category(category_id=1, category_name="Electronics")
        computers = Category(category_id=2, category_name="Computers")
        home = Category(category_id=3, category_name="Home")
        books = Category(category_id=4, category_name="Books")

        laptop = Product(product_id=1, product_name="Laptop Pro 14", price=Decimal("1299.00"), categories=[electronics, computers])
        headphones = Product(product_id=2, product_name="Wireless Headphones", price=Decimal("199.99"), categories=[electronics])
        kettle = Product(product_id=3, product_name="Electric Kettle", price=Decimal("49.50"), categories=[electronics, home])
        novel = Product(product_id=4, product_name="Mystery Novel", price=Decimal("14.99"), categories=[books])
        lamp = Product(product_id=5, product_name="Desk Lamp", price=Decimal("49.50"), categories=[home])

        downtown = Store(store_id=1, store_name="Downtown")
        mall = Store(store_id=2, store_name="City Mall")
        outlet = Store(store_id=3, store_name="Airport Outlet")

        ann = Customer(customer_id=1, first_name="Ann", last_name="Lee", email="ann.lee@example.com")
        bob = Customer(customer_id=2, first_name="Bob", last_name="Smith", email="bob.smith@example.com")
        cara = Customer(customer_id=3, first_name="Cara", last_name="Jones", email="cara.jones@example.com")
        dan = Customer(customer_id=4, first_name="Dan", last_name="Brown", email="dan.brown@example.com")

        db.add_all([electronics, computers, home, books])
        db.add_all([laptop, headphones, kettle, novel, lamp])
        db.add_all([downtown, mall, outlet])
        db.add_all([ann, bob, cara, dan])

        db.add_all([
            Stock(product=laptop, store=downtown, quantity_in_stock=5),
            Stock(product=laptop, store=mall, quantity_in_stock=12),
            Stock(product=headphones, store=downtown, quantity_in_stock=30),
            Stock(product=headphones, store=outlet, quantity_in_stock=30),
            Stock(product=novel, store=mall, quantity_in_stock=100),
            Stock(product=lamp, store=downtown, quantity_in_stock=0),
        ])

        orders = [
            Order(order_id=1, customer=ann, order_date=now - timedelta(days=3), order_status=OrderStatus.PENDING.value),
            Order(order_id=2, customer=ann, order_date=now - timedelta(days=45), order_status=OrderStatus.SHIPPED.value),
            Order(order_id=3, customer=bob, order_date=now - timedelta(days=10), order_status=OrderStatus.PENDING.value),
            Order(order_id=4, customer=cara, order_date=now - timedelta(days=90), order_status=OrderStatus.CANCELLED.value),
            Order(order_id=5, customer=bob, order_date=now - timedelta(days=1), order_status=OrderStatus.PROCESSING.value),
        ]
        db.add_all(orders)

        db.add_all([
            OrderItem(order_item_id=1, order=orders[0], product=laptop, quantity=1, unit_price=Decimal("1299.00"), discount=Decimal("10")),
            OrderItem(order_item_id=2, order=orders[0], product=novel, quantity=2, unit_price=Decimal("14.99"), discount=Decimal("0")),
            OrderItem(order_item_id=3, order=orders[1], product=headphones, quantity=1, unit_price=Decimal("199.99"), discount=Decimal("0")),
            OrderItem(order_item_id=4, order=orders[2], product=kettle, quantity=2, unit_price=Decimal("49.50"), discount=Decimal("5")),
            OrderItem(order_item_id=5, order=orders[2], product=lamp, quantity=1, unit_price=Decimal("49.50"), discount=Decimal("0")),
            OrderItem(order_item_id=6, order=orders[3], product=novel, quantity=3, unit_price=Decimal("14.99"), discount=Decimal("0")),
            # Order 5 has no items yet
        ])

        db.commit()
        print("Sample data created successfully!")

    except Exception as e:
        db.rollback()
        print(f"Error creating sample data: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    create_sample_data()
