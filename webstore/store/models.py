"""Database models for the WebStore schema."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webstore.core.database import Base


class OrderStatus(str, Enum):
    """Known order statuses."""

    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# Many-to-many link between products and categories
product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.product_id"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.category_id"), primary_key=True),
)


class Customer(Base):
    """Customer placing orders."""

    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)

    orders: Mapped[List["Order"]] = relationship(back_populates="customer")


class Order(Base):
    """Order header."""

    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.customer_id"), nullable=False, index=True)
    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    # Plain string so statuses outside OrderStatus stay readable
    order_status: Mapped[str] = mapped_column(String(20), nullable=False, default=OrderStatus.PENDING.value)

    customer: Mapped["Customer"] = relationship(back_populates="orders")
    order_items: Mapped[List["OrderItem"]] = relationship(back_populates="order")


class OrderItem(Base):
    """Order line. Discount is a percentage in [0, 100]."""

    __tablename__ = "order_items"

    order_item_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.order_id"), nullable=False, index=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.product_id"), nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False, default=Decimal("0"))

    order: Mapped["Order"] = relationship(back_populates="order_items")
    product: Mapped["Product"] = relationship(back_populates="order_items")


class Product(Base):
    """Catalog product."""

    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    categories: Mapped[List["Category"]] = relationship(secondary=product_categories, back_populates="products")
    order_items: Mapped[List["OrderItem"]] = relationship(back_populates="product")
    stocks: Mapped[List["Stock"]] = relationship(back_populates="product")


class Category(Base):
    __tablename__ = "categories"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    products: Mapped[List["Product"]] = relationship(secondary=product_categories, back_populates="categories")


class Store(Base):
    __tablename__ = "stores"

    store_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    store_name: Mapped[str] = mapped_column(String(100), nullable=False)

    stocks: Mapped[List["Stock"]] = relationship(back_populates="store")


class Stock(Base):
    """Stock level of one product in one store."""

    __tablename__ = "stocks"

    product_id: Mapped[int] = mapped_column(ForeignKey("products.product_id"), primary_key=True)
    store_id: Mapped[int] = mapped_column(ForeignKey("stores.store_id"), primary_key=True)
    quantity_in_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    product: Mapped["Product"] = relationship(back_populates="stocks")
    store: Mapped["Store"] = relationship(back_populates="stocks")
