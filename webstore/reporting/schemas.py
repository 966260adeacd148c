"""Pydantic row types produced by the report queries."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class ReportRow(BaseModel):
    """Base for all report rows: immutable, raw typed values."""

    model_config = ConfigDict(frozen=True)


# ===== FLAT ROWS =====


class CustomerRow(ReportRow):
    full_name: str
    email: str


class OrderItemCountRow(ReportRow):
    order_id: int
    customer_name: str
    order_status: str
    total_quantity: int


class ProductPriceRow(ReportRow):
    product_name: str
    price: Decimal


class PendingOrderRow(ReportRow):
    order_id: int
    customer_name: str
    order_date: datetime
    total_price: Decimal


class CustomerOrderCountRow(ReportRow):
    customer_name: str
    order_count: int


class CustomerOrderValueRow(ReportRow):
    customer_name: str
    total_order_value: Decimal


class RecentOrderRow(ReportRow):
    order_id: int
    order_date: datetime
    customer_name: str


class ProductSalesRow(ReportRow):
    product_name: str
    total_sold: int


# ===== NESTED ROWS =====


class DiscountedLine(ReportRow):
    product_name: str
    discount_percentage: Decimal
    discounted_price: Decimal


class DiscountedOrderRow(ReportRow):
    order_id: int
    customer_name: str
    discounted_products: List[DiscountedLine]


class BestStock(ReportRow):
    """Store holding the most units of a product."""

    store_name: str
    quantity: int


class CategoryLine(ReportRow):
    product_name: str
    quantity: int
    unit_price: Decimal
    categories: List[str]
    best_stock: Optional[BestStock] = None


class CategoryOrderRow(ReportRow):
    order_id: int
    customer_name: str
    order_date: datetime
    products: List[CategoryLine]


# ===== REGISTRY =====


class ReportInfo(BaseModel):
    """Public description of an available report."""

    key: str
    title: str
