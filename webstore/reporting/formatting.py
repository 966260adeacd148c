# webstore/reporting/formatting.py
"""Plain-text rendering of report rows, in the style of the WebStore console reports."""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, List, Sequence

from webstore.reporting.queries import REPORTS, ReportDefinition

SEPARATOR = "----------------------"


def format_currency(value: Decimal) -> str:
    """US dollar amount, e.g. ``$1,234.50`` or ``-$3.00``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_number(value: Decimal) -> str:
    """Plain decimal without trailing zeros, e.g. 10.00 -> "10"."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_date(value: datetime) -> str:
    return value.strftime("%m/%d/%Y")


def format_datetime(value: datetime) -> str:
    return value.strftime("%m/%d/%Y %H:%M")


def heading(definition: ReportDefinition) -> str:
    return f"=== Task {definition.number:02d}: {definition.title} ==="


# ===== PER-REPORT BODIES =====


def _customers(rows) -> List[str]:
    return [f"{row.full_name} - {row.email}" for row in rows]


def _orders_item_count(rows) -> List[str]:
    lines = []
    for row in rows:
        lines.extend([row.customer_name, row.order_status, str(row.total_quantity), SEPARATOR])
    return lines


def _products_by_price(rows) -> List[str]:
    return [f"{rank}. {row.product_name} - {format_currency(row.price)}" for rank, row in enumerate(rows, 1)]


def _pending_orders(rows) -> List[str]:
    return [
        f"{rank}. {row.order_id} - {row.customer_name} ({format_date(row.order_date)}) - {format_currency(row.total_price)}"
        for rank, row in enumerate(rows, 1)
    ]


def _order_counts(rows) -> List[str]:
    return [f"{rank}. {row.customer_name} - {row.order_count} order total." for rank, row in enumerate(rows, 1)]


def _top_customers(rows) -> List[str]:
    return [
        f"{rank}. {row.customer_name} - {format_currency(row.total_order_value)} orders total."
        for rank, row in enumerate(rows, 1)
    ]


def _recent_orders(rows) -> List[str]:
    return [
        f"Id: {row.order_id}, Order date: {format_datetime(row.order_date)}, {row.customer_name}" for row in rows
    ]


def _total_sold(rows) -> List[str]:
    return [f"{rank}. {row.product_name} - {row.total_sold}" for rank, row in enumerate(rows, 1)]


def _discounted_orders(rows) -> List[str]:
    lines = []
    for rank, row in enumerate(rows, 1):
        lines.append(f"{rank}. OrderId: {row.order_id} Customer name: {row.customer_name}")
        for product in row.discounted_products:
            lines.append(f" {product.product_name} ({format_number(product.discount_percentage)})% discount")
            lines.append(f"Final Price: {format_currency(product.discounted_price)}")
    return lines


def _category_orders(rows) -> List[str]:
    lines = []
    for rank, order in enumerate(rows, 1):
        lines.append(f"{rank}. Order ID: {order.order_id}")
        lines.append(f"   Customer: {order.customer_name}")
        lines.append(f"   Date: {format_date(order.order_date)}")
        for product_rank, product in enumerate(order.products, 1):
            lines.append(f"   {product_rank}. Product: {product.product_name}")
            lines.append(f"      Categories: {', '.join(product.categories)}")
            lines.append(f"      Quantity Ordered: {product.quantity}")
            lines.append(f"      Unit Price: {format_currency(product.unit_price)}")
            if product.best_stock is not None:
                lines.append(f"      Best Availability: {product.best_stock.store_name}")
                lines.append(f"      Stock Quantity: {product.best_stock.quantity}")
            else:
                lines.append("      No stock information available")
    return lines


RENDERERS: Dict[str, Callable[[Sequence], List[str]]] = {
    "customers": _customers,
    "orders-item-count": _orders_item_count,
    "products-by-price": _products_by_price,
    "pending-orders": _pending_orders,
    "order-counts": _order_counts,
    "top-customers": _top_customers,
    "recent-orders": _recent_orders,
    "total-sold": _total_sold,
    "discounted-orders": _discounted_orders,
    "category-orders": _category_orders,
}


def render_report(key: str, rows: Sequence) -> str:
    """Render one report's rows as a text block with its heading."""
    definition = REPORTS[key]
    body = RENDERERS[key](rows) or ["(no results)"]
    return "\n".join([heading(definition), *body])
