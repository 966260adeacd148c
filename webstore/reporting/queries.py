"""Report queries over a WebStore snapshot.

Every function here is pure: it reads the snapshot passed in, joins and
aggregates in memory, and returns a fresh list of row models. Nothing is
cached and nothing is logged, so the same snapshot can be reported on from
several threads at once.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from webstore.core.exceptions import InvalidParameter
from webstore.store.models import OrderStatus
from webstore.store.schemas import OrderItemRead, OrderRead, ProductRead
from webstore.store.snapshot import Snapshot
from webstore.reporting.schemas import (
    BestStock,
    CategoryLine,
    CategoryOrderRow,
    CustomerOrderCountRow,
    CustomerOrderValueRow,
    CustomerRow,
    DiscountedLine,
    DiscountedOrderRow,
    OrderItemCountRow,
    PendingOrderRow,
    ProductPriceRow,
    ProductSalesRow,
    RecentOrderRow,
)

CENT = Decimal("0.01")
ZERO = Decimal("0")

DEFAULT_TOP_N = 3
DEFAULT_WINDOW_DAYS = 30
DEFAULT_CATEGORY = "Electronics"


# ===== SHARED HELPERS =====


def round_currency(value: Decimal) -> Decimal:
    """Round a money amount to cents, half away from zero."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def window_start(now: datetime, window_days: int) -> datetime:
    """Inclusive lower bound of a trailing window of ``window_days`` ending at ``now``."""
    return now - timedelta(days=window_days)


def line_total(item: OrderItemRead) -> Decimal:
    # Discount is subtracted as an amount here, matching the order-total reports
    return item.unit_price * item.quantity - item.discount


def discounted_unit_price(item: OrderItemRead) -> Decimal:
    return item.unit_price * (1 - item.discount / 100)


def _order_total(snapshot: Snapshot, order: OrderRead) -> Decimal:
    return sum((line_total(item) for item in snapshot.items_of_order(order.order_id)), ZERO)


def _customer_name(snapshot: Snapshot, order: OrderRead) -> str:
    return snapshot.customer(order.customer_id).full_name


def _in_category(snapshot: Snapshot, product: ProductRead, category_name: str) -> bool:
    return any(c.category_name == category_name for c in snapshot.categories_of(product.product_id))


def _best_stock(snapshot: Snapshot, product_id: int) -> Optional[BestStock]:
    best = None
    for stock in snapshot.stocks_of(product_id):
        # Strict comparison keeps the first store on ties
        if best is None or stock.quantity_in_stock > best.quantity_in_stock:
            best = stock
    if best is None:
        return None
    return BestStock(store_name=snapshot.store(best.store_id).store_name, quantity=best.quantity_in_stock)


# ===== REPORTS =====


def list_customers(snapshot: Snapshot) -> List[CustomerRow]:
    """Task 01: every customer's full name and email."""
    return [CustomerRow(full_name=c.full_name, email=c.email) for c in snapshot.customers]


def orders_with_item_count(snapshot: Snapshot) -> List[OrderItemCountRow]:
    """Task 02: each order with its customer, status and total item quantity."""
    return [
        OrderItemCountRow(
            order_id=order.order_id,
            customer_name=_customer_name(snapshot, order),
            order_status=order.order_status,
            total_quantity=sum(item.quantity for item in snapshot.items_of_order(order.order_id)),
        )
        for order in snapshot.orders
    ]


def products_by_descending_price(snapshot: Snapshot) -> List[ProductPriceRow]:
    """Task 03: products from most to least expensive."""
    products = sorted(snapshot.products, key=lambda p: p.price, reverse=True)
    return [ProductPriceRow(product_name=p.product_name, price=p.price) for p in products]


def pending_orders_with_total(snapshot: Snapshot) -> List[PendingOrderRow]:
    """Task 04: pending orders with their total price."""
    return [
        PendingOrderRow(
            order_id=order.order_id,
            customer_name=_customer_name(snapshot, order),
            order_date=order.order_date,
            total_price=round_currency(_order_total(snapshot, order)),
        )
        for order in snapshot.orders
        if order.order_status == OrderStatus.PENDING
    ]


def order_count_per_customer(snapshot: Snapshot) -> List[CustomerOrderCountRow]:
    """Task 05: number of orders placed by each customer."""
    return [
        CustomerOrderCountRow(customer_name=c.full_name, order_count=len(snapshot.orders_of(c.customer_id)))
        for c in snapshot.customers
    ]


def top_customers_by_order_value(snapshot: Snapshot, n: int = DEFAULT_TOP_N) -> List[CustomerOrderValueRow]:
    """Task 06: the ``n`` customers with the highest total order value.

    Customers without orders count as 0 and can still be ranked.
    """
    if n < 0:
        raise InvalidParameter("n", n, "must be zero or positive")

    values: List[Tuple[str, Decimal]] = []
    for customer in snapshot.customers:
        total = sum((_order_total(snapshot, o) for o in snapshot.orders_of(customer.customer_id)), ZERO)
        values.append((customer.full_name, total))

    ranked = sorted(values, key=lambda v: v[1], reverse=True)[:n]
    return [CustomerOrderValueRow(customer_name=name, total_order_value=round_currency(total)) for name, total in ranked]


def recent_orders(
    snapshot: Snapshot, window_days: int = DEFAULT_WINDOW_DAYS, now: Optional[datetime] = None
) -> List[RecentOrderRow]:
    """Task 07: orders placed in the last ``window_days`` days up to ``now``.

    Both edges of the window are inclusive; orders dated after ``now`` are left out.
    """
    if window_days < 0:
        raise InvalidParameter("window_days", window_days, "must be zero or positive")
    if now is None:
        now = datetime.now()
    elif now.utcoffset() is not None:
        raise InvalidParameter("now", now, "must be a naive datetime like the stored order dates")

    start = window_start(now, window_days)
    return [
        RecentOrderRow(order_id=order.order_id, order_date=order.order_date, customer_name=_customer_name(snapshot, order))
        for order in snapshot.orders
        if start <= order.order_date <= now
    ]


def total_sold_per_product(snapshot: Snapshot) -> List[ProductSalesRow]:
    """Task 08: units sold per product, best sellers first."""
    rows = [
        ProductSalesRow(
            product_name=p.product_name,
            total_sold=sum(item.quantity for item in snapshot.items_of_product(p.product_id)),
        )
        for p in snapshot.products
    ]
    return sorted(rows, key=lambda r: r.total_sold, reverse=True)


def discounted_orders(snapshot: Snapshot) -> List[DiscountedOrderRow]:
    """Task 09: orders with at least one discounted line, listing only those lines."""
    rows = []
    for order in snapshot.orders:
        lines = [
            DiscountedLine(
                product_name=snapshot.product(item.product_id).product_name,
                discount_percentage=item.discount,
                discounted_price=round_currency(discounted_unit_price(item)),
            )
            for item in snapshot.items_of_order(order.order_id)
            if item.discount > 0
        ]
        if lines:
            rows.append(
                DiscountedOrderRow(
                    order_id=order.order_id,
                    customer_name=_customer_name(snapshot, order),
                    discounted_products=lines,
                )
            )
    return rows


def orders_containing_category(
    snapshot: Snapshot, category_name: str = DEFAULT_CATEGORY
) -> List[CategoryOrderRow]:
    """Task 10: orders containing products of ``category_name``.

    Each matching line carries the product's full category list and the
    store with the most units of it (None when the product is not stocked
    anywhere). An unknown category simply matches nothing.
    """
    rows = []
    for order in snapshot.orders:
        lines = []
        for item in snapshot.items_of_order(order.order_id):
            product = snapshot.product(item.product_id)
            if not _in_category(snapshot, product, category_name):
                continue
            lines.append(
                CategoryLine(
                    product_name=product.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    categories=[c.category_name for c in snapshot.categories_of(product.product_id)],
                    best_stock=_best_stock(snapshot, product.product_id),
                )
            )
        if lines:
            rows.append(
                CategoryOrderRow(
                    order_id=order.order_id,
                    customer_name=_customer_name(snapshot, order),
                    order_date=order.order_date,
                    products=lines,
                )
            )
    return rows


# ===== REGISTRY =====


@dataclass(frozen=True)
class ReportDefinition:
    """A runnable report: stable key, display number and title, and the query."""

    key: str
    number: int
    title: str
    func: Callable[..., list]
    params: Tuple[str, ...] = ()

    def run(self, snapshot: Snapshot, **params) -> list:
        # Only forward parameters this report understands
        accepted = {name: value for name, value in params.items() if name in self.params and value is not None}
        return self.func(snapshot, **accepted)


REPORT_DEFINITIONS: Tuple[ReportDefinition, ...] = (
    ReportDefinition("customers", 1, "List All Customers", list_customers),
    ReportDefinition("orders-item-count", 2, "List Orders With Item Count", orders_with_item_count),
    ReportDefinition("products-by-price", 3, "List Products By Descending Price", products_by_descending_price),
    ReportDefinition("pending-orders", 4, "List Pending Orders With Total Price", pending_orders_with_total),
    ReportDefinition("order-counts", 5, "Order Count Per Customer", order_count_per_customer),
    ReportDefinition("top-customers", 6, "Top Customers By Order Value", top_customers_by_order_value, ("n",)),
    ReportDefinition("recent-orders", 7, "Recent Orders", recent_orders, ("window_days", "now")),
    ReportDefinition("total-sold", 8, "Total Sold Per Product", total_sold_per_product),
    ReportDefinition("discounted-orders", 9, "Discounted Orders", discounted_orders),
    ReportDefinition("category-orders", 10, "Orders Containing Category", orders_containing_category, ("category_name",)),
)

REPORTS: Dict[str, ReportDefinition] = {definition.key: definition for definition in REPORT_DEFINITIONS}


def iter_reports(keys: Optional[Iterable[str]] = None) -> List[ReportDefinition]:
    """Report definitions in display order, optionally restricted to ``keys``."""
    if keys is None:
        return list(REPORT_DEFINITIONS)
    wanted = set(keys)
    unknown = wanted - REPORTS.keys()
    if unknown:
        raise InvalidParameter("report", sorted(unknown), "unknown report key")
    return [definition for definition in REPORT_DEFINITIONS if definition.key in wanted]
