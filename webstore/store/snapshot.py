"""Immutable in-memory snapshot of the WebStore entity collections."""

from collections import defaultdict
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from webstore.core.exceptions import DataUnavailable
from webstore.store.schemas import (
    CategoryRead,
    CustomerRead,
    OrderItemRead,
    OrderRead,
    ProductCategoryRead,
    ProductRead,
    StockRead,
    StoreRead,
)

RecordType = TypeVar("RecordType", bound=BaseModel)


def _coerce(record_type: Type[RecordType], items: Iterable[Any]) -> Tuple[RecordType, ...]:
    """Validate raw items (records, dicts or ORM objects) into frozen records."""
    records = []
    for item in items:
        if isinstance(item, record_type):
            records.append(item)
            continue
        try:
            records.append(record_type.model_validate(item))
        except ValidationError as exc:
            raise DataUnavailable(f"Invalid {record_type.__name__} record: {exc}") from exc
    return tuple(records)


def _group(records: Iterable[RecordType], key: str) -> Mapping[Any, Tuple[RecordType, ...]]:
    grouped: Dict[Any, list] = defaultdict(list)
    for record in records:
        grouped[getattr(record, key)].append(record)
    return MappingProxyType({k: tuple(v) for k, v in grouped.items()})


def _unique_keys(records: Iterable[RecordType], keys: Tuple[str, ...], entity: str) -> None:
    """A primary key may appear only once per collection."""
    seen = set()
    for record in records:
        key = tuple(getattr(record, name) for name in keys)
        if key in seen:
            shown = key[0] if len(key) == 1 else key
            raise DataUnavailable(f"Duplicate {entity} id {shown} in the snapshot")
        seen.add(key)


def _index(records: Iterable[RecordType], key: str, entity: str) -> Mapping[Any, RecordType]:
    _unique_keys(records, (key,), entity)
    return MappingProxyType({getattr(record, key): record for record in records})


class Snapshot:
    """Point-in-time view of all entity collections used by the reports.

    Collections keep dataset order (ascending primary key when loaded from the
    database). Lookup indexes are built once here and never change, so a
    snapshot can be shared freely between concurrent report calls.
    """

    __slots__ = (
        "customers", "orders", "order_items", "products", "categories",
        "product_categories", "stores", "stocks",
        "_customers_by_id", "_products_by_id", "_categories_by_id", "_stores_by_id",
        "_orders_by_customer", "_items_by_order", "_items_by_product",
        "_category_links_by_product", "_stocks_by_product",
    )

    def __init__(
        self,
        customers: Iterable[Any] = (),
        orders: Iterable[Any] = (),
        order_items: Iterable[Any] = (),
        products: Iterable[Any] = (),
        categories: Iterable[Any] = (),
        product_categories: Iterable[Any] = (),
        stores: Iterable[Any] = (),
        stocks: Iterable[Any] = (),
    ):
        set_ = object.__setattr__
        set_(self, "customers", _coerce(CustomerRead, customers))
        set_(self, "orders", _coerce(OrderRead, orders))
        set_(self, "order_items", _coerce(OrderItemRead, order_items))
        set_(self, "products", _coerce(ProductRead, products))
        set_(self, "categories", _coerce(CategoryRead, categories))
        set_(self, "product_categories", _coerce(ProductCategoryRead, product_categories))
        set_(self, "stores", _coerce(StoreRead, stores))
        set_(self, "stocks", _coerce(StockRead, stocks))

        set_(self, "_customers_by_id", _index(self.customers, "customer_id", "Customer"))
        set_(self, "_products_by_id", _index(self.products, "product_id", "Product"))
        set_(self, "_categories_by_id", _index(self.categories, "category_id", "Category"))
        set_(self, "_stores_by_id", _index(self.stores, "store_id", "Store"))
        _unique_keys(self.orders, ("order_id",), "Order")
        _unique_keys(self.order_items, ("order_item_id",), "OrderItem")
        _unique_keys(self.product_categories, ("product_id", "category_id"), "ProductCategory")
        _unique_keys(self.stocks, ("product_id", "store_id"), "Stock")
        set_(self, "_orders_by_customer", _group(self.orders, "customer_id"))
        set_(self, "_items_by_order", _group(self.order_items, "order_id"))
        set_(self, "_items_by_product", _group(self.order_items, "product_id"))
        set_(self, "_category_links_by_product", _group(self.product_categories, "product_id"))
        set_(self, "_stocks_by_product", _group(self.stocks, "product_id"))

        self._check_references()

    def _check_references(self) -> None:
        """Every foreign key must resolve inside the snapshot."""
        order_ids = {order.order_id for order in self.orders}
        for order in self.orders:
            self.customer(order.customer_id)
        for item in self.order_items:
            if item.order_id not in order_ids:
                raise DataUnavailable(f"Order {item.order_id} is referenced but missing from the snapshot")
            self.product(item.product_id)
        for link in self.product_categories:
            self.product(link.product_id)
            self.category(link.category_id)
        for stock in self.stocks:
            self.product(stock.product_id)
            self.store(stock.store_id)

    def __setattr__(self, name, value):
        raise AttributeError("Snapshot is read-only")

    def __repr__(self) -> str:
        return (
            f"Snapshot(customers={len(self.customers)}, orders={len(self.orders)}, "
            f"order_items={len(self.order_items)}, products={len(self.products)}, "
            f"categories={len(self.categories)}, stores={len(self.stores)}, stocks={len(self.stocks)})"
        )

    # ===== KEY LOOKUPS =====

    def customer(self, customer_id: int) -> CustomerRead:
        return self._lookup(self._customers_by_id, customer_id, "Customer")

    def product(self, product_id: int) -> ProductRead:
        return self._lookup(self._products_by_id, product_id, "Product")

    def category(self, category_id: int) -> CategoryRead:
        return self._lookup(self._categories_by_id, category_id, "Category")

    def store(self, store_id: int) -> StoreRead:
        return self._lookup(self._stores_by_id, store_id, "Store")

    @staticmethod
    def _lookup(index: Mapping[int, RecordType], key: int, entity: str) -> RecordType:
        try:
            return index[key]
        except KeyError:
            raise DataUnavailable(f"{entity} {key} is referenced but missing from the snapshot") from None

    # ===== RELATIONSHIPS =====

    def orders_of(self, customer_id: int) -> Tuple[OrderRead, ...]:
        return self._orders_by_customer.get(customer_id, ())

    def items_of_order(self, order_id: int) -> Tuple[OrderItemRead, ...]:
        return self._items_by_order.get(order_id, ())

    def items_of_product(self, product_id: int) -> Tuple[OrderItemRead, ...]:
        return self._items_by_product.get(product_id, ())

    def categories_of(self, product_id: int) -> Tuple[CategoryRead, ...]:
        links = self._category_links_by_product.get(product_id, ())
        return tuple(self.category(link.category_id) for link in links)

    def stocks_of(self, product_id: int) -> Tuple[StockRead, ...]:
        return self._stocks_by_product.get(product_id, ())
