from .models import Customer, Order, OrderItem, Product, Category, Store, Stock, OrderStatus
from .snapshot import Snapshot
from .dao import SnapshotDAO

__all__ = [
    # Models
    "Customer",
    "Order",
    "OrderItem",
    "Product",
    "Category",
    "Store",
    "Stock",
    "OrderStatus",

    # Snapshot access
    "Snapshot",
    "SnapshotDAO",
]
