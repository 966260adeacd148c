"""Data Access Objects for the WebStore database."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstore.core.exceptions import DataUnavailable
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

logger = logging.getLogger(__name__)


class SnapshotDAO:
    """Reads every entity collection and materializes a read-only Snapshot."""

    def __init__(self, session: Session):
        self.db = session

    def load_snapshot(self) -> Snapshot:
        """Load all collections in natural (primary key) order."""
        try:
            snapshot = Snapshot(
                customers=self._all(select(Customer).order_by(Customer.customer_id)),
                orders=self._all(select(Order).order_by(Order.order_id)),
                order_items=self._all(select(OrderItem).order_by(OrderItem.order_item_id)),
                products=self._all(select(Product).order_by(Product.product_id)),
                categories=self._all(select(Category).order_by(Category.category_id)),
                product_categories=self._links(),
                stores=self._all(select(Store).order_by(Store.store_id)),
                stocks=self._all(select(Stock).order_by(Stock.product_id, Stock.store_id)),
            )
        except SQLAlchemyError as exc:
            logger.error(f"Failed to load WebStore snapshot: {exc}")
            raise DataUnavailable(f"WebStore data store is unavailable: {exc}") from exc

        logger.debug(f"Loaded {snapshot!r}")
        return snapshot

    def _all(self, stmt) -> List:
        result = self.db.execute(stmt)
        return list(result.scalars().all())

    def _links(self) -> List[dict]:
        """Product/category link rows, ordered by product then category."""
        stmt = select(product_categories.c.product_id, product_categories.c.category_id).order_by(
            product_categories.c.product_id, product_categories.c.category_id
        )
        result = self.db.execute(stmt)
        return [dict(row._mapping) for row in result.all()]
