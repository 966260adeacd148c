"""Pydantic snapshot records for the WebStore entities."""

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field


class CustomerRead(BaseModel):
    customer_id: int
    first_name: str
    last_name: str
    email: str

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class OrderRead(BaseModel):
    order_id: int
    customer_id: int
    order_date: datetime
    order_status: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class OrderItemRead(BaseModel):
    order_item_id: int
    order_id: int
    product_id: int
    quantity: int = Field(ge=0)
    unit_price: Decimal = Field(ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ProductRead(BaseModel):
    product_id: int
    product_name: str
    price: Decimal = Field(ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)


class CategoryRead(BaseModel):
    category_id: int
    category_name: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ProductCategoryRead(BaseModel):
    """Row of the product/category link table."""

    product_id: int
    category_id: int

    model_config = ConfigDict(from_attributes=True, frozen=True)


class StoreRead(BaseModel):
    store_id: int
    store_name: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class StockRead(BaseModel):
    product_id: int
    store_id: int
    quantity_in_stock: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)
