"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Generic, TypeVar
from uuid import UUID

from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product

T = TypeVar("T")

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested catalog item.  Prices are never taken from here."""

    product_id: UUID


@dataclass(frozen=True)
class OrderPatch:
    """Input: the mutable order fields to change.  ``None`` means untouched."""

    status: str | None = None
    shipping_fee: str | None = None
    shipping_method: str | None = None
    payment_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class ProductSpec:
    """Input: a new catalog listing and its file metadata."""

    name: str
    category_id: UUID
    unit_price: str
    amount: int
    is_purchased: bool = False
    file_type: str = "application/octet-stream"
    file_size: int = 0


@dataclass(frozen=True)
class ProductPatch:
    name: str | None = None
    category_id: UUID | None = None
    unit_price: str | None = None
    amount: int | None = None
    is_purchased: bool | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineDTO:
    id: UUID
    product_id: UUID


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: UUID
    user_id: UUID
    status: str
    order_sub_total: str  # formatted, e.g. "$200.00"
    shipping_fee: str
    total: str
    shipping_method: str
    payment_id: str
    lines: list[OrderLineDTO]
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: UUID
    owner_user_id: UUID
    category_id: UUID
    name: str
    unit_price: str
    amount: int
    sub_total: str
    is_purchased: bool
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class PageDTO(Generic[T]):
    """Output: one page of a listing plus the numbers needed to page on."""

    items: list[T]
    total: int
    page: int
    total_pages: int


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.value,
        order_sub_total=str(order.order_sub_total),
        shipping_fee=str(order.shipping_fee),
        total=str(order.total),
        shipping_method=order.shipping_method,
        payment_id=order.payment_id,
        lines=[OrderLineDTO(id=line.id, product_id=line.product_id) for line in order.lines],
        created_at=order.created_at.strftime(_TIMESTAMP_FORMAT),
        updated_at=order.updated_at.strftime(_TIMESTAMP_FORMAT),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        owner_user_id=product.owner_user_id,
        category_id=product.category_id,
        name=product.name,
        unit_price=str(product.unit_price),
        amount=product.amount,
        sub_total=str(product.sub_total),
        is_purchased=product.is_purchased,
        created_at=product.created_at.strftime(_TIMESTAMP_FORMAT),
        updated_at=product.updated_at.strftime(_TIMESTAMP_FORMAT),
    )
