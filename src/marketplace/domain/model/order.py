"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its lines.  Its subtotal is
priced from the catalog once, at creation, and never recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "PENDING"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise ValidationError(f"Unknown order status: {raw!r}") from exc


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.AWAITING_PAYMENT, OrderStatus.CANCELLED}),
    OrderStatus.AWAITING_PAYMENT: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderLine:
    """Links an order to one purchased product.

    Carries no quantity: the amount lived on the product when the order
    was priced.
    """

    id: UUID
    order_id: UUID
    product_id: UUID


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: UUID
    user_id: UUID
    order_sub_total: Money
    shipping_fee: Money
    shipping_method: str
    payment_id: str
    lines: list[OrderLine]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        id: UUID,
        user_id: UUID,
        lines: list[OrderLine],
        order_sub_total: Money,
        shipping_fee: Money,
        shipping_method: str,
        payment_id: str,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not lines:
            raise ValidationError("Order must contain at least one item")
        if any(line.order_id != id for line in lines):
            raise ValidationError("Every line must reference the new order")
        _check_shipping_fee(shipping_fee, order_sub_total)
        _check_required("Shipping method", shipping_method)
        _check_required("Payment ID", payment_id)

        return Order(
            id=id,
            user_id=user_id,
            order_sub_total=order_sub_total,
            shipping_fee=shipping_fee,
            shipping_method=shipping_method.strip(),
            payment_id=payment_id.strip(),
            lines=list(lines),
        )

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move to ``new_status`` if the transition table allows it.

        Re-applying the current status is a no-op.
        """
        if new_status == self.status:
            return
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {new_status.value}"
            )
        self.status = new_status
        self._touch()

    # --- Patchable fields -----------------------------------------------------

    def change_shipping(
        self,
        shipping_fee: Money | None = None,
        shipping_method: str | None = None,
    ) -> None:
        if shipping_fee is not None:
            _check_shipping_fee(shipping_fee, self.order_sub_total)
            self.shipping_fee = shipping_fee
        if shipping_method is not None:
            _check_required("Shipping method", shipping_method)
            self.shipping_method = shipping_method.strip()
        self._touch()

    def change_payment(self, payment_id: str) -> None:
        _check_required("Payment ID", payment_id)
        self.payment_id = payment_id.strip()
        self._touch()

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return self.order_sub_total + self.shipping_fee

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = _now()


def _check_shipping_fee(fee: Money, order_sub_total: Money) -> None:
    if fee.is_zero:
        raise ValidationError("Shipping fee must be positive")
    # Money rejects a total it cannot hold
    order_sub_total + fee


def _check_required(label: str, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
