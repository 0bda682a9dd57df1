"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.orm import Session

from marketplace.domain.model.order import Order, OrderLine, OrderStatus
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.infrastructure.persistence.models import OrderLineRow, OrderRow


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        self._session.add(self._to_row(order))
        self._session.flush()

    def get_by_id(self, order_id: UUID) -> Order | None:
        row = self._session.get(OrderRow, order_id)
        return self._to_domain(row) if row is not None else None

    def list(
        self,
        owner_id: UUID | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        stmt = self._filtered(sa.select(OrderRow), owner_id).order_by(
            OrderRow.created_at.desc(), OrderRow.id
        )
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def count(self, owner_id: UUID | None = None) -> int:
        stmt = self._filtered(sa.select(sa.func.count(OrderRow.id)), owner_id)
        return int(self._session.scalar(stmt) or 0)

    def save(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is None:
            raise LookupError(f"order {order.id} does not exist")
        # user_id and order_sub_total are fixed at creation
        row.status = order.status.value
        row.shipping_fee = order.shipping_fee.amount
        row.shipping_method = order.shipping_method
        row.payment_id = order.payment_id
        row.updated_at = order.updated_at
        self._session.flush()

    def delete(self, order_id: UUID) -> None:
        row = self._session.get(OrderRow, order_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _filtered(stmt, owner_id: UUID | None):
        if owner_id is not None:
            stmt = stmt.where(OrderRow.user_id == owner_id)
        return stmt

    @staticmethod
    def _to_row(order: Order) -> OrderRow:
        return OrderRow(
            id=order.id,
            user_id=order.user_id,
            order_sub_total=order.order_sub_total.amount,
            shipping_fee=order.shipping_fee.amount,
            currency=order.order_sub_total.currency,
            shipping_method=order.shipping_method,
            payment_id=order.payment_id,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            lines=[
                OrderLineRow(
                    id=line.id,
                    order_id=line.order_id,
                    product_id=line.product_id,
                    position=position,
                )
                for position, line in enumerate(order.lines)
            ],
        )

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            order_sub_total=Money(Decimal(row.order_sub_total), row.currency),
            shipping_fee=Money(Decimal(row.shipping_fee), row.currency),
            shipping_method=row.shipping_method,
            payment_id=row.payment_id,
            lines=[
                OrderLine(id=line.id, order_id=line.order_id, product_id=line.product_id)
                for line in row.lines
            ],
            status=OrderStatus(row.status),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
