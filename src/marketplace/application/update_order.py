"""Application service: Update Order use case.

Applies a partial patch to an existing order.  The subtotal and the
owner are not patchable; status changes must follow the transition
table on the Order aggregate.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from marketplace.application.dto import OrderDTO, OrderPatch, order_to_dto
from marketplace.domain.exceptions import EntityNotFoundError, ValidationError
from marketplace.domain.model.order import OrderStatus
from marketplace.domain.model.principal import Principal
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy, Action

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(self, principal: Principal, order_id: UUID, patch: OrderPatch) -> OrderDTO:
        if patch.is_empty:
            raise ValidationError("Nothing to update")

        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order {order_id} not found")
            self._policy.authorize(principal, order.user_id, Action.UPDATE, "order")

            if patch.shipping_fee is not None or patch.shipping_method is not None:
                order.change_shipping(
                    shipping_fee=(
                        Money.of(patch.shipping_fee)
                        if patch.shipping_fee is not None
                        else None
                    ),
                    shipping_method=patch.shipping_method,
                )
            if patch.payment_id is not None:
                order.change_payment(patch.payment_id)
            if patch.status is not None:
                order.transition_to(OrderStatus.parse(patch.status))

            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Order updated",
            order_id=str(order.id),
            status=order.status.value,
            by=str(principal.id),
        )
        return order_to_dto(order)
