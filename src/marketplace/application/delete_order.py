"""Application service: Delete Order use case.

The order's lines are removed in the same unit of work.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.principal import Principal
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy, Action

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(self, principal: Principal, order_id: UUID) -> None:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order {order_id} not found")
            self._policy.authorize(principal, order.user_id, Action.DELETE, "order")
            uow.orders.delete(order_id)
            uow.commit()

        logger.info("Order deleted", order_id=str(order_id), by=str(principal.id))
