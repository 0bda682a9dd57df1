"""Application service: Show Order use case (query)."""

from __future__ import annotations

from uuid import UUID

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.principal import Principal
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy, Action


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(self, principal: Principal, order_id: UUID) -> OrderDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        self._policy.authorize(principal, order.user_id, Action.READ, "order")
        return order_to_dto(order)
