"""Application service: List Orders use case (query).

Admins see every order; users see only their own.  Asking explicitly for
another user's orders is refused rather than silently filtered.
"""

from __future__ import annotations

from uuid import UUID

from marketplace.application.dto import OrderDTO, PageDTO, order_to_dto
from marketplace.domain.model.principal import Principal
from marketplace.domain.model.value_objects import PageRequest
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(
        self,
        principal: Principal,
        page: int = 1,
        limit: int = 10,
        user_id: UUID | None = None,
    ) -> PageDTO[OrderDTO]:
        request = PageRequest(page, limit)

        if user_id is not None:
            self._policy.authorize_owner_listing(principal, user_id, "orders")
            owner_id: UUID | None = user_id
        else:
            owner_id = self._policy.owner_scope(principal)

        # Count and rows are read in the same unit of work so they agree.
        with self._uow as uow:
            total = uow.orders.count(owner_id=owner_id)
            orders = uow.orders.list(
                owner_id=owner_id, offset=request.offset, limit=request.limit
            )

        return PageDTO(
            items=[order_to_dto(o) for o in orders],
            total=total,
            page=request.page,
            total_pages=request.total_pages(total),
        )
