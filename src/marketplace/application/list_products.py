"""Application service: List Products use case (query).

Filtering follows the same ownership rule as order listing: admins are
unfiltered, users only ever see their own listings.  ``user_id`` asks for
one seller's products explicitly and is refused for anyone but that
seller or an admin.
"""

from __future__ import annotations

from uuid import UUID

from marketplace.application.dto import PageDTO, ProductDTO, product_to_dto
from marketplace.domain.model.principal import Principal
from marketplace.domain.model.value_objects import PageRequest
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(
        self,
        principal: Principal,
        page: int = 1,
        limit: int = 10,
        category_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> PageDTO[ProductDTO]:
        request = PageRequest(page, limit)

        if user_id is not None:
            self._policy.authorize_owner_listing(principal, user_id, "products")
            owner_id: UUID | None = user_id
        else:
            owner_id = self._policy.owner_scope(principal)

        with self._uow as uow:
            total = uow.products.count(owner_id=owner_id, category_id=category_id)
            products = uow.products.list(
                owner_id=owner_id,
                category_id=category_id,
                offset=request.offset,
                limit=request.limit,
            )

        return PageDTO(
            items=[product_to_dto(p) for p in products],
            total=total,
            page=request.page,
            total_pages=request.total_pages(total),
        )

    def by_category(
        self, principal: Principal, category_id: UUID, page: int = 1, limit: int = 10
    ) -> PageDTO[ProductDTO]:
        return self.handle(principal, page=page, limit=limit, category_id=category_id)

    def by_user(
        self, principal: Principal, user_id: UUID, page: int = 1, limit: int = 10
    ) -> PageDTO[ProductDTO]:
        return self.handle(principal, page=page, limit=limit, user_id=user_id)
