"""Application service: Show Product use case (query)."""

from __future__ import annotations

from uuid import UUID

from marketplace.application.dto import ProductDTO, product_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.principal import Principal
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy, Action


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(self, principal: Principal, product_id: UUID) -> ProductDTO:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product {product_id} not found")
        self._policy.authorize(principal, product.owner_user_id, Action.READ, "product")
        return product_to_dto(product)
