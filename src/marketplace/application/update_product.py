"""Application service: Update Product use case.

Price changes do NOT affect existing orders; their subtotal was frozen
when they were created.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from marketplace.application.dto import ProductDTO, ProductPatch, product_to_dto
from marketplace.domain.exceptions import EntityNotFoundError, ValidationError
from marketplace.domain.model.principal import Principal
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy, Action

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(
        self, principal: Principal, product_id: UUID, patch: ProductPatch
    ) -> ProductDTO:
        if patch.is_empty:
            raise ValidationError("Nothing to update")

        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product {product_id} not found")
            self._policy.authorize(
                principal, product.owner_user_id, Action.UPDATE, "product"
            )

            if patch.name is not None:
                product.rename(patch.name)
            if patch.category_id is not None:
                product.move_to_category(patch.category_id)
            if patch.unit_price is not None or patch.amount is not None:
                product.reprice(
                    unit_price=(
                        Money.of(patch.unit_price)
                        if patch.unit_price is not None
                        else None
                    ),
                    amount=patch.amount,
                )
            if patch.is_purchased is not None:
                product.mark_purchased(patch.is_purchased)

            uow.products.save(product)
            uow.commit()

        logger.info("Product updated", product_id=str(product.id), by=str(principal.id))
        return product_to_dto(product)
