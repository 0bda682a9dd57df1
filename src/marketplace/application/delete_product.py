"""Application service: Delete Product use case.

File records go with the product.  Order lines that reference it are
kept: they record what was bought, not what is still listed.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.principal import Principal
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.access_policy import AccessPolicy, Action

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork, policy: AccessPolicy) -> None:
        self._uow = uow
        self._policy = policy

    def handle(self, principal: Principal, product_id: UUID) -> None:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product {product_id} not found")
            self._policy.authorize(
                principal, product.owner_user_id, Action.DELETE, "product"
            )
            uow.files.delete_for_product(product_id)
            uow.products.delete(product_id)
            uow.commit()

        logger.info("Product deleted", product_id=str(product_id), by=str(principal.id))
