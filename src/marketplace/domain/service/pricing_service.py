"""Domain service: Pricing.

Computes the authoritative subtotal of a proposed order from the
*current* catalog.  Prices supplied by a caller are never consulted.

The two-phase approach (load-then-accumulate) ensures no partial
subtotal is produced if a single product fails to resolve.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class PricedItems:
    products: list[Product]
    subtotal: Money


class PricingService:
    """Pass the repository of the caller's open unit of work so the
    prices read here and the rows written afterwards share one snapshot.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def price(self, product_ids: list[UUID]) -> PricedItems:
        """Resolve every product and sum ``unit_price * amount``.

          Phase 1: one batched read of every referenced product, then
                    resolve in the order received; the first missing ID
                    fails the whole computation.
          Phase 2: accumulate in that same order.  A repeated ID counts
                    once per occurrence.
        """
        # Phase 1: load and resolve
        found = self._product_repo.get_many(product_ids)
        resolved: list[Product] = []
        for product_id in product_ids:
            product = found.get(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{product_id}'")
            resolved.append(product)

        # Phase 2: accumulate
        subtotal = Money.zero()
        for product in resolved:
            subtotal = subtotal + product.unit_price * product.amount

        return PricedItems(products=resolved, subtotal=subtotal)

    def compute_subtotal(self, product_ids: list[UUID]) -> Money:
        return self.price(product_ids).subtotal
