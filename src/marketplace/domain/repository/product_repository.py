"""Abstract repositories for the Product aggregate and its file records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from uuid import UUID

from marketplace.domain.model.product import Product, ProductFile


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Insert a new product."""

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, product_ids: Iterable[UUID]) -> dict[UUID, Product]:
        """Return every product found among ``product_ids`` in a single read.

        Missing IDs are simply absent from the result.
        """

    @abstractmethod
    def list(
        self,
        owner_id: UUID | None = None,
        category_id: UUID | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        """Return products newest first, filtered by owner and/or category."""

    @abstractmethod
    def count(
        self,
        owner_id: UUID | None = None,
        category_id: UUID | None = None,
    ) -> int:
        """Count products matching the same filters as ``list``."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: UUID) -> None:
        """Remove a product."""


class ProductFileRepository(ABC):

    @abstractmethod
    def add(self, file: ProductFile) -> None:
        """Insert a file record."""

    @abstractmethod
    def list_for_product(self, product_id: UUID) -> list[ProductFile]:
        """Return every file record attached to a product."""

    @abstractmethod
    def delete_for_product(self, product_id: UUID) -> None:
        """Remove every file record attached to a product."""
