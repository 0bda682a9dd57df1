"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from marketplace.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert a new order together with its lines."""

    @abstractmethod
    def get_by_id(self, order_id: UUID) -> Order | None:
        """Return an order (with lines) by its ID, or None if not found."""

    @abstractmethod
    def list(
        self,
        owner_id: UUID | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        """Return orders newest first, optionally restricted to one owner."""

    @abstractmethod
    def count(self, owner_id: UUID | None = None) -> int:
        """Count orders, optionally restricted to one owner."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist changes to an existing order's mutable fields."""

    @abstractmethod
    def delete(self, order_id: UUID) -> None:
        """Remove an order and its lines."""
