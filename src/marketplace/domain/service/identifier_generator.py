"""Abstract source of identifiers for new orders, lines, products and files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID


class IdentifierGenerator(ABC):

    @abstractmethod
    def next_id(self) -> UUID:
        """Return an identifier never handed out before."""
