"""Domain service: Access Control Policy.

The single ownership rule shared by orders and products:

- ``ADMIN`` may perform every action on every resource.
- ``USER`` may act only on resources whose owner is themselves.

List operations do not deny per row; they ask ``owner_scope`` for a
filter instead, so a USER's listing never contains foreign rows.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from marketplace.domain.exceptions import ForbiddenError
from marketplace.domain.model.principal import Principal


class Action(Enum):
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class AccessPolicy:

    def is_allowed(self, principal: Principal, owner_id: UUID, action: Action) -> bool:
        if principal.is_admin:
            return True
        return owner_id == principal.id

    def authorize(
        self,
        principal: Principal,
        owner_id: UUID,
        action: Action,
        resource: str = "resource",
    ) -> None:
        """Raise ForbiddenError unless ``principal`` may ``action`` the resource."""
        if not self.is_allowed(principal, owner_id, action):
            raise ForbiddenError(
                f"You are not authorized to {action.value} this {resource}"
            )

    def owner_scope(self, principal: Principal) -> UUID | None:
        """Owner filter for listings: None (everything) for admins."""
        if principal.is_admin:
            return None
        return principal.id

    def authorize_owner_listing(
        self,
        principal: Principal,
        user_id: UUID,
        resource: str = "resources",
    ) -> None:
        """An explicit request for another user's rows is refused outright."""
        if not principal.is_admin and user_id != principal.id:
            raise ForbiddenError(f"You are not authorized to access these {resource}")
