"""Per-invocation CLI state: who is calling, and how failures are shown."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

import click

from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.principal import Principal, Role


@dataclass
class CliState:
    user_id: UUID | None
    role: Role


def current_principal() -> Principal:
    """The principal named by the global --user-id / --role options."""
    state = click.get_current_context().find_object(CliState)
    if state is None or state.user_id is None:
        raise click.UsageError("--user-id is required for this command")
    return Principal(id=state.user_id, role=state.role)


def domain_failure(exc: DomainException) -> click.ClickException:
    return click.ClickException(f"[{exc.kind.value}] {exc}")
