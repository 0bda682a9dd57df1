"""CLI commands for the Order aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from marketplace.application.create_order import CreateOrderHandler
from marketplace.application.delete_order import DeleteOrderHandler
from marketplace.application.dto import OrderDTO, OrderItemSpec, OrderPatch
from marketplace.application.list_orders import ListOrdersHandler
from marketplace.application.show_order import ShowOrderHandler
from marketplace.application.update_order import UpdateOrderHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.order import OrderStatus
from marketplace.infrastructure.bootstrap import (
    access_policy,
    id_generator,
    unit_of_work,
)
from marketplace.infrastructure.cli.context import current_principal, domain_failure
from marketplace.infrastructure.config import settings


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Shipping: {dto.shipping_method}  Payment: {dto.payment_id}")
    click.echo()
    click.echo(f"  {'Line':<38} {'Product':<38}")
    click.echo(f"  {'-'*77}")
    for line in dto.lines:
        click.echo(f"  {str(line.id):<38} {str(line.product_id):<38}")
    click.echo(f"  {'-'*77}")
    click.echo(f"  {'Subtotal':<27} {dto.order_sub_total:>20}")
    click.echo(f"  {'Shipping fee':<27} {dto.shipping_fee:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    type=click.UUID,
    help="Product ID to order; repeat for several items.",
)
@click.option("--shipping-fee", required=True, help="Shipping fee (e.g. 10.00).")
@click.option("--shipping-method", required=True, help="Shipping method.")
@click.option("--payment-id", required=True, help="Payment reference.")
def order_create(
    items: tuple[UUID, ...],
    shipping_fee: str,
    shipping_method: str,
    payment_id: str,
) -> None:
    """Create a new order priced from the current catalog."""
    principal = current_principal()
    handler = CreateOrderHandler(uow=unit_of_work(), id_generator=id_generator())

    try:
        dto = handler.handle(
            principal,
            [OrderItemSpec(product_id=pid) for pid in items],
            shipping_fee=shipping_fee,
            shipping_method=shipping_method,
            payment_id=payment_id,
        )
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
@click.option("--limit", default=None, type=int, help="Orders per page.")
@click.option("--user", "user_id", default=None, type=click.UUID, help="Only this user's orders.")
def order_list(page: int, limit: int | None, user_id: UUID | None) -> None:
    """List orders visible to the caller."""
    principal = current_principal()
    handler = ListOrdersHandler(uow=unit_of_work(), policy=access_policy())

    try:
        result = handler.handle(
            principal,
            page=page,
            limit=limit if limit is not None else settings.DEFAULT_PAGE_SIZE,
            user_id=user_id,
        )
    except DomainException as exc:
        raise domain_failure(exc)

    if not result.items:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<38} {'Status':<18} {'Subtotal':>12} {'Created':>22}")
    click.echo("-" * 93)
    for dto in result.items:
        click.echo(
            f"{str(dto.id):<38} {dto.status:<18} {dto.order_sub_total:>12} {dto.created_at:>22}"
        )
    click.echo(f"Page {result.page} of {result.total_pages}  ({result.total} orders)")


@click.command("show")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to display.")
def order_show(order_id: UUID) -> None:
    """Show details of an existing order."""
    principal = current_principal()
    handler = ShowOrderHandler(uow=unit_of_work(), policy=access_policy())

    try:
        dto = handler.handle(principal, order_id)
    except DomainException as exc:
        raise domain_failure(exc)

    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to update.")
@click.option(
    "--status",
    default=None,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="New status.",
)
@click.option("--shipping-fee", default=None, help="New shipping fee.")
@click.option("--shipping-method", default=None, help="New shipping method.")
@click.option("--payment-id", default=None, help="New payment reference.")
def order_update(
    order_id: UUID,
    status: str | None,
    shipping_fee: str | None,
    shipping_method: str | None,
    payment_id: str | None,
) -> None:
    """Update an order's status, shipping or payment details."""
    principal = current_principal()
    handler = UpdateOrderHandler(uow=unit_of_work(), policy=access_policy())
    patch = OrderPatch(
        status=status,
        shipping_fee=shipping_fee,
        shipping_method=shipping_method,
        payment_id=payment_id,
    )

    try:
        dto = handler.handle(principal, order_id, patch)
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.id} updated  (status={dto.status})")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to delete.")
def order_delete(order_id: UUID) -> None:
    """Delete an order and its lines."""
    principal = current_principal()
    handler = DeleteOrderHandler(uow=unit_of_work(), policy=access_policy())

    try:
        handler.handle(principal, order_id)
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(f"Order {order_id} deleted.")
