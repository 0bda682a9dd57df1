"""CLI commands for the Product aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from marketplace.application.add_product import AddProductHandler
from marketplace.application.delete_product import DeleteProductHandler
from marketplace.application.dto import ProductPatch, ProductSpec
from marketplace.application.list_products import ListProductsHandler
from marketplace.application.show_product import ShowProductHandler
from marketplace.application.update_product import UpdateProductHandler
from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.bootstrap import (
    access_policy,
    id_generator,
    unit_of_work,
)
from marketplace.infrastructure.cli.context import current_principal, domain_failure
from marketplace.infrastructure.config import settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", "category_id", required=True, type=click.UUID, help="Category ID.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--amount", required=True, type=int, help="Number of units listed.")
@click.option("--purchased", is_flag=True, default=False, help="Mark as already purchased.")
@click.option("--file-type", default="application/octet-stream", show_default=True, help="Attached file type.")
@click.option("--file-size", default=0, show_default=True, type=int, help="Attached file size in bytes.")
def product_add(
    name: str,
    category_id: UUID,
    price: str,
    amount: int,
    purchased: bool,
    file_type: str,
    file_size: int,
) -> None:
    """List a new product in the catalog."""
    principal = current_principal()
    handler = AddProductHandler(uow=unit_of_work(), id_generator=id_generator())
    spec = ProductSpec(
        name=name,
        category_id=category_id,
        unit_price=price,
        amount=amount,
        is_purchased=purchased,
        file_type=file_type,
        file_size=file_size,
    )

    try:
        product = handler.handle(principal, spec)
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(
        f"Product {product.id} '{product.name}' added: "
        f"{product.amount} x {product.unit_price} = {product.sub_total}"
    )


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
@click.option("--limit", default=None, type=int, help="Products per page.")
@click.option("--category", "category_id", default=None, type=click.UUID, help="Only this category.")
@click.option("--user", "user_id", default=None, type=click.UUID, help="Only this seller's products.")
def product_list(
    page: int,
    limit: int | None,
    category_id: UUID | None,
    user_id: UUID | None,
) -> None:
    """List products visible to the caller."""
    principal = current_principal()
    handler = ListProductsHandler(uow=unit_of_work(), policy=access_policy())

    try:
        result = handler.handle(
            principal,
            page=page,
            limit=limit if limit is not None else settings.DEFAULT_PAGE_SIZE,
            category_id=category_id,
            user_id=user_id,
        )
    except DomainException as exc:
        raise domain_failure(exc)

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>10} {'Amount':>7} {'Subtotal':>12}")
    click.echo("-" * 91)
    for p in result.items:
        click.echo(
            f"{str(p.id):<38} {p.name:<20} {p.unit_price:>10} {p.amount:>7} {p.sub_total:>12}"
        )
    click.echo(f"Page {result.page} of {result.total_pages}  ({result.total} products)")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_show(product_id: UUID) -> None:
    """Show a product."""
    principal = current_principal()
    handler = ShowProductHandler(uow=unit_of_work(), policy=access_policy())

    try:
        p = handler.handle(principal, product_id)
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(f"Product {p.id}  '{p.name}'")
    click.echo(f"Owner:     {p.owner_user_id}")
    click.echo(f"Category:  {p.category_id}")
    click.echo(f"Price:     {p.unit_price} x {p.amount} = {p.sub_total}")
    click.echo(f"Purchased: {'yes' if p.is_purchased else 'no'}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", "category_id", default=None, type=click.UUID, help="New category ID.")
@click.option("--price", default=None, help="New unit price (e.g. 29.99).")
@click.option("--amount", default=None, type=int, help="New number of units.")
@click.option("--purchased/--not-purchased", default=None, help="Purchased flag.")
def product_update(
    product_id: UUID,
    name: str | None,
    category_id: UUID | None,
    price: str | None,
    amount: int | None,
    purchased: bool | None,
) -> None:
    """Update a product's listing."""
    principal = current_principal()
    handler = UpdateProductHandler(uow=unit_of_work(), policy=access_policy())
    patch = ProductPatch(
        name=name,
        category_id=category_id,
        unit_price=price,
        amount=amount,
        is_purchased=purchased,
    )

    try:
        p = handler.handle(principal, product_id, patch)
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(f"Product {p.id} updated: {p.amount} x {p.unit_price} = {p.sub_total}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_delete(product_id: UUID) -> None:
    """Remove a product from the catalog."""
    principal = current_principal()
    handler = DeleteProductHandler(uow=unit_of_work(), policy=access_policy())

    try:
        handler.handle(principal, product_id)
    except DomainException as exc:
        raise domain_failure(exc)

    click.echo(f"Product {product_id} deleted.")
