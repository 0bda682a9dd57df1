import click

from marketplace.domain.model.principal import Role
from marketplace.infrastructure.bootstrap import engine
from marketplace.infrastructure.cli.context import CliState
from marketplace.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from marketplace.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from marketplace.infrastructure.config import settings
from marketplace.infrastructure.logging import configure_logging
from marketplace.infrastructure.persistence.database import create_schema


@click.group()
@click.option(
    "--user-id",
    type=click.UUID,
    envvar="MARKETPLACE_USER_ID",
    default=None,
    help="ID of the calling user.",
)
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    envvar="MARKETPLACE_ROLE",
    default=Role.USER.value,
    show_default=True,
    help="Role of the calling user.",
)
@click.pass_context
def cli(ctx: click.Context, user_id, role: str) -> None:
    """Marketplace orders and catalog."""
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    ctx.obj = CliState(user_id=user_id, role=Role(role.upper()))


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def db() -> None:
    """Manage the database."""


@db.command("init")
def db_init() -> None:
    """Create all tables."""
    create_schema(engine())
    click.echo("Database schema ready.")


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
