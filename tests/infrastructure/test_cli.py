"""End-to-end tests of the click CLI over an in-memory database."""

import re
import uuid

import pytest
from click.testing import CliRunner

from marketplace.infrastructure import bootstrap
from marketplace.infrastructure.cli import main
from marketplace.infrastructure.cli.main import cli

SELLER = str(uuid.UUID(int=77))
U1 = str(uuid.UUID(int=1))
U2 = str(uuid.UUID(int=2))
ADMIN = str(uuid.UUID(int=99))
CATEGORY = str(uuid.UUID(int=900))

_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


@pytest.fixture
def runner(engine, monkeypatch):
    monkeypatch.setattr(bootstrap, "engine", lambda: engine)
    monkeypatch.setattr(main, "engine", lambda: engine)
    return CliRunner()


def _invoke(runner, user, *args, role="USER"):
    return runner.invoke(cli, ["--user-id", user, "--role", role, *args])


def _add_product(runner, price="50", amount="2"):
    result = _invoke(
        runner,
        SELLER,
        "product", "add",
        "--name", "Widget",
        "--category", CATEGORY,
        "--price", price,
        "--amount", amount,
    )
    assert result.exit_code == 0, result.output
    return re.search(rf"Product ({_UUID})", result.output).group(1)


def _create_order(runner, user, *product_ids):
    args = ["order", "create", "--shipping-fee", "10", "--shipping-method", "Standard",
            "--payment-id", "payment123"]
    for pid in product_ids:
        args += ["--item", pid]
    result = _invoke(runner, user, *args)
    assert result.exit_code == 0, result.output
    return re.search(rf"Order ({_UUID}) created", result.output).group(1)


def test_db_init(runner):
    result = runner.invoke(cli, ["db", "init"])
    assert result.exit_code == 0
    assert "schema ready" in result.output


def test_product_add_reports_sub_total(runner):
    result = _invoke(
        runner, SELLER,
        "product", "add", "--name", "Widget", "--category", CATEGORY,
        "--price", "15.00", "--amount", "3",
    )
    assert result.exit_code == 0, result.output
    assert "3 x $15.00 = $45.00" in result.output


def test_create_and_show_order(runner):
    a = _add_product(runner, "50", "2")
    b = _add_product(runner, "25", "4")
    order_id = _create_order(runner, U1, a, b)

    result = _invoke(runner, U1, "order", "show", "--id", order_id)
    assert result.exit_code == 0, result.output
    assert "status=PENDING" in result.output
    assert "$200.00" in result.output
    assert "$210.00" in result.output


def test_foreign_user_is_forbidden_but_admin_is_not(runner):
    order_id = _create_order(runner, U1, _add_product(runner))

    denied = _invoke(runner, U2, "order", "show", "--id", order_id)
    assert denied.exit_code == 1
    assert "[FORBIDDEN]" in denied.output

    allowed = _invoke(runner, ADMIN, "order", "show", "--id", order_id, role="ADMIN")
    assert allowed.exit_code == 0, allowed.output


def test_missing_product_is_not_found(runner):
    missing = str(uuid.uuid4())
    result = _invoke(
        runner, U1,
        "order", "create", "--item", missing, "--shipping-fee", "10",
        "--shipping-method", "Standard", "--payment-id", "p",
    )
    assert result.exit_code == 1
    assert "[NOT_FOUND]" in result.output
    assert missing in result.output


def test_update_then_list(runner):
    order_id = _create_order(runner, U1, _add_product(runner))

    updated = _invoke(runner, U1, "order", "update", "--id", order_id, "--status", "cancelled")
    assert updated.exit_code == 0, updated.output
    assert "status=CANCELLED" in updated.output

    listed = _invoke(runner, U1, "order", "list")
    assert order_id in listed.output
    assert "Page 1 of 1" in listed.output

    empty = _invoke(runner, U2, "order", "list")
    assert "No orders found." in empty.output


def test_delete_order(runner):
    order_id = _create_order(runner, U1, _add_product(runner))
    result = _invoke(runner, U1, "order", "delete", "--id", order_id)
    assert result.exit_code == 0
    assert f"Order {order_id} deleted." in result.output

    again = _invoke(runner, U1, "order", "show", "--id", order_id)
    assert "[NOT_FOUND]" in again.output


def test_invalid_page_is_reported(runner):
    result = _invoke(runner, U1, "order", "list", "--page", "0")
    assert result.exit_code == 1
    assert "[INVALID_ARGUMENT]" in result.output


def test_user_id_is_required(runner):
    result = runner.invoke(cli, ["order", "list"])
    assert result.exit_code == 2
    assert "--user-id" in result.output
