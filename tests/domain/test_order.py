"""Unit tests for the Order aggregate and its business rules."""

import uuid

import pytest

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.order import Order, OrderLine, OrderStatus
from marketplace.domain.model.value_objects import Money

ORDER_ID = uuid.UUID(int=10)
USER_ID = uuid.UUID(int=1)


def _lines(*product_ints: int, order_id: uuid.UUID = ORDER_ID) -> list[OrderLine]:
    return [
        OrderLine(id=uuid.UUID(int=100 + i), order_id=order_id, product_id=uuid.UUID(int=n))
        for i, n in enumerate(product_ints)
    ]


def _make_order(**overrides) -> Order:
    kwargs = dict(
        id=ORDER_ID,
        user_id=USER_ID,
        lines=_lines(1, 2),
        order_sub_total=Money.of("200.00"),
        shipping_fee=Money.of("10.00"),
        shipping_method="Standard",
        payment_id="payment123",
    )
    kwargs.update(overrides)
    return Order.create(**kwargs)


class TestOrderCreation:

    def test_happy_path(self):
        order = _make_order()
        assert order.user_id == USER_ID
        assert order.status == OrderStatus.PENDING
        assert order.order_sub_total == Money.of("200.00")
        assert len(order.lines) == 2

    def test_total_includes_shipping(self):
        assert _make_order().total == Money.of("210.00")

    def test_lines_keep_request_order(self):
        order = _make_order(lines=_lines(3, 1, 2))
        assert [line.product_id for line in order.lines] == [
            uuid.UUID(int=3),
            uuid.UUID(int=1),
            uuid.UUID(int=2),
        ]

    def test_strips_text_fields(self):
        order = _make_order(shipping_method="  Express ", payment_id=" p-1 ")
        assert order.shipping_method == "Express"
        assert order.payment_id == "p-1"


class TestOrderValidation:

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _make_order(lines=[])

    def test_foreign_line_rejected(self):
        with pytest.raises(ValidationError, match="reference the new order"):
            _make_order(lines=_lines(1, order_id=uuid.UUID(int=11)))

    def test_zero_shipping_fee_rejected(self):
        with pytest.raises(ValidationError, match="Shipping fee must be positive"):
            _make_order(shipping_fee=Money.of("0"))

    def test_total_beyond_money_range_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            _make_order(
                order_sub_total=Money.of("999999999999.99"),
                shipping_fee=Money.of("1.00"),
            )

    @pytest.mark.parametrize("field", ["shipping_method", "payment_id"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_required_text_rejected(self, field, value):
        with pytest.raises(ValidationError, match="is required"):
            _make_order(**{field: value})


class TestOrderStatusTransitions:

    def test_full_happy_path(self):
        order = _make_order()
        for status in (
            OrderStatus.AWAITING_PAYMENT,
            OrderStatus.PAID,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        ):
            order.transition_to(status)
        assert order.status == OrderStatus.DELIVERED

    def test_same_status_is_noop(self):
        order = _make_order()
        order.transition_to(OrderStatus.PENDING)
        assert order.status == OrderStatus.PENDING

    def test_cannot_skip_payment(self):
        order = _make_order()
        with pytest.raises(ValidationError, match="from PENDING to SHIPPED"):
            order.transition_to(OrderStatus.SHIPPED)
        assert order.status == OrderStatus.PENDING

    def test_cannot_cancel_shipped_order(self):
        order = _make_order()
        order.transition_to(OrderStatus.AWAITING_PAYMENT)
        order.transition_to(OrderStatus.PAID)
        order.transition_to(OrderStatus.SHIPPED)
        with pytest.raises(ValidationError, match="Cannot move order"):
            order.transition_to(OrderStatus.CANCELLED)

    @pytest.mark.parametrize("terminal", [OrderStatus.CANCELLED, OrderStatus.DELIVERED])
    def test_terminal_states_are_final(self, terminal):
        order = _make_order()
        order.status = terminal  # reconstituted as if loaded from storage
        with pytest.raises(ValidationError):
            order.transition_to(OrderStatus.AWAITING_PAYMENT)

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse("awaiting_payment") == OrderStatus.AWAITING_PAYMENT

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("teleported")


class TestOrderPatchableFields:

    def test_change_shipping_keeps_subtotal(self):
        order = _make_order()
        order.change_shipping(shipping_fee=Money.of("15.00"), shipping_method="Express")
        assert order.shipping_fee == Money.of("15.00")
        assert order.shipping_method == "Express"
        assert order.order_sub_total == Money.of("200.00")

    def test_change_shipping_rejects_zero_fee(self):
        order = _make_order()
        with pytest.raises(ValidationError, match="must be positive"):
            order.change_shipping(shipping_fee=Money.of("0.00"))

    def test_change_payment(self):
        order = _make_order()
        order.change_payment("payment456")
        assert order.payment_id == "payment456"

    def test_mutation_refreshes_updated_at(self):
        order = _make_order()
        before = order.updated_at
        order.change_payment("payment456")
        assert order.updated_at >= before
