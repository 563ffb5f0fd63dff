"""
Unit Tests - Order Status Transitions
"""
import pytest

from fulfillo.domain.enums import OrderStatus
from fulfillo.domain.transitions import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    can_transition,
    next_statuses,
)


class TestTransitionTable:
    """Tests for the order lifecycle table"""

    @pytest.mark.parametrize("current,requested", [
        (OrderStatus.NEW, OrderStatus.PACKAGING),
        (OrderStatus.PACKAGING, OrderStatus.PACKED),
        (OrderStatus.PACKED, OrderStatus.SHIPPED),
        (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
        (OrderStatus.DELIVERED, OrderStatus.RETURNED),
        (OrderStatus.DELIVERED, OrderStatus.EXCHANGE),
    ])
    def test_forward_steps_allowed(self, current, requested):
        assert can_transition(current, requested)

    @pytest.mark.parametrize("current,requested", [
        (OrderStatus.NEW, OrderStatus.SHIPPED),
        (OrderStatus.PACKED, OrderStatus.PACKAGING),
        (OrderStatus.SHIPPED, OrderStatus.RETURNED),
        (OrderStatus.RETURNED, OrderStatus.NEW),
    ])
    def test_skips_and_reversals_rejected(self, current, requested):
        assert not can_transition(current, requested)

    def test_same_status_is_allowed(self):
        assert all(can_transition(s, s) for s in OrderStatus)

    def test_terminal_statuses(self):
        assert TERMINAL_STATUSES == {OrderStatus.RETURNED, OrderStatus.EXCHANGE}
        assert next_statuses(OrderStatus.EXCHANGE) == frozenset()

    def test_every_status_has_an_entry(self):
        assert set(ALLOWED_TRANSITIONS) == set(OrderStatus)
