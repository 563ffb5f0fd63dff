"""
Order Status Transition Table

The intended order lifecycle:

    NEW -> PACKAGING -> PACKED -> SHIPPED -> DELIVERED -> {RETURNED, EXCHANGE}

Force-set updates ignore this table; the validated advance consults it.
"""

from typing import Dict, FrozenSet

from fulfillo.domain.enums import OrderStatus


ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.NEW: frozenset({OrderStatus.PACKAGING}),
    OrderStatus.PACKAGING: frozenset({OrderStatus.PACKED}),
    OrderStatus.PACKED: frozenset({OrderStatus.SHIPPED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset({OrderStatus.RETURNED, OrderStatus.EXCHANGE}),
    OrderStatus.RETURNED: frozenset(),
    OrderStatus.EXCHANGE: frozenset(),
}

TERMINAL_STATUSES: FrozenSet[OrderStatus] = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    """Check whether ``requested`` is a legal next step from ``current``.

    Re-applying the current status counts as legal so the validated advance
    stays idempotent.
    """
    if current == requested:
        return True
    return requested in ALLOWED_TRANSITIONS[current]


def next_statuses(current: OrderStatus) -> FrozenSet[OrderStatus]:
    """Statuses reachable in one step from ``current``"""
    return ALLOWED_TRANSITIONS[current]
