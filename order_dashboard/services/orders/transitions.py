"""
Order Status Transition Policy

Small finite state machine for order statuses.

Usage:
    from order_dashboard.services.orders.transitions import TransitionValidator

    STRICT = TransitionValidator(ORDER_STATUS_GRAPH)
    STRICT.assert_can_transition(order_id, current, target)

The in-memory store runs without a validator by default, accepting any
status unconditionally. Set ENFORCE_STATUS_TRANSITIONS=true to use the
graph below.
"""

from typing import Mapping, Optional

from order_dashboard.core.exceptions import InvalidStatusTransitionError
from order_dashboard.models import OrderStatus

# Forward progression; cancelled is a side branch.
STATUS_PROGRESSION: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.IN_PRODUCTION,
    OrderStatus.READY,
    OrderStatus.OUT_FOR_DELIVERY,
    OrderStatus.DELIVERED,
)

TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset(
    {OrderStatus.DELIVERED, OrderStatus.CANCELLED}
)


def _build_graph() -> dict[OrderStatus, frozenset[OrderStatus]]:
    graph: dict[OrderStatus, frozenset[OrderStatus]] = {}
    for index, status in enumerate(STATUS_PROGRESSION):
        later = set(STATUS_PROGRESSION[index + 1:])
        if status not in TERMINAL_STATUSES:
            later.add(OrderStatus.CANCELLED)
        graph[status] = frozenset(later)
    graph[OrderStatus.CANCELLED] = frozenset()
    return graph


# Any strictly later stage, or cancellation from a non-terminal state.
ORDER_STATUS_GRAPH: Mapping[OrderStatus, frozenset[OrderStatus]] = _build_graph()


class TransitionValidator:
    def __init__(self, graph: Mapping[OrderStatus, frozenset[OrderStatus]]):
        self.graph = graph

    def allowed(self, current: OrderStatus) -> frozenset[OrderStatus]:
        return self.graph.get(current, frozenset())

    def can_transition(self, current: OrderStatus, target: OrderStatus) -> bool:
        return target in self.allowed(current)

    def assert_can_transition(
        self,
        order_id: str,
        current: OrderStatus,
        target: OrderStatus,
    ) -> bool:
        if not self.can_transition(current, target):
            raise InvalidStatusTransitionError(order_id, current, target)
        return True


def strict_validator() -> TransitionValidator:
    """Validator over the default order status graph."""
    return TransitionValidator(ORDER_STATUS_GRAPH)


def validator_for(enforce: bool) -> Optional[TransitionValidator]:
    return strict_validator() if enforce else None


__all__ = [
    "STATUS_PROGRESSION",
    "TERMINAL_STATUSES",
    "ORDER_STATUS_GRAPH",
    "TransitionValidator",
    "strict_validator",
    "validator_for",
]
