"""
Domain Exceptions

Every failure the order store and board can signal to a caller.
The HTTP layer maps them to status codes in one place (main.py).

Author: Order Dashboard Team
Version: 1.0.0
"""

from typing import Any


class OrderDashboardError(Exception):
    """Base class for all order dashboard errors."""


class OrderNotFoundError(OrderDashboardError):
    """No order with the given id exists in the store."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id!r} not found")


class DuplicateOrderError(OrderDashboardError):
    """An order with the given id is already in the store."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id!r} already exists")


class UnknownColumnError(OrderDashboardError):
    """The column is not part of the configured board."""

    def __init__(self, column: Any):
        self.column = column
        super().__init__(f"Column {column!r} is not configured on this board")


class InvalidStatusTransitionError(OrderDashboardError):
    """The requested status is not an allowed successor of the current one."""

    def __init__(self, order_id: str, current: Any, target: Any):
        self.order_id = order_id
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid status transition for order {order_id!r}: "
            f"{getattr(current, 'value', current)} -> {getattr(target, 'value', target)}"
        )
