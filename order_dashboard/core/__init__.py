"""
Core module initialization.
Exports configuration, logging utilities and domain exceptions.
"""

from order_dashboard.core.config import get_settings, Settings, EnvironmentMode
from order_dashboard.core.exceptions import (
    OrderDashboardError,
    OrderNotFoundError,
    DuplicateOrderError,
    UnknownColumnError,
    InvalidStatusTransitionError,
)

__all__ = [
    "get_settings",
    "Settings",
    "EnvironmentMode",
    "OrderDashboardError",
    "OrderNotFoundError",
    "DuplicateOrderError",
    "UnknownColumnError",
    "InvalidStatusTransitionError",
]
