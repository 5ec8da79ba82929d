"""
Order Store Factory

Provides a single entry point for obtaining the order store instance.
The factory keeps the rest of the application agnostic about which
backend holds the orders.

Usage:
    from order_dashboard.services.orders import get_order_store

    store = get_order_store()
    orders = await store.list_all()

Environment Switching:
    - ENV_MODE=development → InMemoryOrderStore seeded with demo orders
    - ENV_MODE=staging/production → empty InMemoryOrderStore
      (SEED_DEMO_ORDERS overrides either way)

Author: Order Dashboard Team
Version: 1.0.0
"""

import logging
from functools import lru_cache

from order_dashboard.core.config import get_settings
from order_dashboard.services.orders.base import BaseOrderStore
from order_dashboard.services.orders.mock import InMemoryOrderStore
from order_dashboard.services.orders.seed import seed_orders
from order_dashboard.services.orders.transitions import (
    TransitionValidator,
    strict_validator,
    validator_for,
)

logger = logging.getLogger(__name__)


@lru_cache()
def get_order_store() -> BaseOrderStore:
    """
    Get the configured order store instance.

    The instance is cached (singleton pattern) so every request sees the
    same order collection.

    Returns:
        BaseOrderStore: Configured order store
    """
    settings = get_settings()

    orders = seed_orders() if settings.should_seed_demo_orders else []
    logger.info(
        f"Order Store: Using InMemoryOrderStore "
        f"({settings.env_mode.value} mode, {len(orders)} demo orders)"
    )
    return InMemoryOrderStore(
        orders=orders,
        min_latency=settings.store_min_latency,
        max_latency=settings.store_max_latency,
        transitions=validator_for(settings.enforce_status_transitions),
    )


def reset_order_store() -> None:
    """
    Clear the cached order store instance.

    Useful for testing or when configuration changes at runtime.
    """
    get_order_store.cache_clear()
    logger.debug("Order store cache cleared")


__all__ = [
    "get_order_store",
    "reset_order_store",
    "BaseOrderStore",
    "InMemoryOrderStore",
    "TransitionValidator",
    "seed_orders",
    "strict_validator",
]
