"""
In-Memory Order Store Implementation

Holds orders in process memory and simulates backend latency.
Used until a persistence backend is wired in behind BaseOrderStore.

Behavior:
    - Every operation awaits a simulated delay (default 300ms)
    - Returns deep copies so callers can never mutate stored orders
    - Serializes status updates with an asyncio.Lock
    - Optionally rejects illegal status transitions

Author: Order Dashboard Team
Version: 1.0.0
"""

import asyncio
import random
import logging
from typing import Iterable, Optional

from order_dashboard.core.exceptions import DuplicateOrderError, OrderNotFoundError
from order_dashboard.models import Order, OrderStatus, status_tuple
from order_dashboard.services.orders.base import BaseOrderStore
from order_dashboard.services.orders.transitions import TransitionValidator

logger = logging.getLogger(__name__)


class InMemoryOrderStore(BaseOrderStore):
    """
    In-memory implementation of the order store.

    Attributes:
        min_latency: Minimum simulated response time in seconds
        max_latency: Maximum simulated response time in seconds
        transitions: Optional validator applied before each status write

    Example:
        >>> store = InMemoryOrderStore(seed_orders(), min_latency=0, max_latency=0)
        >>> pending = await store.list_by_status({OrderStatus.PENDING})
    """

    def __init__(
        self,
        orders: Optional[Iterable[Order]] = None,
        min_latency: float = 0.3,
        max_latency: float = 0.3,
        transitions: Optional[TransitionValidator] = None,
    ):
        """
        Initialize the store.

        Args:
            orders: Initial orders, kept in the given order
            min_latency: Minimum response time in seconds
            max_latency: Maximum response time in seconds
            transitions: Status transition policy (None = unconstrained)

        Raises:
            DuplicateOrderError: If two initial orders share an id
        """
        if min_latency > max_latency:
            raise ValueError("min_latency must not exceed max_latency")

        self.min_latency = min_latency
        self.max_latency = max_latency
        self.transitions = transitions

        # dict keeps insertion order and gives O(1) lookup by id
        self._orders: dict[str, Order] = {}
        self._lock = asyncio.Lock()

        for order in orders or ():
            self._insert(order)

        logger.info(
            f"InMemoryOrderStore initialized "
            f"(orders={len(self._orders)}, "
            f"latency={min_latency}-{max_latency}s, "
            f"strict_transitions={transitions is not None})"
        )

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "memory"

    async def _simulate_latency(self) -> float:
        """
        Simulate network latency.

        asyncio.sleep yields to the event loop even for a zero delay.

        Returns:
            float: Latency in milliseconds
        """
        latency = random.uniform(self.min_latency, self.max_latency)
        await asyncio.sleep(latency)
        return latency * 1000

    def _insert(self, order: Order) -> None:
        if order.id in self._orders:
            raise DuplicateOrderError(order.id)
        self._orders[order.id] = order.model_copy(deep=True)

    @staticmethod
    def _snapshot(order: Order) -> Order:
        return order.model_copy(deep=True)

    async def list_all(self) -> list[Order]:
        await self._simulate_latency()
        return [self._snapshot(o) for o in self._orders.values()]

    async def list_by_status(self, statuses: Iterable[OrderStatus]) -> list[Order]:
        wanted = set(status_tuple(statuses))
        await self._simulate_latency()
        if not wanted:
            return []
        return [self._snapshot(o) for o in self._orders.values() if o.status in wanted]

    async def get(self, order_id: str) -> Order:
        await self._simulate_latency()
        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return self._snapshot(order)

    async def update_status(self, order_id: str, new_status: OrderStatus) -> Order:
        new_status = OrderStatus(new_status)
        await self._simulate_latency()

        async with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                logger.warning(f"Status update for unknown order {order_id!r}")
                raise OrderNotFoundError(order_id)

            previous = order.status
            if self.transitions is not None:
                self.transitions.assert_can_transition(order_id, previous, new_status)

            order.status = new_status
            updated = self._snapshot(order)

        logger.info(
            f"Order {updated.order_number} ({order_id}): "
            f"{previous.value} -> {new_status.value}"
        )
        return updated

    async def add(self, order: Order) -> Order:
        await self._simulate_latency()
        async with self._lock:
            self._insert(order)
        logger.info(f"Order {order.order_number} ({order.id}) added")
        return self._snapshot(order)

    async def health_check(self) -> bool:
        """In-memory store is always healthy."""
        logger.debug("Memory: Order store health check passed")
        return True
