"""
Order Store Abstract Base Class

Defines the interface contract for all order store implementations.
InMemoryOrderStore implements it today; a persistence-backed store would
replace it behind the same seam without touching the board.

Design Pattern: Strategy Pattern
    - Allows swapping the storage backend via configuration
    - Facilitates testing with in-memory implementations

Author: Order Dashboard Team
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Iterable

from order_dashboard.models import Order, OrderStatus


class BaseOrderStore(ABC):
    """
    Abstract base class for order stores.

    The store is the sole owner of the order collection. All operations
    are coroutines and callers must treat every call as a suspension point.

    Example:
        >>> store = get_order_store()
        >>> orders = await store.list_all()
        >>> updated = await store.update_status(orders[0].id, OrderStatus.READY)
        >>> print(updated.status)
        OrderStatus.READY
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the store backend.

        Returns:
            str: Backend name (e.g., "memory")
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[Order]:
        """
        Return every order currently held, in insertion order.

        Returns:
            list[Order]: Snapshots of all orders
        """
        pass

    @abstractmethod
    async def list_by_status(self, statuses: Iterable[OrderStatus]) -> list[Order]:
        """
        Return the orders whose status is one of ``statuses``.

        Relative insertion order is preserved. An empty set yields an
        empty list.

        Args:
            statuses: Statuses to keep; a single status is also accepted

        Returns:
            list[Order]: Matching order snapshots
        """
        pass

    @abstractmethod
    async def get(self, order_id: str) -> Order:
        """
        Return a single order.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        pass

    @abstractmethod
    async def update_status(self, order_id: str, new_status: OrderStatus) -> Order:
        """
        Overwrite the status of one order.

        Either the new status is fully applied or the order is left
        untouched.

        Args:
            order_id: Id of the order to update
            new_status: Status to write

        Returns:
            Order: Snapshot of the updated order

        Raises:
            OrderNotFoundError: If no order has this id
            InvalidStatusTransitionError: If a transition policy rejects it
        """
        pass

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """
        Insert a new order.

        Raises:
            DuplicateOrderError: If the id is already taken
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Verify the store is operational.

        Returns:
            bool: True if the store can serve requests
        """
        pass
