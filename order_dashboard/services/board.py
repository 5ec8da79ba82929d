"""
Order Board

Projects the order collection onto a kanban board and moves orders
from one column to the next.

Two pieces:
- BoardProjector: pure functions over a snapshot of orders and a fixed,
  ordered column configuration. Holds no mutable state.
- OrderBoard: drives the move protocol against the order store
  (compute next status, write it, re-read, re-project). The board view is
  never mutated locally; it always comes from a full re-read.

Author: Order Dashboard Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Iterable, Optional, Sequence

from order_dashboard.core.exceptions import UnknownColumnError
from order_dashboard.models import Order, OrderStatus, OrderStatusColumn
from order_dashboard.services.orders.base import BaseOrderStore

logger = logging.getLogger(__name__)

# Board projection: column title -> orders, in column order.
Board = dict[str, list[Order]]


DEFAULT_COLUMNS: tuple[OrderStatusColumn, ...] = (
    OrderStatusColumn("Pending", (OrderStatus.PENDING,), "#f59e0b"),
    OrderStatusColumn("In Production", (OrderStatus.IN_PRODUCTION,), "#3b82f6"),
    OrderStatusColumn("Ready", (OrderStatus.READY,), "#10b981"),
)


class BoardProjector:
    """
    Partitions orders into an ordered list of status columns.

    The column order defines what "next column" means. Statuses that no
    column holds (out_for_delivery, delivered, cancelled in the default
    layout) are not shown on the board.
    """

    def __init__(self, columns: Iterable[OrderStatusColumn] = DEFAULT_COLUMNS):
        self.columns: tuple[OrderStatusColumn, ...] = tuple(columns)
        self._validate()
        self._by_status: dict[OrderStatus, OrderStatusColumn] = {
            status: column
            for column in self.columns
            for status in column.statuses
        }

    def _validate(self) -> None:
        if not self.columns:
            raise ValueError("A board needs at least one column")

        titles: set[str] = set()
        seen: set[OrderStatus] = set()
        for column in self.columns:
            if column.title in titles:
                raise ValueError(f"Duplicate column title {column.title!r}")
            titles.add(column.title)

            if not column.statuses:
                raise ValueError(f"Column {column.title!r} has no statuses")

            overlap = seen.intersection(column.statuses)
            if overlap:
                names = sorted(s.value for s in overlap)
                raise ValueError(
                    f"Statuses {names} are mapped to more than one column"
                )
            seen.update(column.statuses)

    # -------------------- lookup --------------------

    def column(self, title: str) -> OrderStatusColumn:
        """Return the configured column with this title."""
        for column in self.columns:
            if column.title == title:
                return column
        raise UnknownColumnError(title)

    def column_for(self, status: OrderStatus) -> Optional[OrderStatusColumn]:
        """Column holding ``status``, or None when the board does not show it."""
        return self._by_status.get(status)

    # -------------------- projection --------------------

    def project(self, orders: Sequence[Order]) -> Board:
        """
        Group orders by column, keeping their relative order.

        Every configured column is present in the result, possibly empty.
        """
        board: Board = {column.title: [] for column in self.columns}
        for order in orders:
            column = self.column_for(order.status)
            if column is None:
                continue
            board[column.title].append(order)
        return board

    def advance(
        self,
        order: Order,
        current_column: OrderStatusColumn,
    ) -> Optional[OrderStatus]:
        """
        Status an order gets when moved out of ``current_column``.

        Returns the first status of the following column, or None when
        ``current_column`` is the last one. The order's own status is not
        consulted.

        Raises:
            UnknownColumnError: If the column is not on this board
        """
        try:
            index = self.columns.index(current_column)
        except ValueError:
            raise UnknownColumnError(current_column) from None

        if index == len(self.columns) - 1:
            return None
        return self.columns[index + 1].statuses[0]

    @staticmethod
    def elapsed(order: Order, now: Optional[datetime] = None) -> str:
        """
        Human readable age of an order.

        Under a minute is "now", under 60 minutes "<n> min ago", anything
        else "<n> h ago". Units are floored. Timestamps without a timezone
        are read as UTC.
        """
        now = as_utc(now) if now is not None else utcnow()
        minutes = (now - as_utc(order.created_at)) // timedelta(minutes=1)

        if minutes < 1:
            return "now"
        if minutes < 60:
            return f"{minutes} min ago"
        return f"{minutes // 60} h ago"


@dataclass
class BoardMove:
    """
    Result of moving an order to the next column.

    Attributes:
        order_id: Id of the order that was asked to move
        moved: False when the order was already in the last column
        new_status: Status written to the store, if any
        board: Board re-projected from a fresh read of the store
    """
    order_id: str
    moved: bool
    new_status: Optional[OrderStatus]
    board: Board


class OrderBoard:
    """Runs the move-to-next-column protocol against an order store."""

    def __init__(self, store: BaseOrderStore, projector: BoardProjector):
        self.store = store
        self.projector = projector

    async def load(self) -> Board:
        orders = await self.store.list_all()
        return self.projector.project(orders)

    async def move_to_next_status(self, order_id: str, column_title: str) -> BoardMove:
        """
        Move one order from ``column_title`` to the following column.

        Raises:
            UnknownColumnError: If no column has this title
            OrderNotFoundError: If the order does not exist
        """
        column = self.projector.column(column_title)
        order = await self.store.get(order_id)

        new_status = self.projector.advance(order, column)
        if new_status is None:
            logger.debug(
                f"Order {order.order_number} is in the last column "
                f"({column.title}); nothing to do"
            )
            return BoardMove(order_id, False, None, await self.load())

        await self.store.update_status(order_id, new_status)
        logger.info(
            f"Order {order.order_number} moved from {column.title!r} "
            f"to {new_status.value}"
        )
        return BoardMove(order_id, True, new_status, await self.load())


@lru_cache()
def get_board_projector() -> BoardProjector:
    """Projector over the default three-column layout."""
    return BoardProjector(DEFAULT_COLUMNS)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


__all__ = [
    "Board",
    "BoardMove",
    "BoardProjector",
    "DEFAULT_COLUMNS",
    "OrderBoard",
    "get_board_projector",
    "as_utc",
    "utcnow",
]
