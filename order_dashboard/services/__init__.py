"""
                        Services Module

Contains the business logic behind the order board.

Services:
    - orders: order store (base interface, in-memory implementation, factory)
    - board: board projection and move-to-next-column protocol
"""

from order_dashboard.services.board import BoardProjector, OrderBoard
from order_dashboard.services.orders import get_order_store

__all__ = ["BoardProjector", "OrderBoard", "get_order_store"]
