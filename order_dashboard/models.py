"""
Domain Models

In-memory order entities for the order board:
- Order status workflow (pending -> ... -> delivered, plus cancelled)
- Pickup/Delivery order types
- Board column definitions

Author: Order Dashboard Team
Version: 1.0.0
"""

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class OrderStatus(str, enum.Enum):
    """Order status workflow, declared in progression order."""
    PENDING = "pending"
    IN_PRODUCTION = "in_production"
    READY = "ready"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderType(str, enum.Enum):
    """Order type - Pickup or Delivery."""
    PICKUP = "pickup"
    DELIVERY = "delivery"


class OrderItem(BaseModel):
    """Single line item of an order."""
    id: str
    product_name: str
    quantity: int = Field(..., ge=1)
    unit_price: Decimal
    # Expected to equal quantity * unit_price; supplied by the caller.
    total_price: Decimal
    notes: Optional[str] = None


class Order(BaseModel):
    """
    One customer order.

    total_amount is caller-supplied and is NOT recomputed from items.
    delivery_address is only meaningful for delivery orders but is not
    enforced against order_type.
    """

    # =========================================================================
    # IDENTITY
    # =========================================================================
    id: str = Field(..., min_length=1, frozen=True)
    order_number: str

    # =========================================================================
    # CUSTOMER INFORMATION
    # =========================================================================
    customer_name: str
    customer_phone: str

    # =========================================================================
    # ORDER DETAILS
    # =========================================================================
    items: list[OrderItem] = Field(default_factory=list)
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    order_type: OrderType = OrderType.DELIVERY
    delivery_address: Optional[str] = None

    # =========================================================================
    # TIMING
    # =========================================================================
    created_at: datetime = Field(frozen=True)
    estimated_time: Optional[int] = Field(None, ge=0, description="Minutes")
    notes: Optional[str] = None

    @property
    def total_items(self) -> int:
        """Number of units across all line items."""
        return sum(item.quantity for item in self.items)

    def __repr__(self):
        return f"<Order {self.order_number} - {self.order_type.value} - {self.customer_name} - {self.status.value}>"


@dataclass(frozen=True)
class OrderStatusColumn:
    """
    A named, colored board column grouping one or more statuses.

    The first status is the one an order receives when it is advanced
    into this column.
    """
    title: str
    statuses: tuple[OrderStatus, ...]
    color: str = "#6b7280"

    def __post_init__(self):
        object.__setattr__(self, "statuses", status_tuple(self.statuses))


def status_tuple(statuses) -> tuple[OrderStatus, ...]:
    """
    Normalize one status or an iterable of statuses to a tuple.

    A bare string is a single status value, never a sequence of characters.
    """
    if isinstance(statuses, str):
        statuses = (statuses,)
    return tuple(OrderStatus(s) for s in statuses)
