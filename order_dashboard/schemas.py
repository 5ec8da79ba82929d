"""
Pydantic Schemas for Request/Response Validation

Order board API:
- Status updates
- Board projection with per-order display fields
- Move-to-next-column results

Author: Order Dashboard Team
Version: 1.0.0
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from pydantic import BaseModel, Field

from order_dashboard.models import Order, OrderItem, OrderStatus, OrderType


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class StatusUpdateRequest(BaseModel):
    """Request schema for overwriting an order status."""
    status: OrderStatus = Field(..., examples=["in_production"])


class AdvanceRequest(BaseModel):
    """Request schema for moving an order to the next board column."""
    column: str = Field(..., min_length=1, examples=["Pending"])


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class OrderResponse(BaseModel):
    """Response schema for a single order."""
    id: str
    order_number: str
    customer_name: str
    customer_phone: str
    items: List[OrderItem]
    total_items: int
    total_amount: Decimal
    status: OrderStatus
    order_type: OrderType
    delivery_address: Optional[str]
    created_at: datetime
    estimated_time: Optional[int]
    notes: Optional[str]

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(total_items=order.total_items, **order.model_dump())


class OrderListResponse(BaseModel):
    """Response for listing multiple orders."""
    total: int
    orders: List[OrderResponse]


class BoardOrder(OrderResponse):
    """Order as shown on a board card."""
    elapsed: str


class BoardColumnResponse(BaseModel):
    """One board column and the orders currently in it."""
    title: str
    color: str
    statuses: List[OrderStatus]
    orders: List[BoardOrder]


class BoardResponse(BaseModel):
    """Full board projection, columns in configured order."""
    columns: List[BoardColumnResponse]
    generated_at: datetime


class AdvanceResponse(BaseModel):
    """Response after a move-to-next-column request."""
    success: bool
    message: str
    order_id: str
    moved: bool
    new_status: Optional[OrderStatus] = None
    board: BoardResponse


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    order_store: str
    orders: int
    timestamp: datetime
