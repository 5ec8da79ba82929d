"""
FastAPI Application Entry Point

Restaurant Order Dashboard - order board backend.
Serves the in-memory order store and the kanban board projection.

Endpoints:
    - GET /api/orders: List orders (optionally filtered by status)
    - GET /api/orders/{order_id}: Single order
    - PATCH /api/orders/{order_id}/status: Overwrite an order status
    - GET /api/board: Board projection
    - POST /api/board/orders/{order_id}/advance: Move an order to the next column
    - GET /health: System health check

Author: Order Dashboard Team
Version: 1.0.0
"""

import logging
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Depends, Query, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from order_dashboard.core.config import get_settings, setup_logging
from order_dashboard.core.exceptions import (
    InvalidStatusTransitionError,
    OrderNotFoundError,
    UnknownColumnError,
)
from order_dashboard.models import OrderStatus
from order_dashboard.schemas import (
    AdvanceRequest,
    AdvanceResponse,
    BoardColumnResponse,
    BoardOrder,
    BoardResponse,
    ErrorResponse,
    HealthResponse,
    OrderListResponse,
    OrderResponse,
    StatusUpdateRequest,
)
from order_dashboard.services.board import (
    Board,
    BoardProjector,
    OrderBoard,
    get_board_projector,
    utcnow,
)
from order_dashboard.services.orders import BaseOrderStore, get_order_store

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    store = get_order_store()
    projector = get_board_projector()
    logger.info(f"✅ Order Store: {store.provider_name}")
    logger.info(
        f"✅ Board columns: {[column.title for column in projector.columns]}"
    )
    if settings.enforce_status_transitions:
        logger.info("✅ Strict status transitions enabled")

    logger.info("=" * 60)
    logger.info("✅ Application ready!")
    logger.info("=" * 60)

    yield  # Application runs

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description=(
        "Order board backend: order store with simulated latency and a "
        "kanban projection of orders through preparation states."
    ),
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_order_board(
    store: BaseOrderStore = Depends(get_order_store),
    projector: BoardProjector = Depends(get_board_projector),
) -> OrderBoard:
    """Board bound to the current store and column layout."""
    return OrderBoard(store, projector)


def render_board(board: Board, projector: BoardProjector) -> BoardResponse:
    """Turn a board projection into its response schema."""
    now = utcnow()
    columns = []
    for column in projector.columns:
        orders = [
            BoardOrder(
                elapsed=projector.elapsed(order, now),
                total_items=order.total_items,
                **order.model_dump(),
            )
            for order in board[column.title]
        ]
        columns.append(
            BoardColumnResponse(
                title=column.title,
                color=column.color,
                statuses=list(column.statuses),
                orders=orders,
            )
        )
    return BoardResponse(columns=columns, generated_at=now)


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"🍽️ Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "board": "/api/board",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check(
    store: BaseOrderStore = Depends(get_order_store),
) -> HealthResponse:
    """Verify the order store is operational."""
    healthy = await store.health_check()
    orders = await store.list_all() if healthy else []

    return HealthResponse(
        status="operational" if healthy else "degraded",
        order_store="healthy" if healthy else "unhealthy",
        orders=len(orders),
        timestamp=utcnow(),
    )


# =============================================================================
# ORDER API ENDPOINTS
# =============================================================================

@app.get(
    "/api/orders",
    response_model=OrderListResponse,
    tags=["Orders"],
    summary="List Orders",
)
async def list_orders(
    status: Optional[List[OrderStatus]] = Query(None),
    store: BaseOrderStore = Depends(get_order_store),
) -> OrderListResponse:
    """Retrieve all orders, or only those in the given statuses."""
    if status:
        orders = await store.list_by_status(set(status))
    else:
        orders = await store.list_all()

    return OrderListResponse(
        total=len(orders),
        orders=[OrderResponse.from_order(order) for order in orders],
    )


@app.get(
    "/api/orders/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Orders"],
)
async def get_order(
    order_id: str,
    store: BaseOrderStore = Depends(get_order_store),
) -> OrderResponse:
    """Get a specific order by ID."""
    try:
        order = await store.get(order_id)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    return OrderResponse.from_order(order)


@app.patch(
    "/api/orders/{order_id}/status",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="Update Order Status",
)
async def update_order_status(
    order_id: str,
    body: StatusUpdateRequest,
    store: BaseOrderStore = Depends(get_order_store),
) -> OrderResponse:
    """Overwrite the status of one order."""
    logger.info(f"Status update requested: {order_id} -> {body.status.value}")

    try:
        order = await store.update_status(order_id, body.status)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return OrderResponse.from_order(order)


# =============================================================================
# BOARD ENDPOINTS
# =============================================================================

@app.get(
    "/api/board",
    response_model=BoardResponse,
    tags=["Board"],
    summary="Order Board",
)
async def get_board(
    board: OrderBoard = Depends(get_order_board),
) -> BoardResponse:
    """Orders grouped into the configured board columns."""
    return render_board(await board.load(), board.projector)


@app.post(
    "/api/board/orders/{order_id}/advance",
    response_model=AdvanceResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    tags=["Board"],
    summary="Move Order To Next Column",
)
async def advance_order(
    order_id: str,
    body: AdvanceRequest,
    board: OrderBoard = Depends(get_order_board),
) -> AdvanceResponse:
    """
    Move an order from the given column to the next one.

    The returned board is re-read from the store after the write.
    """
    try:
        move = await board.move_to_next_status(order_id, body.column)
    except UnknownColumnError:
        raise HTTPException(status_code=400, detail=f"Unknown column: {body.column}")
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if move.moved:
        message = f"Order moved to {move.new_status.value}"
    else:
        message = f"Order is already in the last column ({body.column})"

    return AdvanceResponse(
        success=True,
        message=message,
        order_id=order_id,
        moved=move.moved,
        new_status=move.new_status,
        board=render_board(move.board, board.projector),
    )


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal Server Error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "order_dashboard.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
