"""
Demo orders loaded into the store in development mode.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from order_dashboard.models import Order, OrderItem, OrderStatus, OrderType


def _item(item_id: str, name: str, quantity: int, unit_price: str) -> OrderItem:
    price = Decimal(unit_price)
    return OrderItem(
        id=item_id,
        product_name=name,
        quantity=quantity,
        unit_price=price,
        total_price=price * quantity,
    )


def seed_orders(now: Optional[datetime] = None) -> list[Order]:
    """Six demo orders spread over the three board columns."""
    now = now or datetime.now(timezone.utc)

    return [
        Order(
            id="1",
            order_number="#001",
            customer_name="João Silva",
            customer_phone="(11) 98765-4321",
            items=[
                _item("1", "Pizza Margherita", 1, "45.00"),
                _item("2", "Coca-Cola 2L", 1, "10.00"),
            ],
            total_amount=Decimal("55.00"),
            status=OrderStatus.PENDING,
            order_type=OrderType.DELIVERY,
            delivery_address="Rua das Flores, 123 - Centro",
            created_at=now,
            estimated_time=45,
            notes="No onions",
        ),
        Order(
            id="2",
            order_number="#002",
            customer_name="Maria Santos",
            customer_phone="(11) 91234-5678",
            items=[
                _item("3", "Craft Burger", 2, "35.00"),
                _item("4", "French Fries", 1, "15.00"),
            ],
            total_amount=Decimal("85.00"),
            status=OrderStatus.PENDING,
            order_type=OrderType.DELIVERY,
            delivery_address="Av. Principal, 456 - Jardins",
            created_at=now - timedelta(minutes=5),
            estimated_time=50,
        ),
        Order(
            id="3",
            order_number="#003",
            customer_name="Pedro Costa",
            customer_phone="(11) 99876-5432",
            items=[_item("5", "Sushi Combo", 1, "89.90")],
            total_amount=Decimal("89.90"),
            status=OrderStatus.IN_PRODUCTION,
            order_type=OrderType.DELIVERY,
            delivery_address="Rua do Comércio, 789",
            created_at=now - timedelta(minutes=15),
            estimated_time=30,
        ),
        Order(
            id="4",
            order_number="#004",
            customer_name="Ana Oliveira",
            customer_phone="(11) 97654-3210",
            items=[
                _item("6", "Caesar Salad", 1, "32.00"),
                _item("7", "Fresh Juice", 2, "12.00"),
            ],
            total_amount=Decimal("56.00"),
            status=OrderStatus.IN_PRODUCTION,
            order_type=OrderType.PICKUP,
            created_at=now - timedelta(minutes=10),
            estimated_time=20,
        ),
        Order(
            id="5",
            order_number="#005",
            customer_name="Carlos Mendes",
            customer_phone="(11) 96543-2109",
            items=[_item("8", "Açaí 500ml", 2, "25.00")],
            total_amount=Decimal("50.00"),
            status=OrderStatus.READY,
            order_type=OrderType.DELIVERY,
            delivery_address="Rua Nova, 321",
            created_at=now - timedelta(minutes=20),
            notes="No granola",
        ),
        Order(
            id="6",
            order_number="#006",
            customer_name="Fernanda Lima",
            customer_phone="(11) 95432-1098",
            items=[_item("9", "Beef Pastel", 4, "8.00")],
            total_amount=Decimal("32.00"),
            status=OrderStatus.READY,
            order_type=OrderType.PICKUP,
            created_at=now - timedelta(minutes=25),
        ),
    ]
