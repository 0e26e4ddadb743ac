"""
Orders module for the order bot.
Handles order creation and bookkeeping.
"""

from orderbot.core.orders.models import Order, OrderStatus, derive_display_name
from orderbot.core.orders.ledger import OrderLedger, generate_order_id
from orderbot.core.orders.validators import QuantityValidator

__all__ = [
    # Models
    "Order",
    "OrderStatus",
    "derive_display_name",
    # Ledger
    "OrderLedger",
    "generate_order_id",
    # Validators
    "QuantityValidator",
]
