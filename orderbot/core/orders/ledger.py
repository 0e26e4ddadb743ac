"""
In-memory, append-only order ledger.
"""

import logging
import threading
import uuid
from datetime import datetime
from typing import Optional

from orderbot.core.orders.models import Order, OrderStatus

logger = logging.getLogger(__name__)


def generate_order_id() -> str:
    """Short random order identifier, e.g. "3F9A0C1B"."""
    return uuid.uuid4().hex[:8].upper()


class OrderLedger:
    """Create orders and keep them in creation order for the process lifetime."""

    def __init__(self):
        self._orders: list[Order] = []
        self._ids: set[str] = set()
        self._lock = threading.Lock()

    def create(
        self,
        user_id: int,
        display_name: str,
        product: str,
        address: str,
        phone: str,
        quantity: Optional[int] = None,
    ) -> Order:
        """
        Create an order and append it to the ledger.

        Never fails: input validation happens in the conversation flow.
        Identifiers are unique within the ledger.
        """
        with self._lock:
            order_id = generate_order_id()
            while order_id in self._ids:
                order_id = generate_order_id()

            order = Order(
                id=order_id,
                user_id=user_id,
                display_name=display_name,
                product=product,
                address=address,
                phone=phone,
                quantity=quantity,
                created_at=datetime.now(),
                status=OrderStatus.NEW,
            )
            self._orders.append(order)
            self._ids.add(order_id)

        logger.info(f"Order {order.id} created for user {user_id}")
        return order

    def __len__(self) -> int:
        return len(self._orders)

    def list(self) -> tuple[Order, ...]:
        """Snapshot of all orders in creation order."""
        with self._lock:
            return tuple(self._orders)
