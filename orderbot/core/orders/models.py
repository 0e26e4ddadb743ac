"""
Order models for the order bot.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from html import escape
from typing import Optional


# Telegram rejects longer messages
MAX_MESSAGE_LENGTH = 4096

# Per-field caps keep a formatted order well under MAX_MESSAGE_LENGTH
PRODUCT_MAX_LENGTH = 1500
ADDRESS_MAX_LENGTH = 500
SHORT_FIELD_MAX_LENGTH = 64


def _text_length(text: str) -> int:
    """Length as Telegram counts it, in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2


def clip_html(value: str, limit: int) -> str:
    """HTML-escape user text, cutting it with "…" to at most limit units."""
    escaped = escape(value)
    if _text_length(escaped) <= limit:
        return escaped

    parts = []
    size = 0
    for char in value:
        piece = escape(char)
        size += _text_length(piece)
        if size > limit - 1:
            break
        parts.append(piece)
    return "".join(parts) + "…"


class OrderStatus(Enum):
    """Order status enum."""
    NEW = "new"                  # Создан, передан диспетчеру


def derive_display_name(
    username: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
) -> str:
    """
    Best-effort human-readable name of a chat user.

    Prefers the username, then "first last", then the first name alone.
    """
    if username:
        return username
    if first_name and last_name:
        return f"{first_name} {last_name}"
    return first_name or last_name or ""


@dataclass(frozen=True)
class Order:
    """Completed order, immutable once created."""
    id: str
    user_id: int
    display_name: str
    product: str
    address: str
    phone: str
    quantity: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)
    status: OrderStatus = OrderStatus.NEW

    @property
    def order_number(self) -> str:
        """Human-readable order number."""
        return f"#{self.id}"

    def _format_fields(self) -> list[str]:
        lines = [f"🛒 <b>Продукт:</b> {clip_html(self.product, PRODUCT_MAX_LENGTH)}"]
        if self.quantity is not None:
            lines.append(f"🔢 <b>Количество:</b> {self.quantity}")
        lines.append(f"📍 <b>Адрес:</b> {clip_html(self.address, ADDRESS_MAX_LENGTH)}")
        lines.append(f"📞 <b>Телефон:</b> {clip_html(self.phone, SHORT_FIELD_MAX_LENGTH)}")
        return lines

    def format_confirmation(self) -> str:
        """Format order confirmation for the customer."""
        lines = [
            "✅ <b>Ваш заказ принят!</b>",
            "",
            f"Номер заказа: <b>{self.order_number}</b>",
            *self._format_fields(),
            "",
            "Ваш заказ направлен диспетчеру. "
            "С вами свяжутся в ближайшее время для подтверждения.",
        ]
        return "\n".join(lines)

    def format_dispatcher_notice(self) -> str:
        """Format new order notification for the dispatcher."""
        client = clip_html(self.display_name, SHORT_FIELD_MAX_LENGTH) if self.display_name else "—"
        lines = [
            f"🚨 <b>НОВЫЙ ЗАКАЗ {self.order_number}</b>",
            "",
            f"👤 <b>Клиент:</b> {client} (id {self.user_id})",
            *self._format_fields(),
            f"🕐 <b>Время:</b> {self.created_at.strftime('%H:%M %d.%m.%Y')}",
        ]
        return "\n".join(lines)
