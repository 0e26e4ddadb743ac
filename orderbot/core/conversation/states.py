"""
Conversation states for order collection.

Every state is a small frozen dataclass carrying only what has been
collected so far, so a session can never hold an address without a product.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class Stage(Enum):
    """Stages of the order conversation, in flow order."""
    IDLE = "idle"                            # Главное меню
    AWAITING_PRODUCT = "awaiting_product"    # Ввод заказа
    AWAITING_QUANTITY = "awaiting_quantity"  # Ввод количества (опционально)
    AWAITING_ADDRESS = "awaiting_address"    # Ввод адреса доставки
    AWAITING_PHONE = "awaiting_phone"        # Ввод телефона


@dataclass(frozen=True)
class Idle:
    stage: ClassVar[Stage] = Stage.IDLE


@dataclass(frozen=True)
class AwaitingProduct:
    stage: ClassVar[Stage] = Stage.AWAITING_PRODUCT


@dataclass(frozen=True)
class AwaitingQuantity:
    product: str

    stage: ClassVar[Stage] = Stage.AWAITING_QUANTITY


@dataclass(frozen=True)
class AwaitingAddress:
    product: str
    quantity: Optional[int] = None

    stage: ClassVar[Stage] = Stage.AWAITING_ADDRESS


@dataclass(frozen=True)
class AwaitingPhone:
    product: str
    address: str
    quantity: Optional[int] = None

    stage: ClassVar[Stage] = Stage.AWAITING_PHONE


ConversationState = Union[Idle, AwaitingProduct, AwaitingQuantity, AwaitingAddress, AwaitingPhone]
