"""
Pure transition function of the order conversation.

advance() takes the current state and an incoming text and returns the next
state, the replies for the customer and, when the last answer arrives, the
collected order data. It performs no I/O and never raises for any text.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from orderbot.core.conversation.messages import (
    ADDRESS_PROMPT,
    MAIN_MENU,
    MAKE_ORDER_BUTTON,
    Menu,
    PHONE_PROMPT,
    PRICE_LIST_BUTTON,
    PRICE_LIST_MESSAGE,
    PRODUCT_PROMPT,
    QUANTITY_PROMPT,
    WELCOME_MESSAGE,
)
from orderbot.core.conversation.states import (
    AwaitingAddress,
    AwaitingPhone,
    AwaitingProduct,
    AwaitingQuantity,
    ConversationState,
    Idle,
)
from orderbot.core.orders.validators import QuantityValidator


@dataclass(frozen=True)
class ConversationFlow:
    """Which optional stages take part in the conversation."""
    collect_quantity: bool = False


@dataclass(frozen=True)
class Reply:
    """Message for the customer."""
    text: str
    menu: Optional[Menu] = None


@dataclass(frozen=True)
class Submission:
    """Answers collected by a finished conversation."""
    product: str
    address: str
    phone: str
    quantity: Optional[int] = None


@dataclass(frozen=True)
class Transition:
    state: ConversationState
    replies: Tuple[Reply, ...] = ()
    submission: Optional[Submission] = None


def _welcome() -> Reply:
    return Reply(WELCOME_MESSAGE, menu=MAIN_MENU)


def _handle_idle(text: str) -> Transition:
    button = text.strip()
    if button == PRICE_LIST_BUTTON:
        return Transition(Idle(), (Reply(PRICE_LIST_MESSAGE),))
    if button == MAKE_ORDER_BUTTON:
        return Transition(AwaitingProduct(), (Reply(PRODUCT_PROMPT),))
    # /start and any unrecognized text show the menu again
    return Transition(Idle(), (_welcome(),))


def _handle_product(text: str, flow: ConversationFlow) -> Transition:
    if flow.collect_quantity:
        return Transition(AwaitingQuantity(product=text), (Reply(QUANTITY_PROMPT),))
    return Transition(AwaitingAddress(product=text), (Reply(ADDRESS_PROMPT),))


def _handle_quantity(state: AwaitingQuantity, text: str) -> Transition:
    is_valid, quantity, error = QuantityValidator.validate(text)
    if not is_valid:
        return Transition(state, (Reply(error),))
    return Transition(
        AwaitingAddress(product=state.product, quantity=quantity),
        (Reply(ADDRESS_PROMPT),),
    )


def _handle_address(state: AwaitingAddress, text: str) -> Transition:
    return Transition(
        AwaitingPhone(product=state.product, address=text, quantity=state.quantity),
        (Reply(PHONE_PROMPT),),
    )


def _handle_phone(state: AwaitingPhone, text: str) -> Transition:
    submission = Submission(
        product=state.product,
        address=state.address,
        phone=text,
        quantity=state.quantity,
    )
    return Transition(Idle(), submission=submission)


def advance(
    state: ConversationState,
    text: str,
    flow: ConversationFlow = ConversationFlow(),
) -> Transition:
    """Compute the next conversation step for an incoming message."""
    if isinstance(state, AwaitingProduct):
        return _handle_product(text, flow)
    if isinstance(state, AwaitingQuantity):
        return _handle_quantity(state, text)
    if isinstance(state, AwaitingAddress):
        return _handle_address(state, text)
    if isinstance(state, AwaitingPhone):
        return _handle_phone(state, text)
    return _handle_idle(text)
