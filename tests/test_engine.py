"""
Tests for the conversation engine: full conversations, dispatch and concurrency.
"""

import asyncio
from unittest.mock import patch

from orderbot.core.conversation import SessionStore, Stage, UserIdentity
from orderbot.core.conversation.messages import (
    ADDRESS_PROMPT,
    MAIN_MENU,
    MAKE_ORDER_BUTTON,
    PHONE_PROMPT,
    PRICE_LIST_BUTTON,
    PRICE_LIST_MESSAGE,
    PRODUCT_PROMPT,
    QUANTITY_PROMPT,
    WELCOME_MESSAGE,
)
from orderbot.core.orders import QuantityValidator

from tests.conftest import DISPATCHER_ID

USER_ID = 42

ORDER_DIALOG = [MAKE_ORDER_BUTTON, "2 колы", "ул. Ленина 5", "+79991234567"]


async def walk(engine, user_id, identity, texts):
    result = None
    for text in texts:
        result = await engine.on_message(user_id, identity, text)
    return result


class TestEndToEnd:

    async def test_full_conversation(self, engine, ledger, transport, identity):
        sessions = engine.sessions

        assert await engine.on_message(USER_ID, identity, "/start") is None
        welcome = transport.last_to(USER_ID)
        assert welcome.text == WELCOME_MESSAGE
        assert welcome.menu == MAIN_MENU
        assert sessions.get(USER_ID).stage is Stage.IDLE

        await engine.on_message(USER_ID, identity, MAKE_ORDER_BUTTON)
        assert transport.last_to(USER_ID).text == PRODUCT_PROMPT
        assert sessions.get(USER_ID).stage is Stage.AWAITING_PRODUCT

        await engine.on_message(USER_ID, identity, "2 колы")
        assert transport.last_to(USER_ID).text == ADDRESS_PROMPT
        assert sessions.get(USER_ID).stage is Stage.AWAITING_ADDRESS

        await engine.on_message(USER_ID, identity, "ул. Ленина 5")
        assert transport.last_to(USER_ID).text == PHONE_PROMPT
        assert sessions.get(USER_ID).stage is Stage.AWAITING_PHONE
        assert ledger.list() == ()

        order = await engine.on_message(USER_ID, identity, "+79991234567")

        assert ledger.list() == (order,)
        assert order.product == "2 колы"
        assert order.address == "ул. Ленина 5"
        assert order.phone == "+79991234567"
        assert order.user_id == USER_ID
        assert order.display_name == "ivan_petrov"
        assert order.quantity is None

        confirmation = transport.last_to(USER_ID)
        assert order.id in confirmation.text
        assert "2 колы" in confirmation.text
        assert confirmation.menu == MAIN_MENU

        assert len(transport.to_dispatcher) == 1
        notice = transport.to_dispatcher[0]
        assert notice.chat_id == DISPATCHER_ID
        for value in (order.id, "2 колы", "ул. Ленина 5", "+79991234567"):
            assert value in notice.text

        session = sessions.get(USER_ID)
        assert session.stage is Stage.IDLE
        assert session.product is None
        assert session.address is None

    async def test_with_quantity_stage(self, make_engine, ledger, transport, identity):
        engine = make_engine(collect_quantity=True)

        await walk(engine, USER_ID, identity, [MAKE_ORDER_BUTTON, "пицца"])
        assert transport.last_to(USER_ID).text == QUANTITY_PROMPT

        for bad in ["abc", "0", "-3"]:
            await engine.on_message(USER_ID, identity, bad)
            assert transport.last_to(USER_ID).text == QuantityValidator.ERROR_MESSAGE
            assert engine.sessions.get(USER_ID).stage is Stage.AWAITING_QUANTITY

        await engine.on_message(USER_ID, identity, "3")
        session = engine.sessions.get(USER_ID)
        assert session.stage is Stage.AWAITING_ADDRESS
        assert session.quantity == 3

        order = await walk(engine, USER_ID, identity, ["ул. Ленина 5", "+79991234567"])
        assert order.quantity == 3
        assert "Количество:</b> 3" in transport.to_dispatcher[0].text
        assert len(ledger) == 1

    async def test_display_name_fallback(self, engine):
        identity = UserIdentity(first_name="Иван", last_name="Петров")
        order = await walk(engine, USER_ID, identity, ORDER_DIALOG)
        assert order.display_name == "Иван Петров"


class TestIdleInput:

    async def test_price_list(self, engine, transport, identity):
        await engine.on_message(USER_ID, identity, PRICE_LIST_BUTTON)
        assert transport.last_to(USER_ID).text == PRICE_LIST_MESSAGE
        assert engine.sessions.get(USER_ID).stage is Stage.IDLE

    async def test_unrecognized_input(self, engine, ledger, transport, identity):
        for text in ["привет", "+79991234567", "ул. Ленина 5"]:
            assert await engine.on_message(USER_ID, identity, text) is None
            assert engine.sessions.get(USER_ID).stage is Stage.IDLE
            assert transport.last_to(USER_ID).text == WELCOME_MESSAGE
        assert ledger.list() == ()
        assert transport.to_dispatcher == []


class TestDispatch:

    async def test_no_dispatcher_configured(self, make_engine, ledger, transport, identity):
        engine = make_engine(dispatcher_chat_id=None)
        order = await walk(engine, USER_ID, identity, ORDER_DIALOG)

        assert transport.to_dispatcher == []
        assert order.id in transport.last_to(USER_ID).text
        assert ledger.list() == (order,)

    async def test_ledger_called_once_per_conversation(self, engine, ledger, identity):
        with patch.object(ledger, "create", wraps=ledger.create) as create:
            await walk(engine, USER_ID, identity, ["/start", *ORDER_DIALOG])
            assert create.call_count == 1

            await walk(engine, USER_ID, identity, ["/start", PRICE_LIST_BUTTON, "привет"])
            assert create.call_count == 1

            await walk(engine, USER_ID, identity, ORDER_DIALOG)
            assert create.call_count == 2

    async def test_dispatcher_notified_once_per_order(self, engine, transport, identity):
        await walk(engine, USER_ID, identity, ORDER_DIALOG)
        await walk(engine, USER_ID, identity, ["+79991234567", "ещё раз"])
        assert len(transport.to_dispatcher) == 1


class TestConcurrency:

    async def test_concurrent_users(self, engine, ledger, identity):
        users = range(1, 51)
        orders = await asyncio.gather(
            *(walk(engine, user_id, identity, ORDER_DIALOG) for user_id in users)
        )

        assert len(ledger.list()) == 50
        assert len({order.id for order in ledger.list()}) == 50
        assert sorted(order.user_id for order in orders) == list(users)
        assert len(engine.sessions) == 50

    async def test_same_user_messages_applied_in_order(self, engine, ledger, identity):
        results = await asyncio.gather(
            *(engine.on_message(USER_ID, identity, text) for text in ORDER_DIALOG)
        )

        assert results[:3] == [None, None, None]
        assert ledger.list() == (results[3],)
        assert results[3].product == "2 колы"
        assert engine.sessions.get(USER_ID).stage is Stage.IDLE

    async def test_shared_session_store(self, make_engine, identity):
        sessions = SessionStore()
        engine = make_engine(sessions=sessions)
        await engine.on_message(USER_ID, identity, MAKE_ORDER_BUTTON)
        assert sessions.get(USER_ID).stage is Stage.AWAITING_PRODUCT
