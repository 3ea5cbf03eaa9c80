"""Tests for the Telegram front-end handlers."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from chatterbox.config import Config
from chatterbox.session import Session
from chatterbox.telegram_bot import AuthFilter, create_application, make_handlers


@pytest.fixture
def session():
    store = MagicMock()
    store.load.side_effect = FileNotFoundError
    return Session(store)


def _update(text: str = "", user_id: int = 1):
    update = MagicMock()
    update.message.text = text
    update.message.reply_text = AsyncMock()
    update.effective_user.id = user_id
    return update


class TestHandlers:
    def test_message_runs_command(self, session):
        _, _, message_handler = make_handlers(session)
        update = _update("todo read book")

        asyncio.run(message_handler(update, None))

        update.message.reply_text.assert_awaited_once_with(
            "Added Todo to Tasks\nCurrently 1 Tasks in List"
        )
        assert len(session.tasks) == 1

    def test_bye_replies_goodbye(self, session):
        _, _, message_handler = make_handlers(session)
        update = _update("bye")

        asyncio.run(message_handler(update, None))

        update.message.reply_text.assert_awaited_once_with("Bye. Hope to see you again soon!")

    def test_start_greets(self, session):
        start_handler, _, _ = make_handlers(session)
        update = _update()

        asyncio.run(start_handler(update, None))

        reply = update.message.reply_text.await_args[0][0]
        assert reply.startswith("Hello! I'm Chatterbox")
        assert "History found!" not in reply


class TestAuthFilter:
    def test_open_when_no_allow_list(self):
        assert AuthFilter([]).check_update(_update(user_id=99)) is True

    def test_allow_list(self):
        auth = AuthFilter([42])
        assert auth.check_update(_update(user_id=42)) is True
        assert auth.check_update(_update(user_id=7)) is False


class TestCreateApplication:
    def test_requires_token(self, session):
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
            create_application(Config(), session)
