"""Tests for conversation-scoped logging."""

import logging

import pytest

from fridai.config import LOG_FORMAT
from fridai.logging_context import (
    get_conversation_id,
    install_record_factory,
    set_conversation_id,
)


def _format(logger_name: str, msg: str) -> str:
    logger = logging.getLogger(logger_name)
    record = logger.makeRecord(logger_name, logging.INFO, __file__, 1, msg, None, None)
    return logging.Formatter(LOG_FORMAT).format(record)


class TestRecordFactory:
    def test_formatted_line_shows_conversation_id(self):
        set_conversation_id("conv-7")
        line = _format("fridai.conversation.dispatcher", "Top intent 'ReserveTable'")
        assert "[fridai.conversation.dispatcher] [conv-7] INFO:" in line

    def test_third_party_records_carry_it_too(self):
        set_conversation_id("conv-8")
        assert "[conv-8]" in _format("some.library", "hello")

    def test_install_is_idempotent(self):
        install_record_factory()
        factory = logging.getLogRecordFactory()
        install_record_factory()
        assert logging.getLogRecordFactory() is factory

    def test_caplog_records_have_attribute(self, caplog):
        set_conversation_id("conv-42")
        with caplog.at_level(logging.INFO, logger="fridai.test"):
            logging.getLogger("fridai.test").info("Resuming dialog")
        assert caplog.records[-1].conversation_id == "conv-42"


class TestConversationId:
    @pytest.mark.asyncio
    async def test_dispatcher_sets_conversation_id(self, dispatcher):
        from tests.conftest import CONVERSATION_ID, message

        await dispatcher.on_turn(message("hello"))
        assert get_conversation_id() == CONVERSATION_ID
