"""Unit tests for logging setup and the tool-call decorator."""

import logging
import sys

import pytest

from miro_mcp.inputs import BoardIdInput
from miro_mcp.logging_config import configure_logging, log_tool_call


def test_configure_logging_writes_to_stderr():
    configure_logging("debug")

    logger = logging.getLogger("miro_mcp")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr
    assert logger.propagate is False


class TestLogToolCall:
    @pytest.mark.asyncio
    async def test_logs_name_and_arguments(self, caplog):
        caplog.set_level(logging.INFO, logger="miro_mcp.tools")

        @log_tool_call
        async def get_board(params):
            return "ok"

        assert await get_board(BoardIdInput(board_id="b1")) == "ok"
        assert 'Received tool call: get_board with {"board_id":"b1"}' in caplog.text

    @pytest.mark.asyncio
    async def test_keyword_arguments_are_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="miro_mcp.tools")

        @log_tool_call
        async def list_boards(params=None):
            return "ok"

        await list_boards(params=BoardIdInput(board_id="b2"))
        assert '{"board_id":"b2"}' in caplog.text

    @pytest.mark.asyncio
    async def test_exceptions_are_logged_and_reraised(self, caplog):
        caplog.set_level(logging.INFO, logger="miro_mcp.tools")

        @log_tool_call
        async def broken():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await broken()
        assert "Tool broken raised" in caplog.text

    def test_wrapper_keeps_signature_metadata(self):
        async def delete_board(params: BoardIdInput, ctx=None) -> str:
            """Delete a board."""
            return ""

        wrapped = log_tool_call(delete_board)
        assert wrapped.__name__ == "delete_board"
        assert wrapped.__doc__ == "Delete a board."
        assert wrapped.__annotations__["params"] is BoardIdInput
