"""Unit tests for error and result rendering."""

import httpx

from miro_mcp.batch import BatchOutcome, BatchReport
from miro_mcp.errors import BatchSizeError, MiroAPIError, UnsupportedItemTypeError
from miro_mcp.formatting import (
    format_batch_report,
    format_board_list,
    format_board_summary,
    format_item_line,
    handle_api_error,
)


class TestHandleApiError:
    def test_known_statuses_get_hints(self):
        assert "Authentication failed" in handle_api_error(MiroAPIError(401, "Unauthorized", ""))
        assert "Permission denied" in handle_api_error(MiroAPIError(403, "Forbidden", ""))
        assert "not found" in handle_api_error(MiroAPIError(404, "Not Found", ""))
        assert "Rate limit" in handle_api_error(MiroAPIError(429, "Too Many Requests", ""))

    def test_other_status_includes_truncated_body(self):
        message = handle_api_error(MiroAPIError(400, "Bad Request", "x" * 800))

        assert message.startswith("Error: Miro API returned 400 Bad Request. Response: ")
        assert message.endswith("x" * 500)
        assert "x" * 501 not in message

    def test_transport_errors(self):
        assert handle_api_error(httpx.ReadTimeout("slow")) == "Error: Request timed out. Try again."
        assert handle_api_error(httpx.ConnectError("refused")).startswith(
            "Error: Could not reach the Miro API"
        )

    def test_local_errors(self):
        assert handle_api_error(BatchSizeError("too many")) == "Error: too many"
        assert handle_api_error(UnsupportedItemTypeError("x")) == "Error: Unsupported item type: x"
        assert handle_api_error(RuntimeError("boom")) == "Error: RuntimeError: boom"


class TestBoards:
    def test_board_list(self):
        text = format_board_list([{"id": "b1", "name": "Alpha"}, {"id": "b2", "name": "Beta"}])
        assert text == "Found 2 board(s):\n- Alpha (ID: b1)\n- Beta (ID: b2)"

    def test_board_summary(self):
        text = format_board_summary(
            {
                "id": "b1",
                "name": "Alpha",
                "description": "Planning",
                "owner": {"id": "u1", "name": "Sam"},
                "createdAt": "2024-01-01",
                "viewLink": "https://miro.com/app/board/b1",
            }
        )
        assert text.splitlines()[0] == "**Alpha** (ID: b1)"
        assert "  Owner: Sam" in text
        assert "  URL: https://miro.com/app/board/b1" in text

    def test_item_line(self):
        line = format_item_line(
            {"id": "f1", "type": "frame", "data": {"title": "Lane"}, "position": {"x": 1, "y": 2}}
        )
        assert line == "- frame f1: Lane @ (1, 2)"


class TestBatchReport:
    def test_partial_success(self):
        report = BatchReport(
            kind="create",
            requested=3,
            outcomes=[
                BatchOutcome(0, "sticky_note 'A'", result={"id": "n1"}),
                BatchOutcome(1, "sticky_note 'B'", error="Miro API error: 400 Bad Request - bad"),
                BatchOutcome(2, "sticky_note 'C'", result={"id": "n3"}),
            ],
        )

        assert format_batch_report(report, "b1") == (
            "Created 2 of 3 items on board b1\n"
            "  [0] sticky_note 'A' -> ID: n1\n"
            "  [2] sticky_note 'C' -> ID: n3\n"
            "1 failed:\n"
            "  [1] sticky_note 'B': Miro API error: 400 Bad Request - bad"
        )

    def test_delete_has_no_id_lines(self):
        report = BatchReport(
            kind="delete",
            requested=2,
            outcomes=[BatchOutcome(0, "i1", result={}), BatchOutcome(1, "i2", result={})],
        )

        assert format_batch_report(report, "b1") == "Deleted 2 of 2 items from board b1"
