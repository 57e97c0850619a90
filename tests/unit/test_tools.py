"""Unit tests for the tools, called through a connected MCP client session."""

import httpx
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

BOARD = "b1"


async def call(mcp, name, params=None):
    """Call a tool over an in-memory session and return the raw result."""
    arguments = {} if params is None else {"params": params}
    async with create_connected_server_and_client_session(mcp._mcp_server) as session:
        return await session.call_tool(name, arguments)


async def call_text(mcp, name, params=None):
    result = await call(mcp, name, params)
    assert not result.isError, result.content
    return result.content[0].text


class TestBoardTools:
    @pytest.mark.asyncio
    async def test_list_boards(self, mcp, api):
        api.add("GET", "/boards", {"data": [{"id": "b1", "name": "Alpha"}, {"id": "b2", "name": "Beta"}]})

        text = await call_text(mcp, "list_boards", {})

        assert text == "Found 2 board(s):\n- Alpha (ID: b1)\n- Beta (ID: b2)"

    @pytest.mark.asyncio
    async def test_list_boards_empty_query(self, mcp, api):
        api.add("GET", "/boards", {"data": []})

        text = await call_text(mcp, "list_boards", {"query": "nothing"})

        assert text == "No boards found matching 'nothing'."

    @pytest.mark.asyncio
    async def test_api_error_becomes_text(self, mcp, api):
        api.add("GET", "/boards", status=401, text="unauthorized")

        text = await call_text(mcp, "list_boards", {})

        assert text == "Error: Authentication failed. Check your MIRO_OAUTH_TOKEN."

    @pytest.mark.asyncio
    async def test_update_board_needs_a_change(self, mcp, api):
        text = await call_text(mcp, "update_board", {"board_id": BOARD})

        assert text.startswith("Error:")
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_invalid_arguments_are_a_tool_error(self, mcp, api):
        result = await call(mcp, "create_sticky_note", {"board_id": BOARD, "content": "x", "color": "#ffff00"})

        assert result.isError is True
        assert api.requests == []


class TestItemTools:
    @pytest.mark.asyncio
    async def test_get_board_items_reports_cursor(self, mcp, api):
        api.add("GET", f"/boards/{BOARD}/items", {"data": [{"id": "i1"}], "cursor": "abc"})

        text = await call_text(mcp, "get_board_items", {"board_id": BOARD})

        assert '"id": "i1"' in text
        assert text.endswith("_More items available. Next cursor: abc_")

    @pytest.mark.asyncio
    async def test_update_item_unknown_type(self, mcp, api):
        api.add("GET", f"/boards/{BOARD}/items/i1", {"id": "i1", "type": "mindmap_node"})

        text = await call_text(mcp, "update_item", {"board_id": BOARD, "item_id": "i1", "data": {}})

        assert text == "Error: Unsupported item type: mindmap_node"
        assert api.calls("PATCH") == []

    @pytest.mark.asyncio
    async def test_search_items(self, mcp, api):
        api.add("GET", f"/boards/{BOARD}/items", {"data": [{"id": "i1"}]})

        text = await call_text(mcp, "search_items", {"board_id": BOARD, "query": "plan"})

        assert text.startswith('Found 1 items matching "plan":\n')
        assert dict(api.requests[0].url.params) == {"query": "plan"}

    @pytest.mark.asyncio
    async def test_get_frames_empty(self, mcp, api):
        api.add("GET", f"/boards/{BOARD}/items", {"data": []})

        assert await call_text(mcp, "get_frames", {"board_id": BOARD}) == "No frames on board b1."


class TestContentTools:
    @pytest.mark.asyncio
    async def test_create_sticky_note(self, mcp, api):
        api.add("POST", f"/boards/{BOARD}/sticky_notes", {"id": "n1"})

        text = await call_text(
            mcp, "create_sticky_note", {"board_id": BOARD, "content": "Hi", "color": "green", "x": 5}
        )

        assert text == "Created sticky note with ID: n1"
        body = api.body(api.requests[0])
        assert body["style"]["fillColor"] == "green"
        assert body["position"]["x"] == 5

    @pytest.mark.asyncio
    async def test_create_shape(self, mcp, api):
        api.add("POST", f"/boards/{BOARD}/shapes", {"id": "s1"})

        text = await call_text(
            mcp, "create_shape", {"board_id": BOARD, "shape": "flow_chart_decision", "content": "ok?"}
        )

        assert text == "Created flow_chart_decision shape with ID: s1"
        assert api.body(api.requests[0])["data"]["shape"] == "flow_chart_decision"


class TestBulkTools:
    @pytest.mark.asyncio
    async def test_partial_failure_is_reported(self, mcp, api):
        def create(request):
            if api.body(request)["data"]["content"] == "B":
                return httpx.Response(400, text="bad note")
            return httpx.Response(201, json={"id": "n-" + api.body(request)["data"]["content"]})

        api.on("POST", f"/boards/{BOARD}/sticky_notes", create)
        params = {
            "board_id": BOARD,
            "items": [{"type": "sticky_note", "data": {"content": c}} for c in "ABC"],
        }

        text = await call_text(mcp, "bulk_create_items", params)

        assert text.splitlines() == [
            "Created 2 of 3 items on board b1",
            "  [0] sticky_note 'A' -> ID: n-A",
            "  [2] sticky_note 'C' -> ID: n-C",
            "1 failed:",
            "  [1] sticky_note 'B': Miro API error: 400 Bad Request - bad note",
        ]

    @pytest.mark.asyncio
    async def test_sticky_note_geometry_reaches_miro(self, mcp, api):
        api.add("POST", f"/boards/{BOARD}/sticky_notes", {"id": "n1"})
        params = {
            "board_id": BOARD,
            "items": [{"type": "sticky_note", "data": {"content": "A"}, "geometry": {"width": 100}}],
        }

        text = await call_text(mcp, "bulk_create_items", params)

        assert text.splitlines()[0] == "Created 1 of 1 items on board b1"
        assert api.body(api.requests[0])["geometry"] == {"width": 100}

    @pytest.mark.asyncio
    async def test_bulk_delete_lists_no_ids(self, mcp, api):
        text = await call_text(mcp, "bulk_delete_items", {"board_id": BOARD, "item_ids": ["i1", "i2"]})

        assert text == "Deleted 2 of 2 items from board b1"
        assert api.calls("DELETE") == [("DELETE", f"/boards/{BOARD}/items/i1"), ("DELETE", f"/boards/{BOARD}/items/i2")]

    @pytest.mark.asyncio
    async def test_oversized_batch_is_refused(self, mcp, api):
        params = {"board_id": BOARD, "item_ids": [f"i{i}" for i in range(25)]}

        text = await call_text(mcp, "bulk_delete_items", params)

        assert text == "Error: Cannot delete more than 20 items in a single bulk operation"
        assert api.requests == []


class TestTagAndCollaborationTools:
    @pytest.mark.asyncio
    async def test_create_tag(self, mcp, api):
        api.add("POST", f"/boards/{BOARD}/tags", {"id": "t1"})

        text = await call_text(mcp, "create_tag", {"board_id": BOARD, "title": "urgent", "fill_color": "magenta"})

        assert text == 'Created tag "urgent" with ID: t1'
        assert api.body(api.requests[0]) == {"title": "urgent", "fillColor": "magenta"}

    @pytest.mark.asyncio
    async def test_get_board_members(self, mcp, api):
        api.add(
            "GET",
            f"/boards/{BOARD}/members",
            {"data": [{"id": "m1", "name": "Sam", "role": "editor"}]},
        )

        text = await call_text(mcp, "get_board_members", {"board_id": BOARD})

        assert "Sam - editor (ID: m1)" in text

    @pytest.mark.asyncio
    async def test_get_webhooks_takes_no_params(self, mcp, api):
        api.add("GET", "/webhooks", {"data": []})

        assert await call_text(mcp, "get_webhooks") == "No webhooks found."
