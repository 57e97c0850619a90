"""Item tools: listing, reading, updating, deleting, searching and frames."""

from mcp.server.fastmcp import Context

from ..formatting import format_item_line, handle_api_error, to_json
from ..inputs import (
    BoardIdInput,
    FrameItemsInput,
    GetBoardItemsInput,
    ItemIdInput,
    SearchItemsInput,
    UpdateItemInput,
)
from ..logging_config import log_tool_call
from ._shared import miro_context


def register_item_tools(mcp):
    """Register all item and frame tools with the MCP server."""

    @mcp.tool(
        name="get_board_items",
        annotations={
            "title": "List Board Items",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_board_items(params: GetBoardItemsInput, ctx: Context) -> str:
        """Get items from a board, optionally filtered by type or parent.

        Note: the minimum limit is 10. When more items are available the
        response ends with a cursor to pass back in for the next page.

        Args:
            params: Board ID plus optional type, parent, cursor and limit.

        Returns:
            str: JSON list of items, followed by the next cursor if any.
        """
        try:
            page = await miro_context(ctx).client.get_board_items_page(
                params.board_id,
                item_type=params.type,
                parent_item_id=params.parent_item_id,
                cursor=params.cursor,
                limit=params.limit,
            )
            items = page.get("data", [])
            text = to_json(items)
            if page.get("cursor"):
                text += f"\n\n_More items available. Next cursor: {page['cursor']}_"
            return text
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="get_item",
        annotations={
            "title": "Get Item Details",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_item(params: ItemIdInput, ctx: Context) -> str:
        """Get detailed information about a specific item on the board."""
        try:
            item = await miro_context(ctx).client.get_item(params.board_id, params.item_id)
            return to_json(item)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="update_item",
        annotations={
            "title": "Update Item",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def update_item(params: UpdateItemInput, ctx: Context) -> str:
        """Update any item's properties (position, style, data, geometry).

        The item is looked up first so the change is sent to the endpoint for its
        type (sticky note, shape, text, card, connector, frame, image, document,
        embed or app card). Other types are rejected.
        """
        try:
            await miro_context(ctx).client.update_item(params.board_id, params.item_id, params.data)
            return f"Updated item {params.item_id}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="delete_item",
        annotations={
            "title": "Delete Item",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def delete_item(params: ItemIdInput, ctx: Context) -> str:
        """Delete an item from the board."""
        try:
            await miro_context(ctx).client.delete_item(params.board_id, params.item_id)
            return f"Deleted item {params.item_id}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="search_items",
        annotations={
            "title": "Search Board Items",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def search_items(params: SearchItemsInput, ctx: Context) -> str:
        """Search for items on a board by content or title."""
        try:
            items = await miro_context(ctx).client.search_items(params.board_id, params.query)
            if not items:
                return f"No items found matching \"{params.query}\"."
            return f"Found {len(items)} items matching \"{params.query}\":\n" + to_json(items)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="get_frames",
        annotations={
            "title": "List Frames",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_frames(params: BoardIdInput, ctx: Context) -> str:
        """Get all frame items from a board."""
        try:
            frames = await miro_context(ctx).client.get_frames(params.board_id)
            if not frames:
                return f"No frames on board {params.board_id}."
            lines = [f"**{len(frames)} frame(s)** on board {params.board_id}:"]
            lines.extend(format_item_line(frame) for frame in frames)
            return "\n".join(lines)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="get_items_in_frame",
        annotations={
            "title": "List Items in Frame",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_items_in_frame(params: FrameItemsInput, ctx: Context) -> str:
        """Get all items contained within a specific frame."""
        try:
            items = await miro_context(ctx).client.get_items_in_frame(params.board_id, params.frame_id)
            if not items:
                return f"No items in frame {params.frame_id}."
            return to_json(items)
        except Exception as e:
            return handle_api_error(e)
