"""Tag tools. Tag colours are predefined names; Miro rejects hex values."""

from mcp.server.fastmcp import Context

from ..formatting import handle_api_error
from ..inputs import BoardIdInput, CreateTagInput, ItemTagInput, TagIdInput, UpdateTagInput
from ..logging_config import log_tool_call
from ._shared import miro_context


def register_tag_tools(mcp):
    """Register all tag tools with the MCP server."""

    @mcp.tool(
        name="get_tags",
        annotations={
            "title": "List Board Tags",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_tags(params: BoardIdInput, ctx: Context) -> str:
        """Get all tags from a board."""
        try:
            tags = await miro_context(ctx).client.get_tags(params.board_id)
            if not tags:
                return f"No tags on board {params.board_id}."
            lines = [f"**{len(tags)} tag(s)** on board {params.board_id}:"]
            for tag in tags:
                lines.append(
                    f"  • {tag.get('title', '?')} [{tag.get('fillColor', '?')}] (ID: {tag.get('id', '?')})"
                )
            return "\n".join(lines)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_tag",
        annotations={
            "title": "Create Tag",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def create_tag(params: CreateTagInput, ctx: Context) -> str:
        """Create a new tag.

        CRITICAL: use a predefined colour name (red, magenta, violet, light_green,
        green, dark_green, cyan, blue, dark_blue, yellow, gray, black), not hex.
        """
        try:
            tag = await miro_context(ctx).client.create_tag(
                params.board_id, params.title, fill_color=params.fill_color.value
            )
            return f"Created tag \"{params.title}\" with ID: {tag.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="update_tag",
        annotations={
            "title": "Update Tag",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def update_tag(params: UpdateTagInput, ctx: Context) -> str:
        """Rename a tag or change its colour."""
        if params.title is None and params.fill_color is None:
            return "Error: Provide a new title or fill_color to update."
        try:
            tag = await miro_context(ctx).client.update_tag(
                params.board_id,
                params.tag_id,
                title=params.title,
                fill_color=params.fill_color.value if params.fill_color else None,
            )
            return f"Updated tag \"{tag.get('title', params.title or '')}\" (ID: {params.tag_id})"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="delete_tag",
        annotations={
            "title": "Delete Tag",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def delete_tag(params: TagIdInput, ctx: Context) -> str:
        """Delete a tag from the board; it is removed from every item carrying it."""
        try:
            await miro_context(ctx).client.delete_tag(params.board_id, params.tag_id)
            return f"Deleted tag {params.tag_id}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="attach_tag_to_item",
        annotations={
            "title": "Attach Tag to Item",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def attach_tag_to_item(params: ItemTagInput, ctx: Context) -> str:
        """Attach an existing tag to an item on the board."""
        try:
            await miro_context(ctx).client.attach_tag_to_item(
                params.board_id, params.item_id, params.tag_id
            )
            return f"Attached tag {params.tag_id} to item {params.item_id}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="remove_tag_from_item",
        annotations={
            "title": "Remove Tag from Item",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def remove_tag_from_item(params: ItemTagInput, ctx: Context) -> str:
        """Remove a tag from an item on the board."""
        try:
            await miro_context(ctx).client.remove_tag_from_item(
                params.board_id, params.item_id, params.tag_id
            )
            return f"Removed tag {params.tag_id} from item {params.item_id}"
        except Exception as e:
            return handle_api_error(e)
