"""Board tools: list, inspect, create, update, copy and delete boards."""

from mcp.server.fastmcp import Context

from ..formatting import format_board_list, format_board_summary, handle_api_error
from ..inputs import BoardIdInput, CopyBoardInput, CreateBoardInput, ListBoardsInput, UpdateBoardInput
from ..logging_config import log_tool_call
from ._shared import miro_context


def register_board_tools(mcp):
    """Register all board tools with the MCP server."""

    @mcp.tool(
        name="list_boards",
        annotations={
            "title": "List Miro Boards",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def list_boards(params: ListBoardsInput, ctx: Context) -> str:
        """List all available Miro boards with an optional query or team filter.

        Args:
            params: Optional search query and team ID.

        Returns:
            str: Board names and IDs.
        """
        try:
            boards = await miro_context(ctx).client.get_boards(params.query, params.team_id)
            if not boards:
                if params.query:
                    return f"No boards found matching '{params.query}'."
                return "No boards found."
            return format_board_list(boards)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="get_board",
        annotations={
            "title": "Get Miro Board Details",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_board(params: BoardIdInput, ctx: Context) -> str:
        """Get detailed information about a specific board.

        Returns name, description, team, owner, timestamps and link.
        """
        try:
            board = await miro_context(ctx).client.get_board(params.board_id)
            return format_board_summary(board)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_board",
        annotations={
            "title": "Create Miro Board",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def create_board(params: CreateBoardInput, ctx: Context) -> str:
        """Create a new Miro board."""
        try:
            board = await miro_context(ctx).client.create_board(
                params.name, description=params.description, team_id=params.team_id
            )
            return f"Created board \"{board.get('name', params.name)}\" with ID: {board.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="update_board",
        annotations={
            "title": "Update Miro Board",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def update_board(params: UpdateBoardInput, ctx: Context) -> str:
        """Update board name and/or description."""
        if params.name is None and params.description is None:
            return "Error: Provide a new name or description to update."
        try:
            board = await miro_context(ctx).client.update_board(
                params.board_id, name=params.name, description=params.description
            )
            return f"Updated board \"{board.get('name', '')}\" (ID: {board.get('id', params.board_id)})"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="copy_board",
        annotations={
            "title": "Copy Miro Board",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def copy_board(params: CopyBoardInput, ctx: Context) -> str:
        """Copy an existing board, content included, under a new name."""
        try:
            board = await miro_context(ctx).client.copy_board(
                params.board_id,
                params.name,
                description=params.description,
                team_id=params.team_id,
            )
            return f"Copied board to \"{board.get('name', params.name)}\" with ID: {board.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="delete_board",
        annotations={
            "title": "Delete Miro Board",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def delete_board(params: BoardIdInput, ctx: Context) -> str:
        """Delete a board permanently.

        WARNING: This cannot be undone. Every item on the board is removed.
        """
        try:
            await miro_context(ctx).client.delete_board(params.board_id)
            return f"Deleted board {params.board_id}"
        except Exception as e:
            return handle_api_error(e)
