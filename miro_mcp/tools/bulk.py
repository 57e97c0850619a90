"""Bulk tools. Each call handles at most 20 elements, one request at a time."""

from mcp.server.fastmcp import Context

from ..formatting import format_batch_report, handle_api_error
from ..inputs import (
    BulkCreateConnectorsInput,
    BulkCreateItemsInput,
    BulkDeleteItemsInput,
    BulkUpdateItemsInput,
)
from ..logging_config import log_tool_call
from ._shared import miro_context


def register_bulk_tools(mcp):
    """Register the bulk tools with the MCP server."""

    @mcp.tool(
        name="bulk_create_items",
        annotations={
            "title": "Bulk Create Items",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def bulk_create_items(params: BulkCreateItemsInput, ctx: Context) -> str:
        """Create up to 20 items in one call.

        Items are created sequentially in the given order. An item that fails
        does not stop the rest; the result lists which ones failed and why.
        Nothing is rolled back and nothing is retried.

        Args:
            params: Board ID and the typed item list.

        Returns:
            str: Count of created items, their IDs, and any failures.
        """
        try:
            report = await miro_context(ctx).batch.create_items(params.board_id, params.items)
            return format_batch_report(report, params.board_id)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="bulk_update_items",
        annotations={
            "title": "Bulk Update Items",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def bulk_update_items(params: BulkUpdateItemsInput, ctx: Context) -> str:
        """Update up to 20 items in one call, sequentially.

        Each item is read first to route the change to the endpoint for its type.
        """
        try:
            report = await miro_context(ctx).batch.update_items(params.board_id, params.updates)
            return format_batch_report(report, params.board_id)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="bulk_delete_items",
        annotations={
            "title": "Bulk Delete Items",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def bulk_delete_items(params: BulkDeleteItemsInput, ctx: Context) -> str:
        """Delete up to 20 items in one call, sequentially."""
        try:
            report = await miro_context(ctx).batch.delete_items(params.board_id, params.item_ids)
            return format_batch_report(report, params.board_id)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="bulk_create_connectors",
        annotations={
            "title": "Bulk Create Connectors",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def bulk_create_connectors(params: BulkCreateConnectorsInput, ctx: Context) -> str:
        """Create up to 20 connectors between existing items in one call."""
        try:
            report = await miro_context(ctx).batch.create_connectors(params.board_id, params.connectors)
            return format_batch_report(report, params.board_id)
        except Exception as e:
            return handle_api_error(e)
