"""Content creation tools, one per item type."""

from mcp.server.fastmcp import Context

from ..formatting import handle_api_error
from ..inputs import (
    CreateCardInput,
    CreateConnectorInput,
    CreateDocumentInput,
    CreateEmbedInput,
    CreateFrameInput,
    CreateImageInput,
    CreateShapeInput,
    CreateStickyNoteInput,
    CreateTextInput,
)
from ..logging_config import log_tool_call
from ..models import ConnectorSpec, Geometry, ShapeStyle, TextGeometry, TextStyle
from ._shared import miro_context, position_of

CREATE_ANNOTATIONS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": False,
    "openWorldHint": True,
}


def register_content_tools(mcp):
    """Register the item creation tools with the MCP server."""

    @mcp.tool(
        name="create_sticky_note",
        annotations={"title": "Create Sticky Note", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_sticky_note(params: CreateStickyNoteInput, ctx: Context) -> str:
        """Create a sticky note.

        IMPORTANT: the colour must be a predefined name (gray, light_yellow,
        yellow, orange, light_green, green, dark_green, cyan, light_pink, pink,
        violet, red, light_blue, blue, dark_blue, black). Hex codes are rejected.
        """
        try:
            item = await miro_context(ctx).client.create_sticky_note(
                params.board_id,
                params.content,
                color=params.color,
                position=position_of(params),
                parent_id=params.parent_id,
            )
            return f"Created sticky note with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_text",
        annotations={"title": "Create Text", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_text(params: CreateTextInput, ctx: Context) -> str:
        """Create a text item.

        LIMITATION: text items take a width but no height.
        """
        try:
            item = await miro_context(ctx).client.create_text(
                params.board_id,
                params.content,
                position=position_of(params),
                style=TextStyle(color=params.color, font_size=params.font_size),
                geometry=TextGeometry(width=params.width or 200),
                parent_id=params.parent_id,
            )
            return f"Created text item with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_shape",
        annotations={"title": "Create Shape", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_shape(params: CreateShapeInput, ctx: Context) -> str:
        """Create a geometric or flow-chart shape with optional text inside."""
        try:
            item = await miro_context(ctx).client.create_shape(
                params.board_id,
                shape=params.shape,
                content=params.content,
                position=position_of(params),
                geometry=Geometry(width=params.width, height=params.height, rotation=0),
                style=ShapeStyle(fill_color=params.fill_color, border_color=params.border_color),
                parent_id=params.parent_id,
            )
            return f"Created {params.shape.value} shape with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_card",
        annotations={"title": "Create Card", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_card(params: CreateCardInput, ctx: Context) -> str:
        """Create a card item with a title and description."""
        try:
            item = await miro_context(ctx).client.create_card(
                params.board_id,
                title=params.title,
                description=params.description,
                position=position_of(params),
                parent_id=params.parent_id,
            )
            return f"Created card with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_connector",
        annotations={"title": "Create Connector", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_connector(params: CreateConnectorInput, ctx: Context) -> str:
        """Create a connector line between two existing items.

        CRITICAL: both items must already exist on the board. Their existence is
        not checked here; Miro rejects unknown IDs.
        """
        try:
            spec = ConnectorSpec(
                start_item_id=params.start_item_id,
                end_item_id=params.end_item_id,
                caption=params.caption,
            )
            item = await miro_context(ctx).client.create_connector(params.board_id, spec)
            return f"Created connector with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_frame",
        annotations={"title": "Create Frame", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_frame(params: CreateFrameInput, ctx: Context) -> str:
        """Create a frame container to organize other items."""
        try:
            item = await miro_context(ctx).client.create_frame(
                params.board_id,
                title=params.title,
                position=position_of(params),
                geometry=Geometry(width=params.width, height=params.height),
            )
            return f"Created frame with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_image",
        annotations={"title": "Create Image", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_image(params: CreateImageInput, ctx: Context) -> str:
        """Create an image item from a publicly reachable URL."""
        try:
            item = await miro_context(ctx).client.create_image(
                params.board_id,
                params.url,
                position=position_of(params),
                geometry=Geometry(width=params.width, height=params.height),
                parent_id=params.parent_id,
            )
            return f"Created image with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_document",
        annotations={"title": "Create Document", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_document(params: CreateDocumentInput, ctx: Context) -> str:
        """Create a document item from a URL."""
        try:
            item = await miro_context(ctx).client.create_document(
                params.board_id,
                params.url,
                title=params.title,
                position=position_of(params),
                parent_id=params.parent_id,
            )
            return f"Created document with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="create_embed",
        annotations={"title": "Create Embed", **CREATE_ANNOTATIONS},
    )
    @log_tool_call
    async def create_embed(params: CreateEmbedInput, ctx: Context) -> str:
        """Create an embedded content item (video, web page) from a URL."""
        try:
            item = await miro_context(ctx).client.create_embed(
                params.board_id,
                params.url,
                position=position_of(params),
                geometry=Geometry(width=params.width, height=params.height),
                parent_id=params.parent_id,
            )
            return f"Created embed with ID: {item.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)
