"""Input models for the Miro MCP tools."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .batch import MAX_BATCH_SIZE
from .models import (
    AnyItemSpec,
    ConnectorSpec,
    ItemUpdate,
    MemberRole,
    ShapeName,
    StickyNoteColor,
    TagColor,
    WebhookStatus,
)


def board_id_field():
    return Field(..., description="Miro board ID", min_length=1)


class ToolInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class PlacementInput(ToolInput):
    """Inputs shared by the item creation tools."""

    board_id: str = board_id_field()
    x: float = Field(default=0, description="X coordinate on board")
    y: float = Field(default=0, description="Y coordinate on board")
    parent_id: Optional[str] = Field(
        default=None, description="Optional frame ID to place the item inside"
    )


# ─── Boards ──────────────────────────────────────────────────────────────────


class ListBoardsInput(ToolInput):
    """Input for listing boards."""

    query: Optional[str] = Field(default=None, description="Optional search query", max_length=500)
    team_id: Optional[str] = Field(default=None, description="Optional team ID filter")


class BoardIdInput(ToolInput):
    """Input for tools that only need a board ID."""

    board_id: str = board_id_field()


class CreateBoardInput(ToolInput):
    """Input for creating a board."""

    name: str = Field(..., description="Board name", min_length=1, max_length=60)
    description: Optional[str] = Field(default=None, description="Board description", max_length=300)
    team_id: Optional[str] = Field(default=None, description="Team ID")


class UpdateBoardInput(ToolInput):
    """Input for updating board properties."""

    board_id: str = board_id_field()
    name: Optional[str] = Field(default=None, description="New board name", min_length=1, max_length=60)
    description: Optional[str] = Field(default=None, description="New board description", max_length=300)


class CopyBoardInput(ToolInput):
    """Input for copying a board."""

    board_id: str = Field(..., description="Source board ID", min_length=1)
    name: str = Field(..., description="New board name", min_length=1, max_length=60)
    description: Optional[str] = Field(default=None, description="New board description", max_length=300)
    team_id: Optional[str] = Field(default=None, description="Team ID")


# ─── Items ───────────────────────────────────────────────────────────────────


class GetBoardItemsInput(ToolInput):
    """Input for listing board items. Miro enforces a minimum limit of 10."""

    board_id: str = board_id_field()
    type: Optional[str] = Field(
        default=None,
        description="Filter by item type (e.g., 'sticky_note', 'shape', 'text', 'card')",
    )
    parent_item_id: Optional[str] = Field(default=None, description="Filter by parent item ID")
    cursor: Optional[str] = Field(default=None, description="Pagination cursor from a previous call")
    limit: Optional[int] = Field(
        default=None, description="Limit number of results (minimum 10)", ge=10, le=50
    )


class ItemIdInput(ToolInput):
    """Input for tools addressing one item."""

    board_id: str = board_id_field()
    item_id: str = Field(
        ..., description="Item ID (get from get_board_items or an item creation tool)", min_length=1
    )


class UpdateItemInput(ItemIdInput):
    """Input for updating an item of any type."""

    data: Dict[str, Any] = Field(
        ..., description="Updated item fields (data, style, position, geometry); structure varies by item type"
    )


class SearchItemsInput(ToolInput):
    """Input for searching items by content."""

    board_id: str = board_id_field()
    query: str = Field(..., description="Search query (searches item content, titles, etc.)", min_length=1)


# ─── Content Creation ────────────────────────────────────────────────────────


class CreateStickyNoteInput(PlacementInput):
    """Input for creating a sticky note. Colours must be predefined names, not hex."""

    content: str = Field(..., description="Text content for the sticky note", min_length=1)
    color: StickyNoteColor = Field(
        default=StickyNoteColor.YELLOW,
        description="Predefined colour name only; hex codes are rejected by Miro",
    )


class CreateTextInput(PlacementInput):
    """Input for creating a text item. Text items support width but not height."""

    content: str = Field(..., description="Text content to display", min_length=1)
    font_size: int = Field(default=14, description="Font size in points", ge=1, le=288)
    color: str = Field(default="#000000", description="Text colour in hex format (e.g., #000000)")
    width: Optional[float] = Field(default=None, description="Text box width in pixels", gt=0)


class CreateShapeInput(PlacementInput):
    """Input for creating a shape."""

    shape: ShapeName = Field(default=ShapeName.RECTANGLE, description="Shape type to create")
    content: Optional[str] = Field(default=None, description="Text content inside the shape")
    width: float = Field(default=200, description="Shape width in pixels", gt=0)
    height: float = Field(default=200, description="Shape height in pixels", gt=0)
    fill_color: str = Field(default="#ffffff", description="Fill colour in hex format")
    border_color: str = Field(default="#000000", description="Border colour in hex format")


class CreateCardInput(PlacementInput):
    """Input for creating a card."""

    title: Optional[str] = Field(default=None, description="Card title (optional but recommended)")
    description: Optional[str] = Field(default=None, description="Card description/content")


class CreateConnectorInput(ToolInput):
    """Input for connecting two existing items."""

    board_id: str = board_id_field()
    start_item_id: str = Field(
        ..., description="ID of the starting item (must already exist on the board)", min_length=1
    )
    end_item_id: str = Field(
        ..., description="ID of the ending item (must already exist on the board)", min_length=1
    )
    caption: Optional[str] = Field(default=None, description="Optional text label on the connector")


class CreateFrameInput(ToolInput):
    """Input for creating a frame."""

    board_id: str = board_id_field()
    title: Optional[str] = Field(default=None, description="Frame title")
    x: float = Field(default=0, description="X coordinate on board")
    y: float = Field(default=0, description="Y coordinate on board")
    width: float = Field(default=400, description="Frame width in pixels", gt=0)
    height: float = Field(default=300, description="Frame height in pixels", gt=0)


class CreateImageInput(PlacementInput):
    """Input for creating an image from a URL."""

    url: str = Field(..., description="Public image URL (must be accessible)", min_length=1)
    width: float = Field(default=200, description="Image width in pixels", gt=0)
    height: float = Field(default=200, description="Image height in pixels", gt=0)


class CreateDocumentInput(PlacementInput):
    """Input for creating a document item from a URL."""

    url: str = Field(..., description="Document URL (PDF, DOC, etc.)", min_length=1)
    title: Optional[str] = Field(default=None, description="Document title")


class CreateEmbedInput(PlacementInput):
    """Input for embedding web content."""

    url: str = Field(..., description="Embeddable URL (YouTube, etc.)", min_length=1)
    width: float = Field(default=320, description="Embed width in pixels", gt=0)
    height: float = Field(default=180, description="Embed height in pixels", gt=0)


# ─── Bulk Operations ─────────────────────────────────────────────────────────


class BulkCreateItemsInput(ToolInput):
    """Input for creating up to 20 items in one call."""

    board_id: str = board_id_field()
    items: List[AnyItemSpec] = Field(
        ...,
        description=(
            f"Items to create (maximum {MAX_BATCH_SIZE}). Each needs a 'type' "
            "(sticky_note, text, shape, card, frame, image, document, embed) plus "
            "its data, and optional style, position and geometry"
        ),
    )


class BulkUpdateItemsInput(ToolInput):
    """Input for updating up to 20 items in one call."""

    board_id: str = board_id_field()
    updates: List[ItemUpdate] = Field(
        ..., description=f"Item updates (maximum {MAX_BATCH_SIZE}), each with 'id' and 'data'"
    )


class BulkDeleteItemsInput(ToolInput):
    """Input for deleting up to 20 items in one call."""

    board_id: str = board_id_field()
    item_ids: List[str] = Field(..., description=f"Item IDs to delete (maximum {MAX_BATCH_SIZE})")


class BulkCreateConnectorsInput(ToolInput):
    """Input for creating up to 20 connectors in one call."""

    board_id: str = board_id_field()
    connectors: List[ConnectorSpec] = Field(
        ...,
        description=(
            f"Connectors to create (maximum {MAX_BATCH_SIZE}), each with startItemId, "
            "endItemId, optional caption and style"
        ),
    )


# ─── Frames ──────────────────────────────────────────────────────────────────


class FrameItemsInput(ToolInput):
    """Input for listing the items inside a frame."""

    board_id: str = board_id_field()
    frame_id: str = Field(..., description="Frame ID (get from get_frames or create_frame)", min_length=1)


# ─── Tags ────────────────────────────────────────────────────────────────────


class CreateTagInput(ToolInput):
    """Input for creating a tag. Colours must be predefined names, not hex."""

    board_id: str = board_id_field()
    title: str = Field(..., description="Tag title", min_length=1, max_length=120)
    fill_color: TagColor = Field(default=TagColor.RED, description="Predefined colour name only")


class UpdateTagInput(ToolInput):
    """Input for updating a tag."""

    board_id: str = board_id_field()
    tag_id: str = Field(..., description="Tag ID", min_length=1)
    title: Optional[str] = Field(default=None, description="New tag title", min_length=1, max_length=120)
    fill_color: Optional[TagColor] = Field(default=None, description="New predefined colour name")


class TagIdInput(ToolInput):
    """Input for deleting a tag."""

    board_id: str = board_id_field()
    tag_id: str = Field(..., description="Tag ID", min_length=1)


class ItemTagInput(ToolInput):
    """Input for attaching or removing a tag on an item."""

    board_id: str = board_id_field()
    item_id: str = Field(..., description="Item ID (get from get_board_items)", min_length=1)
    tag_id: str = Field(..., description="Tag ID (get from get_tags or create_tag)", min_length=1)


# ─── Groups ──────────────────────────────────────────────────────────────────


class CreateGroupInput(ToolInput):
    """Input for grouping existing items."""

    board_id: str = board_id_field()
    item_ids: List[str] = Field(
        ..., description="Item IDs to group together (get from get_board_items)", min_length=1
    )
    title: Optional[str] = Field(default=None, description="Group title")


class UpdateGroupInput(ToolInput):
    """Input for updating a group."""

    board_id: str = board_id_field()
    group_id: str = Field(..., description="Group ID", min_length=1)
    data: Dict[str, Any] = Field(..., description="Fields to update (e.g., {'data': {'itemIds': [...]}})")


class GroupIdInput(ToolInput):
    """Input for deleting a group."""

    board_id: str = board_id_field()
    group_id: str = Field(..., description="Group ID", min_length=1)


# ─── Members ─────────────────────────────────────────────────────────────────


class ShareBoardInput(ToolInput):
    """Input for inviting a user to a board."""

    board_id: str = board_id_field()
    email: str = Field(..., description="User email address", min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    role: MemberRole = Field(
        default=MemberRole.VIEWER,
        description="Access level: viewer (read-only), commenter (can comment), editor (can edit)",
    )
    message: Optional[str] = Field(default=None, description="Optional invitation message", max_length=1000)


class UpdateMemberInput(ToolInput):
    """Input for changing a member's role."""

    board_id: str = board_id_field()
    member_id: str = Field(..., description="Member ID (get from get_board_members)", min_length=1)
    role: MemberRole = Field(..., description="New access level")


class MemberIdInput(ToolInput):
    """Input for removing a member from a board."""

    board_id: str = board_id_field()
    member_id: str = Field(..., description="Member ID (get from get_board_members)", min_length=1)


# ─── Webhooks ────────────────────────────────────────────────────────────────


class CreateWebhookInput(ToolInput):
    """Input for subscribing to board events."""

    board_id: str = Field(..., description="Board ID to monitor", min_length=1)
    callback_url: str = Field(..., description="Webhook callback URL (must be publicly accessible)", min_length=1)
    events: List[str] = Field(
        ..., description="Event types to listen for (e.g., 'item_created', 'item_updated')", min_length=1
    )


class UpdateWebhookInput(ToolInput):
    """Input for updating a webhook subscription."""

    webhook_id: str = Field(..., description="Webhook ID", min_length=1)
    callback_url: Optional[str] = Field(default=None, description="New callback URL")
    events: Optional[List[str]] = Field(default=None, description="New event types")
    status: Optional[WebhookStatus] = Field(default=None, description="enabled or disabled")


class WebhookIdInput(ToolInput):
    """Input for deleting a webhook."""

    webhook_id: str = Field(..., description="Webhook ID", min_length=1)
