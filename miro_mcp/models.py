"""Typed payloads for Miro board items.

Every creatable item type is a separate pydantic model tagged by its ``type``
field, so a bulk request is validated as a discriminated union before any
request leaves the process. Field names are snake_case in Python and dumped
as the camelCase keys the Miro REST API expects.
"""

from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ─── Enumerations ────────────────────────────────────────────────────────────


class StickyNoteColor(str, Enum):
    """Predefined sticky note fill colours. Hex values are rejected by Miro."""

    GRAY = "gray"
    LIGHT_YELLOW = "light_yellow"
    YELLOW = "yellow"
    ORANGE = "orange"
    LIGHT_GREEN = "light_green"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    CYAN = "cyan"
    LIGHT_PINK = "light_pink"
    PINK = "pink"
    VIOLET = "violet"
    RED = "red"
    LIGHT_BLUE = "light_blue"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    BLACK = "black"


class TagColor(str, Enum):
    """Predefined tag fill colours."""

    RED = "red"
    MAGENTA = "magenta"
    VIOLET = "violet"
    LIGHT_GREEN = "light_green"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    CYAN = "cyan"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    YELLOW = "yellow"
    GRAY = "gray"
    BLACK = "black"


class ShapeName(str, Enum):
    RECTANGLE = "rectangle"
    ROUND_RECTANGLE = "round_rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RHOMBUS = "rhombus"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"
    STAR = "star"
    CLOUD = "cloud"
    CROSS = "cross"
    CAN = "can"
    RIGHT_ARROW = "right_arrow"
    LEFT_ARROW = "left_arrow"
    LEFT_RIGHT_ARROW = "left_right_arrow"
    FLOW_CHART_PROCESS = "flow_chart_process"
    FLOW_CHART_DECISION = "flow_chart_decision"
    FLOW_CHART_DOCUMENT = "flow_chart_document"
    FLOW_CHART_TERMINATOR = "flow_chart_terminator"


class MemberRole(str, Enum):
    VIEWER = "viewer"
    COMMENTER = "commenter"
    EDITOR = "editor"


class WebhookStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


# ─── Shared Building Blocks ──────────────────────────────────────────────────


class MiroModel(BaseModel):
    """Base for request payload models: camelCase on the wire, strict fields."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Position(MiroModel):
    x: float = Field(default=0, description="X coordinate on board")
    y: float = Field(default=0, description="Y coordinate on board")
    origin: str = Field(default="center", description="Which point of the item x/y refers to")


class Geometry(MiroModel):
    width: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    rotation: Optional[float] = None


class TextGeometry(MiroModel):
    """Text items accept a width but Miro rejects a height."""

    width: Optional[float] = Field(default=None, gt=0)
    rotation: Optional[float] = None


class ParentRef(MiroModel):
    id: str = Field(..., min_length=1)


# ─── Item Variants ───────────────────────────────────────────────────────────


class ItemSpec(MiroModel):
    """Common fields of every creatable item.

    Subclasses set ``endpoint`` to the board sub-resource they are created
    under and narrow ``type`` to a single literal.
    """

    endpoint: ClassVar[str]

    position: Position = Field(default_factory=Position)
    parent: Optional[ParentRef] = None

    @property
    def key(self) -> str:
        data = getattr(self, "data", None)
        label = (
            getattr(data, "content", None)
            or getattr(data, "title", None)
            or getattr(data, "url", None)
        )
        item_type = self.type  # type: ignore[attr-defined]
        return f"{item_type} {label!r}" if label else item_type

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"type"}
        )


class StickyNoteData(MiroModel):
    content: str
    shape: Optional[Literal["square", "rectangle"]] = None


class StickyNoteStyle(MiroModel):
    fill_color: StickyNoteColor = StickyNoteColor.YELLOW
    text_align: str = "center"
    text_align_vertical: str = "middle"


class StickyNoteSpec(ItemSpec):
    endpoint: ClassVar[str] = "sticky_notes"

    type: Literal["sticky_note"] = "sticky_note"
    data: StickyNoteData
    style: StickyNoteStyle = Field(default_factory=StickyNoteStyle)
    # Miro sizes sticky notes from a width or a height; sending both is a remote error.
    geometry: Optional[Geometry] = None


class TextData(MiroModel):
    content: str


class TextStyle(MiroModel):
    color: str = "#000000"
    font_size: int = Field(default=14, gt=0)
    font_family: str = "Arial"
    text_align: str = "left"


class TextSpec(ItemSpec):
    endpoint: ClassVar[str] = "texts"

    type: Literal["text"] = "text"
    data: TextData
    style: TextStyle = Field(default_factory=TextStyle)
    geometry: TextGeometry = Field(default_factory=lambda: TextGeometry(width=200))


class ShapeData(MiroModel):
    shape: ShapeName = ShapeName.RECTANGLE
    content: Optional[str] = None


class ShapeStyle(MiroModel):
    fill_color: str = "#ffffff"
    border_color: str = "#000000"
    border_width: float = 2
    border_style: Literal["normal", "dotted", "dashed"] = "normal"
    fill_opacity: float = Field(default=1, ge=0, le=1)
    border_opacity: float = Field(default=1, ge=0, le=1)


class ShapeSpec(ItemSpec):
    endpoint: ClassVar[str] = "shapes"

    type: Literal["shape"] = "shape"
    data: ShapeData = Field(default_factory=ShapeData)
    style: ShapeStyle = Field(default_factory=ShapeStyle)
    geometry: Geometry = Field(
        default_factory=lambda: Geometry(width=200, height=200, rotation=0)
    )


class CardData(MiroModel):
    title: Optional[str] = None
    description: Optional[str] = None


class CardStyle(MiroModel):
    card_theme: str = "#ffffff"


class CardSpec(ItemSpec):
    endpoint: ClassVar[str] = "cards"

    type: Literal["card"] = "card"
    data: CardData = Field(default_factory=CardData)
    style: CardStyle = Field(default_factory=CardStyle)
    geometry: Optional[Geometry] = None


class FrameData(MiroModel):
    title: Optional[str] = None


class FrameStyle(MiroModel):
    fill_color: str = "#ffffff"


class FrameSpec(ItemSpec):
    endpoint: ClassVar[str] = "frames"

    type: Literal["frame"] = "frame"
    data: FrameData = Field(default_factory=FrameData)
    style: FrameStyle = Field(default_factory=FrameStyle)
    geometry: Geometry = Field(default_factory=lambda: Geometry(width=400, height=300))


class UrlData(MiroModel):
    url: str = Field(..., min_length=1)
    title: Optional[str] = None


class ImageSpec(ItemSpec):
    endpoint: ClassVar[str] = "images"

    type: Literal["image"] = "image"
    data: UrlData
    geometry: Geometry = Field(default_factory=lambda: Geometry(width=200, height=200))


class DocumentSpec(ItemSpec):
    endpoint: ClassVar[str] = "documents"

    type: Literal["document"] = "document"
    data: UrlData
    geometry: Optional[Geometry] = None


class EmbedData(MiroModel):
    url: str = Field(..., min_length=1)


class EmbedSpec(ItemSpec):
    endpoint: ClassVar[str] = "embeds"

    type: Literal["embed"] = "embed"
    data: EmbedData
    geometry: Geometry = Field(default_factory=lambda: Geometry(width=320, height=180))


AnyItemSpec = Annotated[
    Union[
        StickyNoteSpec,
        TextSpec,
        ShapeSpec,
        CardSpec,
        FrameSpec,
        ImageSpec,
        DocumentSpec,
        EmbedSpec,
    ],
    Field(discriminator="type"),
]


# ─── Connectors & Updates ────────────────────────────────────────────────────


class ConnectorStyle(MiroModel):
    stroke_color: str = "#000000"
    stroke_width: float = 2
    stroke_style: Literal["normal", "dotted", "dashed"] = "normal"


class ConnectorSpec(MiroModel):
    """A directed link between two items that already exist on the board."""

    start_item_id: str = Field(..., description="ID of the starting item", min_length=1)
    end_item_id: str = Field(..., description="ID of the ending item", min_length=1)
    caption: Optional[str] = Field(default=None, description="Optional caption text for the connector")
    style: ConnectorStyle = Field(default_factory=ConnectorStyle)

    @property
    def key(self) -> str:
        return f"{self.start_item_id}->{self.end_item_id}"

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "startItem": {"id": self.start_item_id, "snapTo": "auto"},
            "endItem": {"id": self.end_item_id, "snapTo": "auto"},
            "style": self.style.to_payload(),
        }
        if self.caption:
            payload["captions"] = [{"content": self.caption, "position": "50%"}]
        return payload


class ItemUpdate(MiroModel):
    """A PATCH body for one item; its shape depends on the item's type."""

    id: str = Field(..., description="Item ID to update", min_length=1)
    data: Dict[str, Any] = Field(..., description="Updated item fields (data, style, position, geometry)")

    @property
    def key(self) -> str:
        return self.id


