from .boards import register_board_tools
from .bulk import register_bulk_tools
from .collaboration import register_collaboration_tools
from .content import register_content_tools
from .items import register_item_tools
from .tags import register_tag_tools

__all__ = [
    "register_board_tools",
    "register_bulk_tools",
    "register_collaboration_tools",
    "register_content_tools",
    "register_item_tools",
    "register_tag_tools",
]
