"""The usage guide served as the ``working_with_miro`` prompt."""

from .batch import MAX_BATCH_SIZE
from .config import TOKEN_ENV_VAR
from .models import ShapeName, StickyNoteColor, TagColor


def _names(enum) -> str:
    return ", ".join(member.value for member in enum)


def working_with_miro() -> str:
    """Comprehensive guide for working with Miro boards and all available features."""
    return f"""# Miro MCP Server Guide

This server exposes the Miro REST API v2 as tools.

## Board Operations
- **list_boards**: List boards with an optional search query or team filter
- **get_board**: Board details including owner, team and timestamps
- **create_board** / **update_board** / **copy_board** / **delete_board**

## Content Creation
- **create_sticky_note**, **create_text**, **create_shape**, **create_card**
- **create_image**, **create_document**, **create_embed** (from URLs)
- **create_frame**: containers for organizing content; pass its ID as `parent_id`
- **create_connector**: link two existing items, with an optional caption

## Item Management
- **get_board_items**: filter by type or parent; the minimum `limit` is 10.
  When more items exist the result ends with a cursor for the next page.
- **get_item**, **update_item**, **delete_item**, **search_items**
- **get_frames**, **get_items_in_frame**

## Bulk Operations
- **bulk_create_items**, **bulk_update_items**, **bulk_delete_items**,
  **bulk_create_connectors**
- At most {MAX_BATCH_SIZE} elements per call; larger requests are rejected
  before anything is sent.
- Elements run one after another in the order given. A failing element does
  not stop the others and nothing is rolled back. The result names every
  element that failed.

## Tags, Groups and Collaboration
- **get_tags**, **create_tag**, **update_tag**, **delete_tag**,
  **attach_tag_to_item**, **remove_tag_from_item**
- **create_group**, **update_group**, **delete_group**
- **get_board_members**, **share_board_with_user**, **update_board_member**,
  **remove_board_member** (roles: viewer, commenter, editor)
- **create_webhook**, **get_webhooks**, **update_webhook**, **delete_webhook**

## Colours
- Sticky notes take predefined names only, never hex: {_names(StickyNoteColor)}
- Tags take predefined names only: {_names(TagColor)}
- Text, shape and frame colours are hex codes such as #ff0000.

## Shapes
{_names(ShapeName)}

## Positioning
Every item takes `x` and `y` (pixels, relative to its centre). Text items take
a width but no height.

## Errors
Failed calls return a message starting with `Error:`. Requests are never
retried automatically; on a rate limit (429) wait before calling again.

## Authentication
Requires a Miro OAuth token, from the {TOKEN_ENV_VAR} environment variable or
the --token command line argument.

## Examples

### Mind map
1. Create a central frame
2. Add sticky notes for the main ideas with bulk_create_items
3. Link related ideas with bulk_create_connectors
4. Tag topics and group related items

### Flowchart
1. Use flow-chart shapes (flow_chart_process, flow_chart_decision, flow_chart_terminator)
2. Connect them with captioned connectors
3. Group logical sections in frames
"""
