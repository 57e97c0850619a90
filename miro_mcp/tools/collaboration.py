"""Collaboration tools: groups, board members and webhooks."""

from mcp.server.fastmcp import Context

from ..formatting import handle_api_error, to_json
from ..inputs import (
    BoardIdInput,
    CreateGroupInput,
    CreateWebhookInput,
    GroupIdInput,
    MemberIdInput,
    ShareBoardInput,
    UpdateGroupInput,
    UpdateMemberInput,
    UpdateWebhookInput,
    WebhookIdInput,
)
from ..logging_config import log_tool_call
from ._shared import miro_context


def register_collaboration_tools(mcp):
    """Register group, member and webhook tools with the MCP server."""

    # ─── Groups ──────────────────────────────────────────────────────────────

    @mcp.tool(
        name="create_group",
        annotations={
            "title": "Create Group",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def create_group(params: CreateGroupInput, ctx: Context) -> str:
        """Group existing items together so they move as one."""
        try:
            group = await miro_context(ctx).client.create_group(
                params.board_id, params.item_ids, title=params.title
            )
            return f"Created group of {len(params.item_ids)} items with ID: {group.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="update_group",
        annotations={
            "title": "Update Group",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def update_group(params: UpdateGroupInput, ctx: Context) -> str:
        try:
            await miro_context(ctx).client.update_group(params.board_id, params.group_id, params.data)
            return f"Updated group {params.group_id}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="delete_group",
        annotations={
            "title": "Delete Group",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def delete_group(params: GroupIdInput, ctx: Context) -> str:
        """Delete a group. The grouped items stay on the board."""
        try:
            await miro_context(ctx).client.delete_group(params.board_id, params.group_id)
            return f"Deleted group {params.group_id}"
        except Exception as e:
            return handle_api_error(e)

    # ─── Members ─────────────────────────────────────────────────────────────

    @mcp.tool(
        name="get_board_members",
        annotations={
            "title": "List Board Members",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_board_members(params: BoardIdInput, ctx: Context) -> str:
        """Get all members of a board with their roles."""
        try:
            members = await miro_context(ctx).client.get_board_members(params.board_id)
            if not members:
                return f"No members found on board {params.board_id}."
            lines = [f"**{len(members)} member(s)** on board {params.board_id}:"]
            for member in members:
                lines.append(
                    f"  • {member.get('name', '?')} - {member.get('role', '?')} (ID: {member.get('id', '?')})"
                )
            return "\n".join(lines)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="share_board_with_user",
        annotations={
            "title": "Share Board",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def share_board_with_user(params: ShareBoardInput, ctx: Context) -> str:
        """Share a board with a user by email.

        Roles: viewer (read-only), commenter (can comment), editor (can edit).
        """
        try:
            await miro_context(ctx).client.share_board_with_user(
                params.board_id, params.email, params.role.value, message=params.message
            )
            return f"Shared board {params.board_id} with {params.email} as {params.role.value}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="update_board_member",
        annotations={
            "title": "Update Board Member",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def update_board_member(params: UpdateMemberInput, ctx: Context) -> str:
        """Change a board member's role."""
        try:
            await miro_context(ctx).client.update_board_member(
                params.board_id, params.member_id, params.role.value
            )
            return f"Updated member {params.member_id} to role {params.role.value}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="remove_board_member",
        annotations={
            "title": "Remove Board Member",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def remove_board_member(params: MemberIdInput, ctx: Context) -> str:
        """Remove a member's access to a board."""
        try:
            await miro_context(ctx).client.remove_board_member(params.board_id, params.member_id)
            return f"Removed member {params.member_id} from board {params.board_id}"
        except Exception as e:
            return handle_api_error(e)

    # ─── Webhooks ────────────────────────────────────────────────────────────

    @mcp.tool(
        name="create_webhook",
        annotations={
            "title": "Create Webhook",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def create_webhook(params: CreateWebhookInput, ctx: Context) -> str:
        """Subscribe a callback URL to events on a board.

        Note: Miro sends a challenge to the callback URL before the
        subscription becomes active, so the URL must be publicly reachable.
        """
        try:
            webhook = await miro_context(ctx).client.create_webhook(
                params.callback_url, params.board_id, params.events
            )
            return f"Created webhook with ID: {webhook.get('id', '?')}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="get_webhooks",
        annotations={
            "title": "List Webhooks",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def get_webhooks(ctx: Context) -> str:
        """Get all webhook subscriptions owned by the token."""
        try:
            webhooks = await miro_context(ctx).client.get_webhooks()
            if not webhooks:
                return "No webhooks found."
            return to_json(webhooks)
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="update_webhook",
        annotations={
            "title": "Update Webhook",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def update_webhook(params: UpdateWebhookInput, ctx: Context) -> str:
        if params.callback_url is None and params.events is None and params.status is None:
            return "Error: Provide a callback_url, events or status to update."
        try:
            await miro_context(ctx).client.update_webhook(
                params.webhook_id,
                callback_url=params.callback_url,
                events=params.events,
                status=params.status.value if params.status else None,
            )
            return f"Updated webhook {params.webhook_id}"
        except Exception as e:
            return handle_api_error(e)

    @mcp.tool(
        name="delete_webhook",
        annotations={
            "title": "Delete Webhook",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    @log_tool_call
    async def delete_webhook(params: WebhookIdInput, ctx: Context) -> str:
        """Delete a webhook subscription."""
        try:
            await miro_context(ctx).client.delete_webhook(params.webhook_id)
            return f"Deleted webhook {params.webhook_id}"
        except Exception as e:
            return handle_api_error(e)
