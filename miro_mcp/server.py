"""FastMCP server assembly and command-line entry point."""

import argparse
import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import Resource
from starlette.requests import Request
from starlette.responses import JSONResponse

from .batch import BatchExecutor
from .client import MiroClient
from .config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    TOKEN_ENV_VAR,
    MiroConfig,
    load_config,
    mask_token,
)
from .errors import ConfigurationError
from .formatting import to_json
from .logging_config import configure_logging
from .models import Geometry, Position, ShapeStyle
from .prompts import working_with_miro
from .tools import (
    register_board_tools,
    register_bulk_tools,
    register_collaboration_tools,
    register_content_tools,
    register_item_tools,
    register_tag_tools,
)
from .tools._shared import MiroContext

logger = logging.getLogger(__name__)

SERVER_NAME = "miro_mcp"

INSTRUCTIONS = (
    "Tools for reading and editing Miro boards. Sticky note and tag colours are "
    "predefined names, not hex codes. Bulk tools take at most 20 elements and "
    "report per-element failures. Read the working_with_miro prompt for details."
)


class MiroMCP(FastMCP):
    """FastMCP server that also lists every board as a concrete resource."""

    def __init__(self, client: MiroClient, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.miro_client = client

    async def list_resources(self) -> List[Resource]:
        resources = await super().list_resources()
        for board in await self.miro_client.get_boards():
            resources.append(
                Resource(
                    uri=f"miro://board/{board['id']}",
                    name=board.get("name") or board["id"],
                    description=board.get("description") or f"Miro board {board['id']}",
                    mimeType="application/json",
                )
            )
        return resources


def create_server(
    config: MiroConfig, client: Optional[MiroClient] = None
) -> FastMCP:
    """Build a FastMCP server with every Miro tool, resource, prompt and route."""
    miro = client or MiroClient(config)
    context = MiroContext(client=miro, batch=BatchExecutor(miro))

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[MiroContext]:
        logger.info("Miro MCP server ready against %s", miro.base_url)
        yield context

    mcp = MiroMCP(miro, SERVER_NAME, instructions=INSTRUCTIONS, lifespan=lifespan)

    register_board_tools(mcp)
    register_item_tools(mcp)
    register_content_tools(mcp)
    register_bulk_tools(mcp)
    register_tag_tools(mcp)
    register_collaboration_tools(mcp)

    # ─── Resources & Prompts ─────────────────────────────────────────────────

    @mcp.resource(
        "miro://board/{board_id}",
        name="board_contents",
        description="All items on a Miro board as JSON",
        mime_type="application/json",
    )
    async def board_contents(board_id: str) -> str:
        items = await miro.get_board_items(board_id)
        return to_json(items)

    mcp.prompt(
        name="working_with_miro",
        description="Comprehensive guide for working with Miro boards and all available features",
    )(working_with_miro)

    # ─── HTTP Routes (SSE transport) ─────────────────────────────────────────

    @mcp.custom_route("/health", methods=["GET"], name="health")
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @mcp.custom_route("/api/create-shape", methods=["POST"], name="create_shape")
    async def create_shape_route(request: Request) -> JSONResponse:
        """Create a shape from a flat JSON body, outside the MCP protocol."""
        try:
            body = await request.json()
            board_id = body["boardId"]
            shape = body.get("shape") or "rectangle"
            logger.info("Creating shape on board %s", board_id)
            item = await miro.create_shape(
                board_id,
                shape=shape,
                content=body.get("content"),
                position=Position(x=body.get("x") or 0, y=body.get("y") or 0),
                geometry=Geometry(
                    width=body.get("width") or 200,
                    height=body.get("height") or 200,
                    rotation=0,
                ),
                style=ShapeStyle(
                    fill_color=body.get("fillColor") or "#ffffff",
                    border_color=body.get("borderColor") or "#000000",
                ),
            )
        except Exception as e:
            logger.error("Error creating shape: %s", e)
            return JSONResponse({"success": False, "error": str(e)}, status_code=500)
        return JSONResponse(
            {
                "success": True,
                "message": f"Created {shape} shape with ID: {item.get('id', '?')}",
                "item": item,
            }
        )

    return mcp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Miro MCP Server")
    parser.add_argument(
        "transport",
        choices=["sse", "stdio"],
        default="stdio",
        nargs="?",
        help="Transport: 'sse' for HTTP SSE or 'stdio' for standard I/O (default: stdio)",
    )
    parser.add_argument(
        "--token",
        "-t",
        default=None,
        help=f"Miro OAuth token (default: ${TOKEN_ENV_VAR})",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Miro REST API base URL (default: $MIRO_API_BASE_URL or https://api.miro.com/v2)",
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Host to bind to for SSE transport (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to bind to for SSE transport (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: INFO)",
    )
    return parser


# --- Main Server Execution ---
def main(argv: Optional[List[str]] = None) -> None:
    """Run the main entry point for the server with argument parsing."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(cli_token=args.token, base_url=args.base_url)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Using Miro token: %s", mask_token(config.token))
    logger.info(
        "%s environment variable %s", TOKEN_ENV_VAR, "is set" if os.environ.get(TOKEN_ENV_VAR) else "is not set"
    )

    mcp = create_server(config)
    if args.transport == "stdio":
        logger.info("MCP server running with stdio transport. Waiting for client connection...")
        mcp.run(transport="stdio")
    else:
        logger.info("MCP server running with HTTP SSE transport on %s:%s", args.host, args.port)
        logger.info("SSE endpoint: http://%s:%s/sse", args.host, args.port)
        mcp.settings.host = args.host
        mcp.settings.port = args.port
        mcp.run(transport="sse")


if __name__ == "__main__":
    main()
