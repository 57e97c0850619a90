"""Plumbing shared by the tool modules."""

from dataclasses import dataclass

from mcp.server.fastmcp import Context

from ..batch import BatchExecutor
from ..client import MiroClient
from ..models import Position


@dataclass
class MiroContext:
    """Per-server state exposed to tools through the FastMCP lifespan."""

    client: MiroClient
    batch: BatchExecutor


def miro_context(ctx: Context) -> MiroContext:
    return ctx.request_context.lifespan_context


def position_of(params) -> Position:
    return Position(x=params.x, y=params.y, origin="center")
