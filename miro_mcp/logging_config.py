import functools
import logging
import sys

from mcp.server.fastmcp import Context

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

tool_logger = logging.getLogger("miro_mcp.tools")


def configure_logging(level: str = "INFO") -> None:
    """Send package logs to stderr; stdout belongs to the stdio transport."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("miro_mcp")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
    root.propagate = False


def _render(value) -> str:
    if hasattr(value, "model_dump_json"):
        return value.model_dump_json(exclude_none=True)
    return repr(value)


# --- Decorator for Logging MCP Tool Calls ---
def log_tool_call(func):
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        func_name = getattr(func, "__name__", "unknown_tool")
        values = [v for v in list(args) + list(kwargs.values()) if not isinstance(v, Context)]
        arg_str = ", ".join(_render(v) for v in values)
        tool_logger.info("Received tool call: %s with %s", func_name, arg_str or "no arguments")
        try:
            return await func(*args, **kwargs)
        except Exception:
            tool_logger.exception("Tool %s raised", func_name)
            raise

    return wrapper
