"""Exception types raised by the Miro MCP server."""


class MiroError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(MiroError):
    """Startup configuration is missing or invalid."""


class MiroAPIError(MiroError):
    """The Miro REST API answered with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str, body: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"Miro API error: {status_code} {status_text} - {body}")

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class BatchSizeError(MiroError):
    """A bulk request exceeded the per-call element limit."""


class UnsupportedItemTypeError(MiroError):
    """An item's type has no typed endpoint to route a mutation to."""

    def __init__(self, item_type: str):
        self.item_type = item_type
        super().__init__(f"Unsupported item type: {item_type}")
