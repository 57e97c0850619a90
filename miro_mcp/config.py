"""Runtime configuration for the Miro MCP server.

The bearer token is resolved once at startup (command-line flag first, then
the ``MIRO_OAUTH_TOKEN`` environment variable) and frozen into a
:class:`MiroConfig` that is handed to :class:`~miro_mcp.client.MiroClient`.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError

# ─── Defaults ────────────────────────────────────────────────────────────────

DEFAULT_BASE_URL = "https://api.miro.com/v2"
TOKEN_ENV_VAR = "MIRO_OAUTH_TOKEN"
BASE_URL_ENV_VAR = "MIRO_API_BASE_URL"
REQUEST_TIMEOUT = 30.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3002


class MiroConfig(BaseModel):
    """Immutable connection settings for the Miro REST API."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    token: str = Field(..., description="Miro OAuth bearer token", min_length=1)
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Miro REST API base URL")
    timeout: float = Field(default=REQUEST_TIMEOUT, description="Per-request timeout in seconds", gt=0)


def resolve_token(
    cli_token: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Return the bearer token, preferring the command-line value.

    Raises:
        ConfigurationError: neither source provides a token.
    """
    if environ is None:
        environ = os.environ
    token = (cli_token or "").strip() or environ.get(TOKEN_ENV_VAR, "").strip()
    if not token:
        raise ConfigurationError(
            "Miro OAuth token is required. Provide it via "
            f"{TOKEN_ENV_VAR} environment variable or --token argument"
        )
    return token


def load_config(
    cli_token: Optional[str] = None,
    base_url: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MiroConfig:
    """Build the process-wide configuration from CLI values and the environment."""
    if environ is None:
        environ = os.environ
    token = resolve_token(cli_token, environ)
    resolved_url = base_url or environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
    return MiroConfig(token=token, base_url=resolved_url.rstrip("/"))


def mask_token(token: Optional[str]) -> str:
    """Mask a token for log output, keeping five characters at each end."""
    if not token:
        return "undefined"
    if len(token) <= 10:
        return "*" * len(token)
    return f"{token[:5]}...{token[-5:]}"
