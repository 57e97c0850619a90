"""MCP server exposing the Miro REST API v2 as tools."""

__version__ = "0.1.0"
