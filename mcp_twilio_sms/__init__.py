"""Twilio SMS MCP server: list received messages and pull verification codes."""

__version__ = "1.0.0"
