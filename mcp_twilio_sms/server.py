"""
twilio-sms-mcp stdio server

MCP delivery layer - exposes the Twilio SMS tools over stdio.
Separation of concerns: this file only handles MCP protocol.

Configuration:
- TWILIO_CONFIG_FILE: JSON file with accountSid, authToken, phoneNumber
"""
import argparse
import asyncio
import logging
import time
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .config import load_credentials
from .container import Container

SERVER_NAME = "twilio-sms-mcp"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d] [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Log to stderr; stdout carries the stdio protocol"""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.Formatter.converter = time.gmtime


def list_tool_definitions() -> list[Tool]:
    """Static tool listing, identical on every call"""
    return [
        Tool(**TOOL_SCHEMAS["list_sms"]),
        Tool(**TOOL_SCHEMAS["get_latest_code"]),
        Tool(**TOOL_SCHEMAS["get_sms"])
    ]


def create_server(handlers: MCPHandlers) -> Server:
    """Build the MCP server and register tool handlers on it"""
    mcp_server = Server(SERVER_NAME, version=__version__)

    @mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
    async def list_tools() -> list[Tool]:
        """List available MCP tools"""
        return list_tool_definitions()

    # Arguments are validated by the handlers so that bad input comes back
    # as ordinary "Error: ..." text like every other failure
    @mcp_server.call_tool(validate_input=False)  # type: ignore[misc,no-untyped-call]
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls"""
        logger.info(f"call_tool: {name} args={arguments}")
        text = await handlers.call_tool(name, arguments)
        logger.info(f"call_tool: {name} returning {len(text)} chars")
        return [TextContent(type="text", text=text)]

    return mcp_server


def build_handlers(config_path: Optional[str] = None) -> MCPHandlers:
    """Load credentials and wire the handlers"""
    container = Container(load_credentials(config_path))
    return MCPHandlers(container)


async def run_stdio(mcp_server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Twilio SMS MCP server running on stdio")
        await mcp_server.run(
            read_stream, write_stream, mcp_server.create_initialization_options()
        )


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="twilio-sms-mcp: read received SMS messages and verification codes over MCP."
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Twilio credentials JSON file (default: $TWILIO_CONFIG_FILE)"
    )
    args = parser.parse_args()

    configure_logging()
    mcp_server = create_server(build_handlers(args.config))
    asyncio.run(run_stdio(mcp_server))


if __name__ == "__main__":
    main()
