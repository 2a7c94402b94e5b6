#!/usr/bin/env python3
"""
MCP HTTP/SSE Server

Serves the same Twilio SMS tools as the stdio server over SSE.

Run with: twilio-sms-mcp-http (or: uvicorn mcp_twilio_sms.server_http:app --host 127.0.0.1 --port 5010)

Configuration:
- TWILIO_CONFIG_FILE: JSON file with accountSid, authToken, phoneNumber
- PORT: Server port (default: 5010)
- HOST: Bind address (default: 127.0.0.1)
"""

import logging
import signal
import sys

from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .config import get_host, get_port
from .server import build_handlers, configure_logging, create_server

configure_logging()
logger = logging.getLogger(__name__)

# MCP Server instance
mcp_server = create_server(build_handlers())

# SSE transport for multi-client support
sse_transport = SseServerTransport("/messages/")


# HTTP routes
async def handle_ping(request: Request) -> Response:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_sse(request: Request) -> Response:
    """SSE endpoint: one MCP session per connection"""
    peer = request.client.host if request.client else "unknown"
    logger.info(f"SSE session opened by {peer}")
    try:
        async with sse_transport.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await mcp_server.run(read_stream, write_stream, mcp_server.create_initialization_options())
    finally:
        logger.info(f"SSE session closed for {peer}")
    return Response()


routes = [
    Route("/ping", handle_ping),
    Route("/sse", handle_sse),
    Mount("/messages/", app=sse_transport.handle_post_message),
]

app = Starlette(routes=routes)


# Graceful shutdown on SIGTERM
def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main():
    import uvicorn

    signal.signal(signal.SIGTERM, handle_sigterm)
    host = get_host()
    port = get_port()
    logger.info(f"Starting MCP HTTP server on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
