#!/usr/bin/env python3
"""
CLI for twilio-sms MCP - test tools without an MCP client

Usage:
  twilio-sms-cli list-tools                      # Show MCP tool definitions
  twilio-sms-cli list                            # Last 10 messages to the Twilio number
  twilio-sms-cli list --limit 3 --from +1555...  # Last 3 from one sender
  twilio-sms-cli code                            # Latest 4-8 digit code
  twilio-sms-cli code --pattern "G-(\\d{6})"      # Custom pattern, group 1 is the code
  twilio-sms-cli get SM0123...                   # One message by SID

Credentials come from $TWILIO_CONFIG_FILE or --config.
Runs the same handlers as the MCP server, prints the same text.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .server import build_handlers


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_schema in TOOL_SCHEMAS.values():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def tool_command(handlers: MCPHandlers, name: str, arguments: dict[str, Any]) -> int:
    """Run one tool and print its text payload"""
    text = await handlers.call_tool(name, arguments)
    print(text)
    return 1 if text.startswith("Error:") else 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="twilio-sms CLI - Test MCP tools without an MCP client"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Twilio credentials JSON file (default: $TWILIO_CONFIG_FILE)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    # list command
    list_parser = subparsers.add_parser("list", help="List recent SMS messages")
    list_parser.add_argument("--limit", type=int, help="Maximum messages (default: 10)")
    list_parser.add_argument("--from", dest="sender", help="Only messages from this sender")

    # code command
    code_parser = subparsers.add_parser("code", help="Extract the latest verification code")
    code_parser.add_argument("--from", dest="sender", help="Only messages from this sender")
    code_parser.add_argument("--pattern", help="Regex for the code (default: 4-8 digits)")

    # get command
    get_parser = subparsers.add_parser("get", help="Get one SMS message by SID")
    get_parser.add_argument("sid", help="Message SID")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "list-tools":
        return asyncio.run(list_tools_command())

    handlers = build_handlers(args.config)

    if args.command == "list":
        arguments = {"limit": args.limit, "from": args.sender}
        return asyncio.run(tool_command(handlers, "list_sms", arguments))
    elif args.command == "code":
        arguments = {"from": args.sender, "pattern": args.pattern}
        return asyncio.run(tool_command(handlers, "get_latest_code", arguments))
    elif args.command == "get":
        return asyncio.run(tool_command(handlers, "get_sms", {"sid": args.sid}))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
