"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.

Every handler returns a result dict: {"success": True, ...} or
{"success": False, "error": "..."}. Nothing raises past this layer.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from ...container import Container
from ...core.domain import GetLatestCodeArgs, GetSmsArgs, ListSmsArgs, Message
from ...formatters import format_error, format_get_sms, format_latest_code, format_list_sms, to_utc_timestamp

logger = logging.getLogger(__name__)

NOT_CONFIGURED = (
    "Twilio credentials not configured. Set TWILIO_CONFIG_FILE to a JSON file "
    "containing accountSid, authToken, and phoneNumber."
)


def _date_sent(message: Message) -> dict[str, str]:
    # Key is left out entirely when the provider has no timestamp
    if message.date_sent is None:
        return {}
    return {"dateSent": to_utc_timestamp(message.date_sent)}


def message_summary(message: Message) -> dict[str, Any]:
    """Projection used by list_sms"""
    return {
        "sid": message.sid,
        "from": message.from_,
        "body": message.body,
        **_date_sent(message),
        "status": message.status
    }


def message_detail(message: Message) -> dict[str, Any]:
    """Projection used by get_sms"""
    return {
        "sid": message.sid,
        "from": message.from_,
        "to": message.to,
        "body": message.body,
        **_date_sent(message),
        "status": message.status
    }


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container
        self.tools: dict[str, tuple[Callable[[Mapping[str, Any]], Awaitable[dict[str, Any]]], Callable[[dict[str, Any]], str]]] = {
            "list_sms": (self.list_sms, format_list_sms),
            "get_latest_code": (self.get_latest_code, format_latest_code),
            "get_sms": (self.get_sms, format_get_sms),
        }

    async def list_sms(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """List recent messages sent to the configured number"""
        try:
            args = ListSmsArgs.from_arguments(arguments)
            messages = await asyncio.to_thread(self.container.list_messages.execute, args)

            return {
                "success": True,
                "messages": [message_summary(m) for m in messages]
            }

        except Exception as e:
            logger.error(f"list_sms failed: {e}")
            return {"success": False, "error": str(e)}

    async def get_latest_code(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """Extract the newest verification code from recent messages"""
        try:
            args = GetLatestCodeArgs.from_arguments(arguments)
            found = await asyncio.to_thread(self.container.latest_code.execute, args)

            if found is None:
                return {"success": True, "match": None}

            message = found.message
            return {
                "success": True,
                "match": {
                    "code": found.code,
                    "from": message.from_,
                    "body": message.body,
                    **_date_sent(message)
                }
            }

        except Exception as e:
            logger.error(f"get_latest_code failed: {e}")
            return {"success": False, "error": str(e)}

    async def get_sms(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """Fetch a single message by SID"""
        try:
            args = GetSmsArgs.from_arguments(arguments)
            message = await asyncio.to_thread(self.container.get_message.execute, args)

            return {
                "success": True,
                "message": message_detail(message)
            }

        except Exception as e:
            logger.error(f"get_sms failed: {e}")
            return {"success": False, "error": str(e)}

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Run a tool by name and return its text payload"""
        if not self.container.configured:
            return format_error({"success": False, "error": NOT_CONFIGURED})

        tool = self.tools.get(name)
        if tool is None:
            return f"Unknown tool: {name}"

        handler, formatter = tool
        result = await handler(arguments or {})
        return formatter(result)
