"""
Formatters for MCP tool results

Turn handler results into the single text payload each tool returns.
Used by both CLI and MCP adapters for consistent presentation.
"""
import json
from datetime import datetime, timezone
from typing import Any

NO_CODE_FOUND = "No verification code found in recent messages."


def to_json(data: Any) -> str:
    """Pretty-print with 2-space indent, non-ASCII left as-is"""
    return json.dumps(data, indent=2, ensure_ascii=False)


def to_utc_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2024-05-01T12:00:00.000Z

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_error(result: dict[str, Any]) -> str:
    return f"Error: {result.get('error', 'Unknown error')}"


def format_list_sms(result: dict[str, Any]) -> str:
    """Format list_sms result as a JSON array.

    Example output:
        [
          {
            "sid": "SM...",
            "from": "+15551234567",
            "body": "Your code is 482913",
            "dateSent": "2024-05-01T12:00:00+00:00",
            "status": "received"
          }
        ]
    """
    if not result.get("success"):
        return format_error(result)
    return to_json(result["messages"])


def format_latest_code(result: dict[str, Any]) -> str:
    """Format get_latest_code result as a JSON object, or the no-match text"""
    if not result.get("success"):
        return format_error(result)
    if result.get("match") is None:
        return NO_CODE_FOUND
    return to_json(result["match"])


def format_get_sms(result: dict[str, Any]) -> str:
    if not result.get("success"):
        return format_error(result)
    return to_json(result["message"])
