"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by the stdio server, the HTTP/SSE server and the CLI.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "list_sms": {
        "name": "list_sms",
        "description": "List recent SMS messages received on the Twilio number",
        "inputSchema": {
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": "Maximum number of messages to return (default: 10)"
                },
                "from": {
                    "type": "string",
                    "description": "Filter by sender phone number (optional)"
                }
            },
            "required": []
        }
    },
    "get_latest_code": {
        "name": "get_latest_code",
        "description": "Extract the latest 2FA/verification code from recent SMS messages",
        "inputSchema": {
            "type": "object",
            "properties": {
                "from": {
                    "type": "string",
                    "description": "Filter by sender (optional, e.g., 'Apple' or phone number)"
                },
                "pattern": {
                    "type": "string",
                    "description": "Regex pattern to match code (default: 4-8 digit codes)"
                }
            },
            "required": []
        }
    },
    "get_sms": {
        "name": "get_sms",
        "description": "Get a specific SMS message by its SID",
        "inputSchema": {
            "type": "object",
            "properties": {
                "sid": {
                    "type": "string",
                    "description": "The message SID"
                }
            },
            "required": ["sid"]
        }
    }
}
