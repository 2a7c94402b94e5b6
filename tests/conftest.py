"""Shared fixtures for twilio-sms-mcp tests."""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from mcp_twilio_sms.adapters.mcp import MCPHandlers
from mcp_twilio_sms.container import Container
from mcp_twilio_sms.core import Credentials, Message, MessageReader

SENT_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _make_message(body, sid="SM1", from_="+15551234567", date_sent=SENT_AT, status="received"):
    return Message(
        sid=sid,
        from_=from_,
        to="+15550001111",
        body=body,
        date_sent=date_sent,
        status=status
    )


@pytest.fixture
def make_message():
    """Factory for domain Message records"""
    return _make_message


@pytest.fixture
def credentials():
    return Credentials(
        account_sid="AC123",
        auth_token="secret",
        phone_number="+15550001111"
    )


@pytest.fixture
def reader():
    """MessageReader stand-in; tests set list_messages/get_message return values"""
    mock_reader = MagicMock(spec=MessageReader)
    mock_reader.list_messages.return_value = []
    return mock_reader


@pytest.fixture
def handlers(credentials, reader):
    return MCPHandlers(Container(credentials, reader=reader))


@pytest.fixture
def disabled_handlers():
    return MCPHandlers(Container(None))
