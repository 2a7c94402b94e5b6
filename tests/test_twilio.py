"""
Unit tests for the Twilio adapter and the container wiring

The Twilio client is mocked; no network calls.
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from mcp_twilio_sms.adapters import TwilioAdapter
from mcp_twilio_sms.container import Container
from mcp_twilio_sms.core import Credentials

SENT_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def twilio_record(sid="SM1", body="Your code is 482913", date_sent=SENT_AT):
    record = MagicMock()
    record.sid = sid
    record.from_ = "+15551234567"
    record.to = "+15550001111"
    record.body = body
    record.date_sent = date_sent
    record.status = "received"
    return record


class TestTwilioAdapter:
    """Test TwilioAdapter class."""

    def test_builds_client_from_credentials(self, credentials):
        with patch('mcp_twilio_sms.adapters.twilio.Client') as mock_client:
            TwilioAdapter(credentials)
            mock_client.assert_called_once_with("AC123", "secret")

    def test_list_messages_filters(self, credentials):
        client = MagicMock()
        client.messages.list.return_value = [twilio_record()]
        adapter = TwilioAdapter(credentials, client=client)

        messages = adapter.list_messages(to="+15550001111", limit=5, sender="+15551234567")

        client.messages.list.assert_called_once_with(
            to="+15550001111", from_="+15551234567", limit=5
        )
        assert len(messages) == 1
        message = messages[0]
        assert message.sid == "SM1"
        assert message.from_ == "+15551234567"
        assert message.body == "Your code is 482913"
        assert message.date_sent == SENT_AT
        assert message.status == "received"

    def test_list_messages_without_sender(self, credentials):
        client = MagicMock()
        client.messages.list.return_value = []
        adapter = TwilioAdapter(credentials, client=client)

        assert adapter.list_messages(to="+15550001111", limit=10) == []
        client.messages.list.assert_called_once_with(to="+15550001111", limit=10)

    def test_list_preserves_provider_order(self, credentials):
        client = MagicMock()
        client.messages.list.return_value = [twilio_record("SM3"), twilio_record("SM1"), twilio_record("SM2")]
        adapter = TwilioAdapter(credentials, client=client)

        messages = adapter.list_messages(to=None, limit=10)

        assert [m.sid for m in messages] == ["SM3", "SM1", "SM2"]
        client.messages.list.assert_called_once_with(limit=10)

    def test_get_message(self, credentials):
        client = MagicMock()
        client.messages.return_value.fetch.return_value = twilio_record("SM42")
        adapter = TwilioAdapter(credentials, client=client)

        message = adapter.get_message("SM42")

        client.messages.assert_called_once_with("SM42")
        assert message.sid == "SM42"
        assert message.to == "+15550001111"

    def test_get_message_not_found_propagates(self, credentials):
        client = MagicMock()
        client.messages.return_value.fetch.side_effect = RuntimeError("HTTP 404 error: not found")
        adapter = TwilioAdapter(credentials, client=client)

        with pytest.raises(RuntimeError, match="404"):
            adapter.get_message("SMnope")


class TestContainer:
    """Test dependency injection container."""

    def test_no_credentials_is_disabled(self):
        container = Container(None)

        assert not container.configured
        assert container.reader is None
        assert container.list_messages is None

    def test_incomplete_credentials_is_disabled(self):
        container = Container(Credentials(account_sid="AC123", phone_number="+1555"))
        assert not container.configured

    def test_credentials_build_twilio_reader(self, credentials):
        with patch('mcp_twilio_sms.adapters.twilio.Client'):
            container = Container(credentials)

        assert container.configured
        assert isinstance(container.reader, TwilioAdapter)
        assert container.list_messages.phone_number == "+15550001111"
        assert container.latest_code is not None
        assert container.get_message is not None

    def test_injected_reader(self, credentials, reader):
        container = Container(credentials, reader=reader)

        assert container.reader is reader
        assert container.configured
