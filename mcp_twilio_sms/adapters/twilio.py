"""
Twilio Adapter

Implements MessageReader port using the twilio library.
"""
import logging
from typing import Any, Optional

from twilio.rest import Client

from ..core.domain import Credentials, Message
from ..core.ports import MessageReader

# Request/response dumps from the SDK's HTTP client are too chatty for INFO
logging.getLogger("twilio.http_client").setLevel(logging.WARNING)


def to_message(record: Any) -> Message:
    """Map a twilio MessageInstance onto the domain Message"""
    return Message(
        sid=record.sid,
        from_=record.from_,
        to=record.to,
        body=record.body,
        date_sent=record.date_sent,
        status=record.status
    )


class TwilioAdapter(MessageReader):
    """Message reader backed by the Twilio REST API"""

    def __init__(self, credentials: Credentials, client: Optional[Client] = None):
        self.client = client or Client(credentials.account_sid, credentials.auth_token)

    def list_messages(self, to: Optional[str], limit: int, sender: Optional[str] = None) -> list[Message]:
        """List messages; sender filtering happens provider-side"""
        filters: dict[str, Any] = {"limit": limit}
        if to:
            filters["to"] = to
        if sender:
            filters["from_"] = sender

        records = self.client.messages.list(**filters)
        return [to_message(record) for record in records]

    def get_message(self, sid: str) -> Message:
        """Fetch one message; TwilioRestException propagates on 404"""
        record = self.client.messages(sid).fetch()
        return to_message(record)
