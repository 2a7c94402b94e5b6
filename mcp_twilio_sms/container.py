"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

from .adapters import TwilioAdapter
from .core import (
    Credentials,
    MessageReader,
    ListMessagesService,
    LatestCodeService,
    GetMessageService
)


class Container:
    """Dependency injection container for the application

    Without usable credentials no reader is built and ``configured`` is False;
    the services are then left unset.
    """

    def __init__(self, credentials: Optional[Credentials], reader: Optional[MessageReader] = None):
        self.credentials = credentials or Credentials()

        # Adapters (infrastructure)
        if reader is None and self.credentials.can_connect:
            reader = TwilioAdapter(self.credentials)
        self.reader = reader

        # Services (use cases)
        self.list_messages: Optional[ListMessagesService] = None
        self.latest_code: Optional[LatestCodeService] = None
        self.get_message: Optional[GetMessageService] = None

        if self.reader is not None:
            phone_number = self.credentials.phone_number
            self.list_messages = ListMessagesService(self.reader, phone_number)
            self.latest_code = LatestCodeService(self.reader, phone_number)
            self.get_message = GetMessageService(self.reader)

    @property
    def configured(self) -> bool:
        return self.reader is not None
