"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Optional

from .domain import Message


class MessageReader(ABC):
    """Port for reading the provider's message log"""

    @abstractmethod
    def list_messages(self, to: Optional[str], limit: int, sender: Optional[str] = None) -> list[Message]:
        """List messages sent to a number, most recent first"""
        pass

    @abstractmethod
    def get_message(self, sid: str) -> Message:
        """Fetch one message by SID, raising if it does not exist"""
        pass
