"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import (
    Credentials,
    Message,
    CodeMatch,
    InvalidArguments,
    ListSmsArgs,
    GetLatestCodeArgs,
    GetSmsArgs
)
from .ports import MessageReader
from .services import (
    ListMessagesService,
    LatestCodeService,
    GetMessageService
)

__all__ = [
    # Domain models
    "Credentials",
    "Message",
    "CodeMatch",
    "InvalidArguments",
    "ListSmsArgs",
    "GetLatestCodeArgs",
    "GetSmsArgs",
    # Ports
    "MessageReader",
    # Services
    "ListMessagesService",
    "LatestCodeService",
    "GetMessageService",
]
