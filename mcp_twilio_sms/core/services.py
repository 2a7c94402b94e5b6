"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import re
from typing import Optional

from .domain import CodeMatch, GetLatestCodeArgs, GetSmsArgs, ListSmsArgs, Message
from .ports import MessageReader

# Verification codes are 4-8 digit runs on word boundaries
DEFAULT_CODE_PATTERN = re.compile(r"\b(\d{4,8})\b", re.ASCII)

# How many recent messages get_latest_code scans
CODE_SCAN_LIMIT = 20


def compile_code_pattern(pattern: Optional[str] = None) -> re.Pattern:
    """Compile a caller-supplied pattern, or return the default one.

    Raises re.error for an invalid pattern.
    """
    if not pattern:
        return DEFAULT_CODE_PATTERN
    return re.compile(pattern)


def extract_code(pattern: re.Pattern, body: Optional[str]) -> Optional[str]:
    """Return the code found in body, or None.

    The first capturing group wins when the pattern has one and it matched
    something; otherwise the whole match is the code.
    """
    if not body:
        return None
    match = pattern.search(body)
    if match is None:
        return None
    code = match.group(1) if pattern.groups else None
    return code or match.group(0)


class ListMessagesService:
    """Use case: List recent messages received on the configured number"""

    def __init__(self, reader: MessageReader, phone_number: Optional[str]):
        self.reader = reader
        self.phone_number = phone_number

    def execute(self, args: ListSmsArgs) -> list[Message]:
        """Messages in provider order (most recent first)"""
        return self.reader.list_messages(
            to=self.phone_number,
            limit=args.limit,
            sender=args.sender
        )


class LatestCodeService:
    """Use case: Find the newest verification code in recent messages"""

    def __init__(self, reader: MessageReader, phone_number: Optional[str]):
        self.reader = reader
        self.phone_number = phone_number

    def execute(self, args: GetLatestCodeArgs) -> Optional[CodeMatch]:
        """
        Scan recent messages in provider order and return the first match.

        The listing read always happens first; a provider failure is reported
        ahead of an invalid pattern.
        """
        messages = self.reader.list_messages(
            to=self.phone_number,
            limit=CODE_SCAN_LIMIT,
            sender=args.sender
        )

        pattern = compile_code_pattern(args.pattern)

        for message in messages:
            code = extract_code(pattern, message.body)
            if code is not None:
                return CodeMatch(code=code, message=message)

        return None


class GetMessageService:
    """Use case: Fetch one message by SID"""

    def __init__(self, reader: MessageReader):
        self.reader = reader

    def execute(self, args: GetSmsArgs) -> Message:
        return self.reader.get_message(args.sid)
