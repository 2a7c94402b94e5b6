"""
Domain Models - Pure business entities

Message records are plain dataclasses. Credentials and tool arguments come
from untrusted JSON, so they are pydantic models validated at the boundary.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

DEFAULT_LIST_LIMIT = 10


class InvalidArguments(ValueError):
    """Tool arguments have the wrong type or a missing required value"""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "InvalidArguments":
        problems = []
        for detail in error.errors():
            field = ".".join(str(part) for part in detail["loc"]) or "arguments"
            problems.append(f"'{field}': {detail['msg']}")
        return cls("; ".join(problems))


class Credentials(BaseModel):
    """Twilio account credentials, loaded once at startup"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    account_sid: Optional[StrictStr] = Field(default=None, alias="accountSid")
    auth_token: Optional[StrictStr] = Field(default=None, alias="authToken")
    phone_number: Optional[StrictStr] = Field(default=None, alias="phoneNumber")

    @field_validator("account_sid")
    @classmethod
    def account_sid_prefix(cls, value: Optional[str]) -> Optional[str]:
        # Twilio account SIDs always start with AC
        if value and not value.startswith("AC"):
            raise ValueError("accountSid must start with AC")
        return value

    @property
    def can_connect(self) -> bool:
        """Both account SID and auth token are present"""
        return bool(self.account_sid and self.auth_token)


@dataclass
class Message:
    """An SMS message as stored by the provider"""
    sid: str
    from_: Optional[str]
    to: Optional[str]
    body: Optional[str]
    date_sent: Optional[datetime]
    status: Optional[str]


@dataclass
class CodeMatch:
    """A verification code extracted from a message"""
    code: str
    message: Message


class ToolArgs(BaseModel):
    """Base for per-tool argument records; unknown keys are ignored"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]):
        try:
            return cls.model_validate(dict(arguments))
        except ValidationError as e:
            raise InvalidArguments.from_validation_error(e) from None


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


class ListSmsArgs(ToolArgs):
    """Arguments for list_sms"""
    limit: int = DEFAULT_LIST_LIMIT
    sender: Optional[StrictStr] = Field(default=None, alias="from")

    @field_validator("limit", mode="before")
    @classmethod
    def resolve_limit(cls, value: Any) -> int:
        if value is None or value == 0:
            return DEFAULT_LIST_LIMIT
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("must be a number")
        if value != int(value) or value < 1:
            raise ValueError("must be a positive whole number")
        return int(value)

    @field_validator("sender", mode="before")
    @classmethod
    def blank_sender_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)


class GetLatestCodeArgs(ToolArgs):
    """Arguments for get_latest_code"""
    sender: Optional[StrictStr] = Field(default=None, alias="from")
    pattern: Optional[StrictStr] = None

    @field_validator("sender", "pattern", mode="before")
    @classmethod
    def blank_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)


class GetSmsArgs(ToolArgs):
    """Arguments for get_sms"""
    sid: StrictStr = Field(min_length=1)
