"""Resolution outcome returned by every proxy data kind."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    SECONDARY_SUCCESS = "secondary_success"
    FALLBACK = "fallback"
    ERROR = "error"


class ErrorEnvelope(BaseModel):
    """Body of a failed resolution."""

    error: str
    details: Any = None

    def as_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ResolutionOutcome(BaseModel):
    """Exactly one of these is produced per inbound request."""

    kind: OutcomeKind
    body: Any = None
    status_code: int = 200
    media_type: str = JSON_MEDIA_TYPE

    @classmethod
    def success(
        cls, body: Any, media_type: str = JSON_MEDIA_TYPE
    ) -> ResolutionOutcome:
        return cls(kind=OutcomeKind.SUCCESS, body=body, media_type=media_type)

    @classmethod
    def secondary(cls, body: Any) -> ResolutionOutcome:
        return cls(kind=OutcomeKind.SECONDARY_SUCCESS, body=body)

    @classmethod
    def fallback(cls, body: Any) -> ResolutionOutcome:
        return cls(kind=OutcomeKind.FALLBACK, body=body)

    @classmethod
    def error(cls, message: str, details: Any = None) -> ResolutionOutcome:
        envelope = ErrorEnvelope(error=message, details=details)
        return cls(kind=OutcomeKind.ERROR, body=envelope.as_body(), status_code=500)
