"""Summary request/result data models."""
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from errors import SummarizerError, ValidationError


def _new_request_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class SummaryRequest:
    """Text to summarize. Never empty or whitespace-only."""
    text: str
    request_id: str = field(default_factory=_new_request_id)

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValidationError()


@dataclass
class SummaryResult:
    """
    Outcome of one summarize call: a summary or an error, never both.

    Attributes:
        summary: Verbatim model output on success
        error: Public error message on failure
        status_code: HTTP-equivalent status
        error_code: Internal error code, kept out of response bodies
        request_id: Correlation id of the originating request
    """
    summary: Optional[str] = None
    error: Optional[str] = None
    status_code: int = 200
    error_code: Optional[str] = None
    request_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, summary: str, request_id: Optional[str] = None) -> "SummaryResult":
        return cls(summary=summary, request_id=request_id)

    @classmethod
    def failure(cls, exc: SummarizerError, request_id: Optional[str] = None) -> "SummaryResult":
        return cls(
            error=exc.public_message,
            status_code=exc.status_code,
            error_code=exc.code,
            request_id=request_id
        )

    def to_body(self) -> Dict[str, Any]:
        """Wire body: exactly ``{"summary": ...}`` or ``{"error": ...}``."""
        if self.ok:
            return {"summary": self.summary}
        return {"error": self.error}
