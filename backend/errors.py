"""Error taxonomy for LearnSmart PDF Summarizer.

Every error carries the message that is safe to show to a user, the
HTTP-equivalent status it maps to, and a stable code used in logs.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LLMError:
    """Structured error information from the upstream LLM provider."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class SummarizerError(Exception):
    """Base class for all summarizer errors."""

    status_code = 500
    code = "INTERNAL_ERROR"
    public_message = "Failed to generate summary"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.public_message
        super().__init__(self.message)


class ValidationError(SummarizerError):
    """Missing, empty or whitespace-only input text."""

    status_code = 400
    code = "VALIDATION_ERROR"
    public_message = "No text provided"


class UnsupportedMediaError(SummarizerError):
    """Uploaded file is not a PDF."""

    status_code = 415
    code = "UNSUPPORTED_MEDIA"
    public_message = "Please upload a valid PDF file."


class ExtractionError(SummarizerError):
    """The PDF could not be parsed for text."""

    status_code = 422
    code = "EXTRACTION_ERROR"
    public_message = "Could not extract text from the PDF."


class MethodError(SummarizerError):
    """HTTP verb other than POST."""

    status_code = 405
    code = "METHOD_NOT_ALLOWED"
    public_message = "Method not allowed"


class UpstreamError(SummarizerError):
    """Any failure calling the summarization provider.

    The public message is always the generic one; the provider-specific
    cause is kept on ``error`` for logging.
    """

    code = "UPSTREAM_ERROR"

    def __init__(self, error: LLMError):
        self.error = error
        super().__init__(error.message)
        self.code = error.code


class SummaryApiError(SummarizerError):
    """The summarize endpoint could not be reached or returned an error."""

    status_code = 502
    code = "SUMMARY_API_ERROR"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.response_status = status_code
