"""Data models for LearnSmart PDF Summarizer."""
from .document import Document, Page, Preview, PDF_MEDIA_TYPE, guess_media_type
from .summary import SummaryRequest, SummaryResult
from .api import SummarizeRequest, SummarizeResponse, ErrorResponse, HealthResponse

__all__ = [
    "Document",
    "Page",
    "Preview",
    "PDF_MEDIA_TYPE",
    "guess_media_type",
    "SummaryRequest",
    "SummaryResult",
    "SummarizeRequest",
    "SummarizeResponse",
    "ErrorResponse",
    "HealthResponse",
]
