"""API request/response models for the summarize endpoint."""
from typing import Optional
from pydantic import BaseModel, Field


class SummarizeRequest(BaseModel):
    """Request body for POST /api/summarize."""
    text: Optional[str] = Field(default=None, description="Extracted document text")


class SummarizeResponse(BaseModel):
    """Successful summarize response."""
    summary: str


class ErrorResponse(BaseModel):
    """Error response body shared by every failure status."""
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
