"""Document data models."""
import mimetypes
from dataclasses import dataclass
from typing import Optional

from errors import UnsupportedMediaError

PDF_MEDIA_TYPE = "application/pdf"


def guess_media_type(filename: str) -> str:
    """Media type from a file name's extension."""
    media_type, _ = mimetypes.guess_type(filename)
    return media_type or "application/octet-stream"


@dataclass
class Document:
    """An uploaded PDF held in memory for one extraction/summarization cycle."""
    content: bytes
    media_type: str
    filename: Optional[str] = None

    def __post_init__(self):
        if self.media_type != PDF_MEDIA_TYPE:
            raise UnsupportedMediaError()


@dataclass
class Page:
    """Represents a single page of extracted text."""
    page_number: int
    text: str
    word_count: int


@dataclass
class Preview:
    """First-page raster preview of a document."""
    png: bytes
    width: int
    height: int
    page_count: int
