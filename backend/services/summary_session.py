"""
Per-user summarize session.

Tracks one selected PDF and the outcome of summarizing it:

    IDLE -> READY (file selected) -> PROCESSING -> DONE | FAILED

Each summarize call is tagged with a monotonically increasing request id and
only the result of the latest issued request is applied, so a slow response
can never overwrite a fresher one.
"""
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from errors import ExtractionError, UnsupportedMediaError
from models.document import Document, Preview, guess_media_type
from services.pdf_extractor import PdfExtractor
from services.summary_client import SummaryApiClient

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "Please upload a PDF file first."
GENERIC_FAILURE_MESSAGE = "An error occurred while generating the summary. Please try again."


class SessionState(str, Enum):
    IDLE = "idle"
    READY = "ready"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SessionSnapshot:
    """Read-only view of a session for display."""
    state: SessionState
    filename: Optional[str]
    summary: str
    error: str
    preview: Optional[Preview]


class SummarySession:
    """Client-side state for summarizing one PDF at a time."""

    def __init__(
        self,
        api_client: Optional[SummaryApiClient] = None,
        extractor: Optional[PdfExtractor] = None
    ):
        self.api_client = api_client or SummaryApiClient()
        self.extractor = extractor or PdfExtractor()

        self._lock = threading.Lock()
        self._next_request_id = 0
        self._latest_request_id = 0

        self.state = SessionState.IDLE
        self.document: Optional[Document] = None
        self.preview: Optional[Preview] = None
        self.summary = ""
        self.error = ""

    def select_file(
        self,
        content: Optional[bytes],
        media_type: Optional[str] = None,
        filename: Optional[str] = None
    ) -> SessionSnapshot:
        """
        Select a new file, replacing any previous one.

        Non-PDF files are rejected in-session without any network call.
        Selecting a file invalidates requests still in flight.
        """
        try:
            if content is None:
                raise UnsupportedMediaError()
            document = Document(content=content, media_type=media_type or "", filename=filename)
        except UnsupportedMediaError as e:
            logger.info(f"Rejected upload {filename!r} with media type {media_type!r}")
            with self._lock:
                self._invalidate()
                self.document = None
                self.preview = None
                self.summary = ""
                self.error = e.public_message
                self.state = SessionState.IDLE
            return self.snapshot()

        preview = self.extractor.render_preview(document)

        with self._lock:
            self._invalidate()
            self.document = document
            self.preview = preview
            self.summary = ""
            self.error = ""
            self.state = SessionState.READY
        return self.snapshot()

    def select_path(self, path: Union[str, Path]) -> SessionSnapshot:
        """Select a file from disk, guessing its media type from the name."""
        path = Path(path)
        return self.select_file(path.read_bytes(), guess_media_type(path.name), path.name)

    def begin(self) -> int:
        """Issue a new request id and enter PROCESSING."""
        with self._lock:
            self._next_request_id += 1
            self._latest_request_id = self._next_request_id
            self.error = ""
            self.state = SessionState.PROCESSING
            return self._latest_request_id

    def complete(self, request_id: int, summary: str) -> bool:
        """Apply a successful result if it belongs to the latest request."""
        with self._lock:
            if request_id != self._latest_request_id:
                logger.info(f"Discarding stale summary for request {request_id}")
                return False
            self.summary = summary
            self.error = ""
            self.state = SessionState.DONE
            return True

    def fail(self, request_id: int, message: str = GENERIC_FAILURE_MESSAGE) -> bool:
        """Apply a failure if it belongs to the latest request."""
        with self._lock:
            if request_id != self._latest_request_id:
                logger.info(f"Discarding stale failure for request {request_id}")
                return False
            self.error = message
            self.state = SessionState.FAILED
            return True

    def summarize(self) -> SessionSnapshot:
        """
        Extract the selected document's text and request its summary.

        Returns:
            Snapshot after the request settles
        """
        document = self.document
        if document is None:
            with self._lock:
                self.error = NO_FILE_MESSAGE
            return self.snapshot()

        request_id = self.begin()
        try:
            text = self.extractor.extract_text(document)
            summary = self.api_client.summarize(text)
        except ExtractionError as e:
            logger.error(f"Error extracting text: {e}")
            self.fail(request_id, e.public_message)
        except Exception as e:
            logger.error(f"Error generating summary: {e}", exc_info=True)
            self.fail(request_id, GENERIC_FAILURE_MESSAGE)
        else:
            self.complete(request_id, summary)
        return self.snapshot()

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                state=self.state,
                filename=self.document.filename if self.document else None,
                summary=self.summary,
                error=self.error,
                preview=self.preview
            )

    def _invalidate(self) -> None:
        # Caller holds the lock
        self._next_request_id += 1
        self._latest_request_id = self._next_request_id
