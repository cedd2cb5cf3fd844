"""HTTP client for the summarize endpoint."""
import logging
from typing import Dict
import httpx

from config import SUMMARIZE_API_URL, CLIENT_TIMEOUT
from errors import SummaryApiError

logger = logging.getLogger(__name__)


class SummaryApiClient:
    """Posts extracted text to ``/api/summarize`` and returns the summary."""

    def __init__(self, api_url: str = SUMMARIZE_API_URL, timeout: float = CLIENT_TIMEOUT):
        """
        Initialize the client.

        Args:
            api_url: Full URL of the summarize endpoint
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.timeout = timeout

    @staticmethod
    def build_payload(text: str) -> Dict[str, str]:
        return {"text": text}

    def summarize(self, text: str) -> str:
        """
        Request a summary of ``text``.

        Args:
            text: Extracted document text

        Returns:
            Summary returned by the server

        Raises:
            SummaryApiError: On network failure, non-2xx status or a
                response without a summary
        """
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.api_url, json=self.build_payload(text))
        except httpx.TimeoutException as e:
            logger.error(f"Summarize request timed out after {self.timeout}s")
            raise SummaryApiError() from e
        except httpx.RequestError as e:
            logger.error(f"Network error calling {self.api_url}: {str(e)}")
            raise SummaryApiError() from e

        if not response.is_success:
            logger.error(
                f"Summarize request failed with status {response.status_code}: {response.text}",
                extra={"status_code": response.status_code}
            )
            raise SummaryApiError(status_code=response.status_code)

        try:
            summary = response.json()["summary"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed summarize response: {response.text[:200]}")
            raise SummaryApiError(status_code=response.status_code) from e

        return summary
