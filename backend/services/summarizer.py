"""
Summarization proxy for LearnSmart PDF Summarizer.

One operation, ``SummarizationService.summarize``, turns extracted document
text into a ``SummaryResult``. Both server entry points (the standalone
FastAPI app and the serverless handler) call it and only translate framing.
"""
import logging
from typing import Any, Dict, List, Optional

from config import SUMMARY_MODEL, SUMMARY_TEMPERATURE, SUMMARY_MAX_TOKENS
from errors import LLMError, UpstreamError, ValidationError
from models.summary import SummaryRequest, SummaryResult
from services.llm_client import LLMClient

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert summarizer. Your task is to create a concise, well-structured "
    "summary of the provided text. Focus on the main ideas, key points, and important "
    "details. Organize the summary with clear sections if appropriate. The summary "
    "should be comprehensive yet concise."
)

USER_PROMPT_PREFIX = "Please summarize the following text: \n\n"


class SummarizationService:
    """Forwards text to the chat-completion API with a fixed prompt."""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        model: str = SUMMARY_MODEL,
        temperature: float = SUMMARY_TEMPERATURE,
        max_tokens: int = SUMMARY_MAX_TOKENS
    ):
        """
        Initialize the service.

        Args:
            llm_client: Upstream client; built from the environment on first
                use when omitted
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Maximum output tokens
        """
        self._llm_client = llm_client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @property
    def llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = LLMClient()
        return self._llm_client

    @staticmethod
    def build_messages(text: str) -> List[Dict[str, str]]:
        """Build the two-message conversation. ``text`` is used as-is."""
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"{USER_PROMPT_PREFIX}{text}"},
        ]

    def build_completion_request(self, text: str) -> Dict[str, Any]:
        """Full keyword arguments for one completion call."""
        return {
            "model": self.model,
            "messages": self.build_messages(text),
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def summarize(self, text: Any) -> SummaryResult:
        """
        Summarize ``text``.

        Invalid input is rejected before the upstream client is touched.
        Every upstream failure collapses to the same public error; the
        specific cause stays on ``error_code`` and in the logs.

        Args:
            text: Extracted document text

        Returns:
            SummaryResult with the verbatim model output or an error
        """
        try:
            request = SummaryRequest(text=text)
        except ValidationError as e:
            logger.info("Rejected summarize request: no text provided")
            return SummaryResult.failure(e)

        log_extra = {"request_id": request.request_id, "model": self.model}
        logger.info(
            f"Summarizing {len(request.text)} characters (request_id={request.request_id})",
            extra=log_extra
        )

        try:
            llm_response = self.llm_client.generate(**self.build_completion_request(request.text))
        except UpstreamError as e:
            logger.error(
                f"Failed to generate summary: {e.error.code} (request_id={request.request_id})",
                extra={**log_extra, "error_code": e.error.code}
            )
            return SummaryResult.failure(e, request_id=request.request_id)
        except Exception as e:
            # Missing credentials or anything else outside the client's own handling
            error = UpstreamError(LLMError(
                code="CONFIGURATION_ERROR" if isinstance(e, ValueError) else "UNKNOWN_ERROR",
                message=str(e),
                details={"error_type": type(e).__name__}
            ))
            logger.error(
                f"Failed to generate summary: {e} (request_id={request.request_id})",
                exc_info=True,
                extra={**log_extra, "error_code": error.code}
            )
            return SummaryResult.failure(error, request_id=request.request_id)

        logger.info(
            f"Summary generated in {llm_response.latency_ms}ms (request_id={request.request_id})",
            extra={**log_extra, "latency_ms": llm_response.latency_ms}
        )
        return SummaryResult.success(llm_response.text, request_id=request.request_id)
