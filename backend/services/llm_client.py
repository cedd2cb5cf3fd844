"""LLM Client for Groq API integration."""
import time
from dataclasses import dataclass
from typing import List, Optional, Dict
from groq import Groq
from groq import (
    RateLimitError,
    AuthenticationError,
    APIError,
    APITimeoutError,
    APIConnectionError,
)
import logging

from config import GROQ_API_KEY, GROQ_BASE_URL
from errors import LLMError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from LLM generation."""
    text: str
    tokens_input: int
    tokens_output: int
    latency_ms: int
    model_used: str


class LLMClient:
    """Client for interfacing with Groq API for chat completions."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        """
        Initialize LLM client with Groq API key.

        Args:
            api_key: Groq API key (defaults to GROQ_API_KEY from environment)
            base_url: Optional override of the Groq API base URL
        """
        self.api_key = api_key or GROQ_API_KEY
        if not self.api_key:
            raise ValueError("GROQ_API_KEY must be provided or set in environment")

        self.base_url = base_url or GROQ_BASE_URL
        if self.base_url:
            self.client = Groq(api_key=self.api_key, base_url=self.base_url)
        else:
            self.client = Groq(api_key=self.api_key)
        logger.info("LLMClient initialized successfully")

    def generate(
        self,
        model: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 1024,
        temperature: float = 0.3
    ) -> LLMResponse:
        """
        Run a single chat completion against the Groq API.

        There is no retry: the first failure is reported to the caller.

        Args:
            model: Model identifier
            messages: Chat messages, each with ``role`` and ``content``
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature

        Returns:
            LLMResponse with text, token counts, and latency

        Raises:
            UpstreamError: Structured error with code, message, and details
        """
        start_time = time.time()

        try:
            logger.debug(f"Generating completion with model: {model}")

            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature
            )

            latency_ms = int((time.time() - start_time) * 1000)

            # First choice only, verbatim
            text = response.choices[0].message.content
            if not isinstance(text, str):
                raise self._upstream_error(
                    "API_ERROR", "Malformed response: completion has no text content",
                    model, start_time, TypeError(f"message content is {type(text).__name__}")
                )

            usage = getattr(response, "usage", None)
            tokens_input = usage.prompt_tokens if usage else 0
            tokens_output = usage.completion_tokens if usage else 0

            logger.info(
                f"Generated completion: model={model}, "
                f"input_tokens={tokens_input}, output_tokens={tokens_output}, "
                f"latency={latency_ms}ms"
            )

            return LLMResponse(
                text=text,
                tokens_input=tokens_input,
                tokens_output=tokens_output,
                latency_ms=latency_ms,
                model_used=model
            )

        except UpstreamError:
            raise

        except RateLimitError as e:
            raise self._upstream_error(
                "RATE_LIMIT_ERROR", "Rate limit exceeded.", model, start_time, e
            )

        except AuthenticationError as e:
            raise self._upstream_error(
                "AUTHENTICATION_ERROR", "Authentication failed. Please check your API key.",
                model, start_time, e
            )

        except APITimeoutError as e:
            raise self._upstream_error(
                "TIMEOUT_ERROR", "Request timed out.", model, start_time, e
            )

        except APIConnectionError as e:
            raise self._upstream_error(
                "CONNECTION_ERROR", "Could not connect to the Groq API.", model, start_time, e
            )

        except APIError as e:
            raise self._upstream_error(
                "API_ERROR", f"Groq API error: {str(e)}", model, start_time, e
            )

        except Exception as e:
            raise self._upstream_error(
                "UNKNOWN_ERROR", f"Unexpected error during generation: {str(e)}",
                model, start_time, e
            )

    @staticmethod
    def _upstream_error(
        code: str,
        message: str,
        model: str,
        start_time: float,
        original: Exception
    ) -> UpstreamError:
        """Log an upstream failure and wrap it in an UpstreamError."""
        latency_ms = int((time.time() - start_time) * 1000)
        error = LLMError(
            code=code,
            message=message,
            details={
                "model": model,
                "latency_ms": latency_ms,
                "original_error": str(original),
                "error_type": type(original).__name__
            }
        )
        logger.error(
            f"{code}: model={model}, latency={latency_ms}ms, error={original}",
            exc_info=original,
            extra={"error_code": error.code, "error_details": error.details}
        )
        return UpstreamError(error)
