"""LiteLLM client wrapper.

Async wrapper around LiteLLM with retries for transient provider errors.
"""

from typing import Any

import litellm
import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .llm_schemas import LLMRequest, LLMResponse, UsageInfo

logger = structlog.get_logger()

TRANSIENT_ERRORS = (
    litellm.APIConnectionError,
    litellm.RateLimitError,
    litellm.ServiceUnavailableError,
    litellm.Timeout,
)


class LiteLLMClient:
    """Async LiteLLM client with automatic retry logic.

    LiteLLM uses API keys from environment variables:
    - OPENAI_API_KEY
    - ANTHROPIC_API_KEY
    - GOOGLE_API_KEY
    """

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    async def chat_completion(
        self,
        request: LLMRequest,
    ) -> LLMResponse:
        """Call LLM with automatic retry (3 attempts on transient errors).

        Args:
            request: LLM completion request

        Returns:
            LLM completion response

        Raises:
            Exception: If the provider rejects the call or all retries fail
        """
        logger.info(
            "llm_chat_completion_start",
            model=request.model,
            message_count=len(request.messages),
            temperature=request.temperature,
        )

        messages = [{"role": msg.role, "content": msg.content} for msg in request.messages]

        params: dict[str, object] = {
            "model": request.model,
            "messages": messages,
            "temperature": request.temperature,
        }

        if request.max_tokens is not None:
            params["max_tokens"] = request.max_tokens

        if request.logprobs:
            params["logprobs"] = True

        response = await litellm.acompletion(**params)

        choice = response["choices"][0]
        content = choice["message"]["content"] or ""
        finish_reason = choice.get("finish_reason")

        usage = UsageInfo(
            input_tokens=response["usage"]["prompt_tokens"],
            output_tokens=response["usage"]["completion_tokens"],
            total_tokens=response["usage"]["total_tokens"],
        )

        logger.info(
            "llm_chat_completion_success",
            model=response["model"],
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            finish_reason=finish_reason,
        )

        return LLMResponse(
            content=content,
            usage=usage,
            model=response["model"],
            finish_reason=finish_reason,
            token_logprobs=_extract_token_logprobs(choice.get("logprobs")),
        )


def _field(obj: Any, name: str) -> Any:
    # LiteLLM hands back either plain dicts or attribute objects
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _extract_token_logprobs(logprobs: Any) -> list[float] | None:
    """Pull per-token log-probabilities out of a choice, if present."""
    if logprobs is None:
        return None

    tokens = _field(logprobs, "content")
    if not tokens:
        return None

    values = [_field(token, "logprob") for token in tokens]
    result = [float(v) for v in values if v is not None]
    return result or None
