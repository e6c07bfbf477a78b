"""Language-model backend executors."""

from __future__ import annotations

import asyncio
import math

import structlog

from lira.config import LLMSettings
from lira.enums import BackendKind
from lira.exceptions import BackendError

from .base import ExecutionOutcome, ModelExecutor
from .llm_client import LiteLLMClient
from .llm_schemas import ChatMessage, LLMRequest, LLMResponse

logger = structlog.get_logger()

# Confidence used when the provider returns no token log-probabilities
FINISH_REASON_CONFIDENCE: dict[str, float] = {
    "stop": 0.9,
    "length": 0.6,
    "content_filter": 0.2,
}
DEFAULT_CONFIDENCE = 0.5


def estimate_confidence(response: LLMResponse) -> float:
    """Derive a [0, 1] confidence score from a completion.

    Uses the geometric-mean token probability when log-probabilities are
    available, otherwise a finish-reason table.

    Args:
        response: Completion response

    Returns:
        Confidence score
    """
    if response.token_logprobs:
        mean_logprob = sum(response.token_logprobs) / len(response.token_logprobs)
        return min(max(math.exp(mean_logprob), 0.0), 1.0)

    if response.finish_reason is None:
        return DEFAULT_CONFIDENCE
    return FINISH_REASON_CONFIDENCE.get(response.finish_reason, DEFAULT_CONFIDENCE)


class LanguageModelExecutor(ModelExecutor):
    """Runs agents on an external inference provider through LiteLLM."""

    kind = BackendKind.LANGUAGE

    def __init__(self, client: LiteLLMClient, settings: LLMSettings) -> None:
        """Initialize language executor.

        Args:
            client: LiteLLM client
            settings: LLM settings (aliases, sampling, prompt)
        """
        self.client = client
        self.settings = settings

    def resolve_model_name(self, model_type: str) -> str:
        """Map an agent's model-type identifier to a LiteLLM model name.

        Args:
            model_type: Identifier such as "GPT-4" or "gpt-4o-mini"

        Returns:
            Alias target if configured, the identifier itself otherwise,
            or the default model for a blank identifier
        """
        model_type = model_type.strip()
        if not model_type:
            return self.settings.default_model

        if model_type in self.settings.model_aliases:
            return self.settings.model_aliases[model_type]

        folded = model_type.casefold()
        for alias, target in self.settings.model_aliases.items():
            if alias.casefold() == folded:
                return target
        return model_type

    async def _invoke(self, model_type: str, payload: str) -> ExecutionOutcome:
        model_name = self.resolve_model_name(model_type)
        request = LLMRequest(
            model=model_name,
            messages=[
                ChatMessage(role="system", content=self.settings.system_prompt),
                ChatMessage(role="user", content=payload),
            ],
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
            logprobs=self.settings.request_logprobs,
        )

        response = await self.client.chat_completion(request)

        if not response.content.strip():
            raise BackendError(f"Model '{model_name}' returned an empty completion")

        return ExecutionOutcome.succeeded(
            output=response.content,
            confidence=estimate_confidence(response),
            telemetry={
                "model": response.model,
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
                "finish_reason": response.finish_reason,
            },
        )


class SimulatedLanguageExecutor(ModelExecutor):
    """Offline stand-in for the language backend.

    Echoes the input as an analysis with a fixed confidence, which keeps
    the service usable without provider credentials.
    """

    kind = BackendKind.LANGUAGE

    def __init__(self, confidence: float = 0.95, latency_seconds: float = 0.0) -> None:
        self.confidence = confidence
        self.latency_seconds = latency_seconds

    async def _invoke(self, model_type: str, payload: str) -> ExecutionOutcome:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        return ExecutionOutcome.succeeded(
            output=f"Analyzed: {payload}",
            confidence=self.confidence,
            telemetry={"model": model_type, "simulated": True},
        )
