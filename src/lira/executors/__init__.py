"""Model executor layer.

One executor per backend kind behind a common deadline-enforcing
interface, plus the router that picks between them.
"""

from .base import ExecutionOutcome, ModelExecutor
from .language import LanguageModelExecutor, SimulatedLanguageExecutor, estimate_confidence
from .llm_client import LiteLLMClient
from .llm_schemas import ChatMessage, LLMRequest, LLMResponse, UsageInfo
from .quantum import (
    HttpQuantumOracle,
    LaunchOptimization,
    QuantumOracleBackend,
    QuantumOracleExecutor,
    QuantumPrediction,
    QuantumStatus,
    SimulatedQuantumOracle,
)
from .router import ExecutorRouter

__all__ = [
    # Interface
    "ExecutionOutcome",
    "ModelExecutor",
    # Language
    "LanguageModelExecutor",
    "SimulatedLanguageExecutor",
    "LiteLLMClient",
    "estimate_confidence",
    "ChatMessage",
    "LLMRequest",
    "LLMResponse",
    "UsageInfo",
    # Quantum
    "QuantumOracleBackend",
    "QuantumOracleExecutor",
    "SimulatedQuantumOracle",
    "HttpQuantumOracle",
    "QuantumPrediction",
    "QuantumStatus",
    "LaunchOptimization",
    # Router
    "ExecutorRouter",
]
