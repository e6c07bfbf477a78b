"""Configuration settings.

Each concern reads its own environment prefix (and an optional ``.env``
file). Use the cached ``get_*_settings`` accessors instead of
instantiating the classes directly.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lira.enums import ExecutorMode


class DispatchSettings(BaseSettings):
    """Dispatcher behavior settings."""

    default_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-agent deadline used when a request does not set one",
    )
    max_timeout_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Largest per-agent deadline a caller may request",
    )
    max_parallel: int = Field(
        default=16,
        ge=1,
        description="Maximum number of agent executions running at once per batch",
    )
    max_batch_size: int = Field(
        default=100,
        ge=1,
        description="Maximum number of agent IDs accepted in one batch",
    )
    executor_mode: ExecutorMode = Field(
        default=ExecutorMode.SIMULATED,
        description="'simulated' runs offline backends, 'live' calls real providers",
    )
    seed_demo_data: bool = Field(
        default=True,
        description="Preload the demo agents and models at startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="DISPATCH_",
        env_file=".env",
        extra="ignore",
    )


class LLMSettings(BaseSettings):
    """Language backend settings.

    LiteLLM reads provider API keys from the usual environment variables
    (OPENAI_API_KEY, ANTHROPIC_API_KEY, ...).
    """

    default_model: str = Field(
        default="gpt-4o-mini",
        description="Model used when an agent's model type is blank",
    )
    model_aliases: dict[str, str] = Field(
        default={
            "GPT-4": "gpt-4o",
            "Claude-3": "claude-3-haiku-20240307",
        },
        description="Agent model-type identifiers mapped to LiteLLM model names",
    )
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=1024, ge=1)
    system_prompt: str = Field(
        default=(
            "You are an analysis agent. Study the input and reply with a "
            "concise, actionable analysis."
        ),
        description="System message sent ahead of the agent input",
    )
    request_logprobs: bool = Field(
        default=False,
        description="Ask the provider for token log-probabilities to derive confidence",
    )
    simulated_confidence: float = Field(default=0.95, ge=0.0, le=1.0)
    simulated_latency_seconds: float = Field(default=0.0, ge=0.0)

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        extra="ignore",
        protected_namespaces=("settings_",),
    )


class QuantumSettings(BaseSettings):
    """Quantum oracle settings."""

    oracle_url: str | None = Field(
        default=None,
        description="Base URL of a remote oracle service (live mode only)",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    status_timeout_seconds: float = Field(default=5.0, gt=0)
    total_qubits: int = Field(default=256, ge=1)
    qubits_per_job: int = Field(default=32, ge=1)
    degraded_queue_depth: int = Field(
        default=8,
        ge=1,
        description="In-flight jobs at which the oracle reports itself degraded",
    )
    uptime_fraction: float = Field(default=0.999, ge=0.0, le=1.0)
    model_prefixes: list[str] = Field(
        default=["quantum"],
        description="Model-type prefixes routed to the quantum backend",
    )
    simulated_latency_seconds: float = Field(default=0.0, ge=0.0)

    model_config = SettingsConfigDict(
        env_prefix="QUANTUM_",
        env_file=".env",
        extra="ignore",
        protected_namespaces=("settings_",),
    )


class APISettings(BaseSettings):
    """General API settings."""

    title: str = Field(default="Lira Dispatch API", description="API title")
    description: str = Field(
        default="Agent registry and concurrent execution dispatcher",
        description="API description",
    )
    version: str = Field(default="0.1.0", description="API version")
    debug: bool = Field(default=False, description="Enable debug mode")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Structured logging settings."""

    level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(
        default=True,
        description="Render JSON lines; set False for a console renderer",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_dispatch_settings() -> DispatchSettings:
    """Get cached dispatch settings."""
    return DispatchSettings()


@lru_cache
def get_llm_settings() -> LLMSettings:
    """Get cached LLM settings."""
    return LLMSettings()


@lru_cache
def get_quantum_settings() -> QuantumSettings:
    """Get cached quantum settings."""
    return QuantumSettings()


@lru_cache
def get_api_settings() -> APISettings:
    """Get cached API settings."""
    return APISettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()
