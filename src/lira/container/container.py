"""Dependency injection container for the dispatch service.

Provides singleton instances for:
- InMemoryAgentRegistry / InMemoryModelCatalog
- Model executors (language + quantum) and the ExecutorRouter
- AgentDispatcher

Backends are chosen by ``DISPATCH_EXECUTOR_MODE``.
"""

from __future__ import annotations

import structlog

from lira.config import (
    DispatchSettings,
    LLMSettings,
    QuantumSettings,
    get_dispatch_settings,
    get_llm_settings,
    get_quantum_settings,
)
from lira.enums import BackendKind, ExecutorMode
from lira.executors import (
    ExecutorRouter,
    HttpQuantumOracle,
    LanguageModelExecutor,
    LiteLLMClient,
    ModelExecutor,
    QuantumOracleBackend,
    QuantumOracleExecutor,
    SimulatedLanguageExecutor,
    SimulatedQuantumOracle,
)
from lira.registry import (
    InMemoryAgentRegistry,
    InMemoryModelCatalog,
    demo_agents,
    demo_models,
)
from lira.services import AgentDispatcher

logger = structlog.get_logger()


class DispatcherContainer:
    """Singleton container for shared dispatch dependencies.

    Usage:
        container = get_container()
        await container.initialize()  # Call once at startup

        dispatcher = container.dispatcher
    """

    _instance: DispatcherContainer | None = None

    def __init__(self) -> None:
        """Initialize empty container."""
        self._initialized = False
        self._dispatch_settings: DispatchSettings | None = None
        self._agent_registry: InMemoryAgentRegistry | None = None
        self._model_catalog: InMemoryModelCatalog | None = None
        self._executor_router: ExecutorRouter | None = None
        self._quantum_executor: QuantumOracleExecutor | None = None
        self._dispatcher: AgentDispatcher | None = None

    @classmethod
    def get_instance(cls) -> DispatcherContainer:
        """Get or create singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state between tests.
        """
        cls._instance = None

    def configure(
        self,
        dispatch: DispatchSettings | None = None,
        llm: LLMSettings | None = None,
        quantum: QuantumSettings | None = None,
    ) -> None:
        """Wire every dependency from settings.

        Synchronous so tests and the CLI can build a container without
        an event loop.

        Args:
            dispatch: Dispatcher settings
            llm: Language backend settings
            quantum: Quantum oracle settings
        """
        dispatch = dispatch or get_dispatch_settings()
        llm = llm or get_llm_settings()
        quantum = quantum or get_quantum_settings()

        if dispatch.seed_demo_data:
            self._agent_registry = InMemoryAgentRegistry(demo_agents())
            self._model_catalog = InMemoryModelCatalog(demo_models())
        else:
            self._agent_registry = InMemoryAgentRegistry()
            self._model_catalog = InMemoryModelCatalog()

        language_executor: ModelExecutor
        if dispatch.executor_mode is ExecutorMode.LIVE:
            language_executor = LanguageModelExecutor(LiteLLMClient(), llm)
        else:
            language_executor = SimulatedLanguageExecutor(
                confidence=llm.simulated_confidence,
                latency_seconds=llm.simulated_latency_seconds,
            )

        self._quantum_executor = QuantumOracleExecutor(
            self._build_oracle(dispatch.executor_mode, quantum),
            status_timeout=quantum.status_timeout_seconds,
        )

        self._executor_router = ExecutorRouter(
            executors={
                BackendKind.LANGUAGE: language_executor,
                BackendKind.QUANTUM: self._quantum_executor,
            },
            catalog=self._model_catalog,
            quantum_prefixes=quantum.model_prefixes,
        )

        self._dispatcher = AgentDispatcher(
            registry=self._agent_registry,
            executor=self._executor_router,
            quantum=self._quantum_executor,
            default_timeout=dispatch.default_timeout_seconds,
            max_timeout=dispatch.max_timeout_seconds,
            max_parallel=dispatch.max_parallel,
            max_batch_size=dispatch.max_batch_size,
        )

        self._dispatch_settings = dispatch
        self._initialized = True

    async def initialize(self) -> None:
        """Initialize dependencies (call once at app startup)."""
        if self._initialized:
            return

        self.configure()
        logger.info(
            "dispatcher_container_initialized",
            executor_mode=self.dispatch_settings.executor_mode.value,
            seeded=self.dispatch_settings.seed_demo_data,
        )

    @staticmethod
    def _build_oracle(mode: ExecutorMode, settings: QuantumSettings) -> QuantumOracleBackend:
        if mode is ExecutorMode.LIVE and settings.oracle_url:
            return HttpQuantumOracle(
                settings.oracle_url,
                timeout=settings.request_timeout_seconds,
            )

        if mode is ExecutorMode.LIVE:
            logger.warning("quantum_oracle_url_missing_using_simulation")

        return SimulatedQuantumOracle(
            total_qubits=settings.total_qubits,
            qubits_per_job=settings.qubits_per_job,
            degraded_queue_depth=settings.degraded_queue_depth,
            uptime_fraction=settings.uptime_fraction,
            latency_seconds=settings.simulated_latency_seconds,
        )

    @property
    def is_initialized(self) -> bool:
        """Check if container is wired."""
        return self._initialized

    @property
    def dispatch_settings(self) -> DispatchSettings:
        if self._dispatch_settings is None:
            raise RuntimeError("Container not initialized. Call initialize() first.")
        return self._dispatch_settings

    @property
    def agent_registry(self) -> InMemoryAgentRegistry:
        """Get the agent registry.

        Raises:
            RuntimeError: If container not initialized
        """
        if self._agent_registry is None:
            raise RuntimeError("Container not initialized. Call initialize() first.")
        return self._agent_registry

    @property
    def model_catalog(self) -> InMemoryModelCatalog:
        """Get the model catalog.

        Raises:
            RuntimeError: If container not initialized
        """
        if self._model_catalog is None:
            raise RuntimeError("Container not initialized. Call initialize() first.")
        return self._model_catalog

    @property
    def executor_router(self) -> ExecutorRouter:
        if self._executor_router is None:
            raise RuntimeError("Container not initialized. Call initialize() first.")
        return self._executor_router

    @property
    def quantum_executor(self) -> QuantumOracleExecutor:
        if self._quantum_executor is None:
            raise RuntimeError("Container not initialized. Call initialize() first.")
        return self._quantum_executor

    @property
    def dispatcher(self) -> AgentDispatcher:
        """Get the dispatcher.

        Raises:
            RuntimeError: If container not initialized
        """
        if self._dispatcher is None:
            raise RuntimeError("Container not initialized. Call initialize() first.")
        return self._dispatcher

    async def close(self) -> None:
        """Release backend resources."""
        if self._quantum_executor is not None:
            await self._quantum_executor.aclose()
        self._initialized = False
        logger.info("dispatcher_container_closed")
