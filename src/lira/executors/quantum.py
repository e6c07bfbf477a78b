"""Quantum oracle backend.

The oracle itself is an opaque external service. This module provides
the executor variant that runs agents on it, the status probe, and two
backends: an in-process simulation and an HTTP client for a remote
oracle service.
"""

from __future__ import annotations

import asyncio
import hashlib
import random
import time
from typing import Any, Protocol

import httpx
import structlog
from pydantic import BaseModel, Field

from lira.enums import BackendKind, QuantumHealth
from lira.exceptions import QuantumBackendError

from .base import ExecutionOutcome, ModelExecutor

logger = structlog.get_logger()


class QuantumPrediction(BaseModel):
    """Raw oracle prediction."""

    result: str
    confidence: float
    qubits: int = Field(ge=0)
    execution_time_ms: int | None = None


class QuantumStatus(BaseModel):
    """Oracle health and capacity snapshot."""

    status: QuantumHealth
    available_units: int = Field(ge=0, description="Qubits currently free")
    queue_depth: int = Field(ge=0, description="Jobs waiting or running")
    uptime_fraction: float = Field(ge=0.0, le=1.0)
    active_jobs: int = Field(default=0, ge=0)

    @classmethod
    def down(cls) -> QuantumStatus:
        """Status reported when the oracle cannot be reached."""
        return cls(
            status=QuantumHealth.DOWN,
            available_units=0,
            queue_depth=0,
            uptime_fraction=0.0,
        )


class LaunchOptimization(BaseModel):
    """Token launch parameters tuned by the oracle."""

    optimized_price: float
    optimized_liquidity: float
    optimized_volatility: float
    confidence: float = Field(ge=0.0, le=1.0)
    quantum_advantage: bool


class QuantumOracleBackend(Protocol):
    """Interface implemented by oracle backends."""

    async def predict(self, data: str) -> QuantumPrediction: ...

    async def status(self) -> QuantumStatus: ...

    async def optimize_launch(
        self,
        initial_price: float,
        liquidity_target: float,
        volatility: float,
    ) -> LaunchOptimization: ...

    async def aclose(self) -> None: ...


class SimulatedQuantumOracle:
    """In-process oracle simulation.

    Predictions are seeded from the input digest, so the same input
    yields the same result. Each running job reserves ``qubits_per_job``
    qubits; the status probe reports live in-flight work.
    """

    def __init__(
        self,
        total_qubits: int = 256,
        qubits_per_job: int = 32,
        degraded_queue_depth: int = 8,
        uptime_fraction: float = 0.999,
        latency_seconds: float = 0.0,
        seed: int | None = None,
    ) -> None:
        """Initialize simulated oracle.

        Args:
            total_qubits: Qubit capacity of the simulated device
            qubits_per_job: Qubits reserved by each running prediction
            degraded_queue_depth: In-flight jobs at which status turns degraded
            uptime_fraction: Reported uptime
            latency_seconds: Artificial delay per prediction
            seed: Seed for launch-optimization randomness
        """
        self.total_qubits = total_qubits
        self.qubits_per_job = qubits_per_job
        self.degraded_queue_depth = degraded_queue_depth
        self.uptime_fraction = uptime_fraction
        self.latency_seconds = latency_seconds
        self._rng = random.Random(seed)
        self._in_flight = 0
        self._online = True

    def set_online(self, online: bool) -> None:
        """Take the simulated device offline or bring it back."""
        self._online = online
        logger.info("quantum_oracle_availability_changed", online=online)

    async def predict(self, data: str) -> QuantumPrediction:
        if not self._online:
            raise QuantumBackendError("Quantum oracle is offline")

        started = time.perf_counter()
        self._in_flight += 1
        try:
            if self.latency_seconds > 0:
                await asyncio.sleep(self.latency_seconds)

            digest = hashlib.sha256(data.encode("utf-8")).digest()
            rng = random.Random(int.from_bytes(digest[:8], "big"))
            return QuantumPrediction(
                result=f"Quantum prediction for {data}: {rng.randrange(1000)}",
                confidence=0.85 + rng.random() * 0.14,
                qubits=self.qubits_per_job,
                execution_time_ms=int((time.perf_counter() - started) * 1000),
            )
        finally:
            self._in_flight -= 1

    async def status(self) -> QuantumStatus:
        if not self._online:
            return QuantumStatus.down()

        available = max(self.total_qubits - self._in_flight * self.qubits_per_job, 0)
        if self._in_flight >= self.degraded_queue_depth or available == 0:
            health = QuantumHealth.DEGRADED
        else:
            health = QuantumHealth.OPERATIONAL

        return QuantumStatus(
            status=health,
            available_units=available,
            queue_depth=self._in_flight,
            uptime_fraction=self.uptime_fraction,
            active_jobs=self._in_flight,
        )

    async def optimize_launch(
        self,
        initial_price: float,
        liquidity_target: float,
        volatility: float,
    ) -> LaunchOptimization:
        if not self._online:
            raise QuantumBackendError("Quantum oracle is offline")

        return LaunchOptimization(
            optimized_price=initial_price * (1.0 + (self._rng.random() * 0.3 - 0.15)),
            optimized_liquidity=liquidity_target * (1.0 + self._rng.random() * 0.5),
            optimized_volatility=volatility * (0.7 + self._rng.random() * 0.3),
            confidence=0.92,
            quantum_advantage=True,
        )

    async def aclose(self) -> None:
        return None


class HttpQuantumOracle:
    """Client for a remote oracle service.

    Talks to the ``/api/quantum/{predict,status,optimize}`` endpoints,
    which answer with a ``{"success": ..., "data": ...}`` envelope.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize HTTP oracle client.

        Args:
            base_url: Oracle service base URL
            timeout: Per-request HTTP timeout in seconds
            client: Optional preconfigured httpx client (e.g. for tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def predict(self, data: str) -> QuantumPrediction:
        body = await self._request("POST", "/api/quantum/predict", json={"data": data})
        try:
            return QuantumPrediction(
                result=str(body["result"]),
                confidence=float(body["confidence"]),
                qubits=int(body.get("qubits") or 0),
                execution_time_ms=body.get("executionTimeMs", body.get("execution_time_ms")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise QuantumBackendError(f"Malformed oracle prediction: {e}", cause=e) from e

    async def status(self) -> QuantumStatus:
        body = await self._request("GET", "/api/quantum/status")
        raw_status = str(body.get("status", QuantumHealth.OPERATIONAL.value)).lower()
        try:
            health = QuantumHealth(raw_status)
        except ValueError:
            # Unknown states from the remote service are not trusted as healthy
            health = QuantumHealth.DEGRADED

        try:
            return QuantumStatus(
                status=health,
                available_units=int(body.get("qubits_available") or 0),
                queue_depth=int(body.get("queue_length") or 0),
                uptime_fraction=_parse_uptime(body.get("uptime")),
                active_jobs=int(body.get("active_jobs") or 0),
            )
        except (TypeError, ValueError) as e:
            raise QuantumBackendError(f"Malformed oracle status: {e}", cause=e) from e

    async def optimize_launch(
        self,
        initial_price: float,
        liquidity_target: float,
        volatility: float,
    ) -> LaunchOptimization:
        body = await self._request(
            "POST",
            "/api/quantum/optimize",
            json={
                "initial_price": initial_price,
                "liquidity_target": liquidity_target,
                "volatility": volatility,
            },
        )
        try:
            return LaunchOptimization.model_validate(body)
        except ValueError as e:
            raise QuantumBackendError(f"Malformed oracle optimization: {e}", cause=e) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            envelope = response.json()
        except httpx.HTTPError as e:
            raise QuantumBackendError(f"Quantum oracle request failed: {e}", cause=e) from e
        except ValueError as e:
            raise QuantumBackendError("Quantum oracle returned invalid JSON", cause=e) from e

        if not isinstance(envelope, dict) or not envelope.get("success", False):
            error = envelope.get("error") if isinstance(envelope, dict) else None
            raise QuantumBackendError(error or "Quantum oracle reported failure")

        data = envelope.get("data")
        if not isinstance(data, dict):
            raise QuantumBackendError("Quantum oracle response has no data")
        return data


def _parse_uptime(raw: Any) -> float:
    """Parse uptime given as a fraction (0.999) or percentage ("99.9%")."""
    if raw is None:
        return 0.0
    if isinstance(raw, str):
        text = raw.strip()
        if text.endswith("%"):
            return min(max(float(text[:-1]) / 100.0, 0.0), 1.0)
        raw = float(text)
    value = float(raw)
    if value > 1.0:
        value /= 100.0
    return min(max(value, 0.0), 1.0)


class QuantumOracleExecutor(ModelExecutor):
    """Runs agents on the quantum oracle and probes its status."""

    kind = BackendKind.QUANTUM

    def __init__(
        self,
        backend: QuantumOracleBackend,
        status_timeout: float = 5.0,
    ) -> None:
        """Initialize quantum executor.

        Args:
            backend: Oracle backend
            status_timeout: Seconds allowed for a status probe
        """
        self.backend = backend
        self.status_timeout = status_timeout

    async def _invoke(self, model_type: str, payload: str) -> ExecutionOutcome:
        prediction = await self.backend.predict(payload)
        return ExecutionOutcome.succeeded(
            output=prediction.result,
            confidence=prediction.confidence,
            telemetry={
                "qubits": prediction.qubits,
                "execution_time_ms": prediction.execution_time_ms,
            },
        )

    async def status(self) -> QuantumStatus:
        """Read the oracle's current health.

        Returns:
            Current status; ``down`` if the oracle errors or does not
            answer within ``status_timeout``
        """
        try:
            return await asyncio.wait_for(self.backend.status(), timeout=self.status_timeout)
        except TimeoutError:
            logger.warning("quantum_status_timeout", timeout=self.status_timeout)
        except QuantumBackendError as e:
            logger.warning("quantum_status_unavailable", error=e.message)
        except Exception as e:
            logger.exception("quantum_status_check_failed", error_type=type(e).__name__)
        return QuantumStatus.down()

    async def optimize_launch(
        self,
        initial_price: float,
        liquidity_target: float,
        volatility: float,
    ) -> LaunchOptimization:
        """Tune token launch parameters on the oracle.

        Raises:
            QuantumBackendError: If the oracle cannot serve the request
        """
        return await self.backend.optimize_launch(initial_price, liquidity_target, volatility)

    async def aclose(self) -> None:
        await self.backend.aclose()
