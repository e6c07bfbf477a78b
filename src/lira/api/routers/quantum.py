"""Quantum oracle endpoints."""

import structlog
from fastapi import APIRouter

from lira.exceptions import QuantumBackendError
from lira.executors import LaunchOptimization, QuantumPrediction, QuantumStatus

from ..dependencies import Container, Dispatcher, QuantumExecutor
from ..exceptions import ServiceUnavailableError
from ..schemas import OptimizeLaunchRequest, QuantumPredictRequest

logger = structlog.get_logger()

router = APIRouter(prefix="/quantum", tags=["quantum"])


@router.post("/predict", response_model=QuantumPrediction, summary="Quantum prediction")
async def predict(
    request: QuantumPredictRequest,
    quantum: QuantumExecutor,
    container: Container,
) -> QuantumPrediction:
    """Run a prediction directly on the oracle.

    Bounded by the default per-agent deadline.

    Raises:
        ServiceUnavailableError: If the oracle fails or times out
    """
    outcome = await quantum.execute(
        "quantum",
        request.data,
        container.dispatch_settings.default_timeout_seconds,
    )
    if not outcome.is_success:
        raise ServiceUnavailableError("Quantum oracle", detail=outcome.reason)

    return QuantumPrediction(
        result=outcome.output or "",
        confidence=outcome.confidence or 0.0,
        qubits=outcome.telemetry.get("qubits") or 0,
        execution_time_ms=outcome.telemetry.get("execution_time_ms"),
    )


@router.get("/status", response_model=QuantumStatus, summary="Quantum oracle status")
async def get_status(dispatcher: Dispatcher) -> QuantumStatus:
    """Probe the oracle's current health.

    Never fails: an unreachable oracle is reported as ``down``.
    """
    return await dispatcher.probe_quantum_status()


@router.post("/optimize", response_model=LaunchOptimization, summary="Optimize token launch")
async def optimize_launch(
    request: OptimizeLaunchRequest,
    quantum: QuantumExecutor,
) -> LaunchOptimization:
    """Tune token launch parameters on the oracle.

    Args:
        request: Launch parameters
        quantum: Quantum executor

    Returns:
        Optimized parameters

    Raises:
        ServiceUnavailableError: If the oracle cannot serve the request
    """
    try:
        return await quantum.optimize_launch(
            request.initial_price,
            request.liquidity_target,
            request.volatility,
        )
    except QuantumBackendError as e:
        logger.warning("quantum_optimize_failed", error=e.message)
        raise ServiceUnavailableError("Quantum oracle", detail=e.message) from e
