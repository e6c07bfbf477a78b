"""Demo records loaded when ``DISPATCH_SEED_DEMO_DATA`` is enabled."""

from datetime import UTC, datetime, timedelta

from lira.enums import BackendKind

from .models import Agent, Model


def demo_agents(now: datetime | None = None) -> list[Agent]:
    """Build the demo agent set."""
    now = now or datetime.now(UTC)
    return [
        Agent(
            id="1",
            name="Market Analyzer",
            model_type="GPT-4",
            owner="0x742d...5e5c",
            created_at=now - timedelta(hours=24),
            execution_count=127,
        ),
        Agent(
            id="2",
            name="Price Oracle",
            model_type="Claude-3",
            owner="0x8a3f...2b1d",
            created_at=now - timedelta(hours=48),
            execution_count=89,
        ),
        Agent(
            id="3",
            name="Quantum Forecaster",
            model_type="Quantum Predictor",
            owner="0x8a3f...2b1d",
            created_at=now - timedelta(hours=12),
        ),
    ]


def demo_models(now: datetime | None = None) -> list[Model]:
    """Build the demo model set."""
    now = now or datetime.now(UTC)
    return [
        Model(
            id="1",
            name="GPT-4 Turbo",
            type=BackendKind.LANGUAGE,
            version="1.0",
            description="Advanced language model",
            created_at=now - timedelta(hours=72),
        ),
        Model(
            id="2",
            name="Quantum Predictor",
            type=BackendKind.QUANTUM,
            version="0.5",
            description="Quantum-enhanced prediction model",
            created_at=now - timedelta(hours=48),
        ),
    ]
