"""API routers for endpoint organization."""

from .agents import router as agents_router
from .health import router as health_router
from .models import router as models_router
from .quantum import router as quantum_router

__all__ = [
    "health_router",
    "agents_router",
    "models_router",
    "quantum_router",
]
