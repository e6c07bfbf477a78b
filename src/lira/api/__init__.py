"""HTTP API for agent registry, execution and the quantum oracle."""

from .main import create_app

__all__ = ["create_app"]
