"""Agent registry and model catalog."""

from .agents import AgentRegistry, InMemoryAgentRegistry
from .catalog import InMemoryModelCatalog, ModelCatalog
from .models import Agent, Model
from .seed import demo_agents, demo_models

__all__ = [
    # Records
    "Agent",
    "Model",
    # Stores
    "AgentRegistry",
    "InMemoryAgentRegistry",
    "ModelCatalog",
    "InMemoryModelCatalog",
    # Seed
    "demo_agents",
    "demo_models",
]
