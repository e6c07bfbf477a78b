"""Registry record definitions."""

from dataclasses import dataclass
from datetime import datetime

from lira.enums import BackendKind


@dataclass
class Agent:
    """Named execution unit bound to a model backend.

    Note: Registries hand out copies. Mutating an instance does not
    change the stored record; go through the registry instead.
    """

    id: str
    name: str
    model_type: str  # Model-type identifier the agent is bound to
    owner: str  # Owning principal (wallet address)
    created_at: datetime
    execution_count: int = 0  # Succeeded executions only
    is_active: bool = True


@dataclass
class Model:
    """Prediction backend definition."""

    id: str
    name: str
    type: BackendKind
    version: str
    description: str
    created_at: datetime
