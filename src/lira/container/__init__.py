"""Dependency injection container module.

Exports:
    DispatcherContainer: Singleton DI container class
    get_container: Module-level accessor function
    reset_container: Reset for testing
"""

from .container import DispatcherContainer

__all__ = [
    "DispatcherContainer",
    "get_container",
    "reset_container",
]

# Module-level singleton accessor
_container: DispatcherContainer | None = None


def get_container() -> DispatcherContainer:
    """Get the global container singleton.

    Returns:
        The global DispatcherContainer instance
    """
    global _container
    if _container is None:
        _container = DispatcherContainer.get_instance()
    return _container


def reset_container() -> None:
    """Reset the global container singleton.

    Useful for testing to ensure clean state between tests.
    """
    global _container
    DispatcherContainer.reset()
    _container = None
