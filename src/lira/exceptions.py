"""Domain exceptions for the dispatch core."""

from __future__ import annotations


class LiraError(Exception):
    """Base exception for dispatch operations.

    Attributes:
        message: Error description
        cause: Original exception that caused this error
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """Initialize dispatch error.

        Args:
            message: Error description
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.cause = cause


class DispatchValidationError(LiraError):
    """Execution request is malformed.

    Raised before any execution is launched (empty batch, missing
    input payload, out-of-range timeout).
    """

    pass


class BackendError(LiraError):
    """Model backend reported a failure.

    Executors convert this into a failed outcome carrying the message.
    """

    pass


class QuantumBackendError(BackendError):
    """Quantum oracle is unavailable or returned an error."""

    pass
