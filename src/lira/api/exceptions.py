"""Custom exceptions for API layer."""

from typing import Any

from fastapi import HTTPException


class APIError(HTTPException):
    """Base exception for API errors.

    Extends HTTPException for native FastAPI integration.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        detail: str | None = None,
    ) -> None:
        """Initialize API error.

        Args:
            message: Error message
            code: Error code
            status_code: HTTP status code
            detail: Additional detail information
        """
        super().__init__(
            status_code=status_code,
            detail={"message": message, "code": code, "detail": detail},
        )
        self.message = message
        self.code = code


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(
        self,
        resource: str,
        resource_id: Any,
    ) -> None:
        """Initialize not found error.

        Args:
            resource: Resource type (e.g., "Agent", "Model")
            resource_id: Resource identifier
        """
        super().__init__(
            message=f"{resource} not found",
            code="NOT_FOUND",
            status_code=404,
            detail=f"{resource} with id '{resource_id}' does not exist",
        )
        self.resource = resource
        self.resource_id = resource_id


class ServiceUnavailableError(APIError):
    """Service unavailable error."""

    def __init__(
        self,
        service: str,
        detail: str | None = None,
    ) -> None:
        """Initialize service unavailable error.

        Args:
            service: Service name
            detail: Additional detail
        """
        super().__init__(
            message=f"{service} service unavailable",
            code="SERVICE_UNAVAILABLE",
            status_code=503,
            detail=detail,
        )
