"""Typed error hierarchy surfaced by every gptzator SDK call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_ERROR_MESSAGE = "Unknown error"


@dataclass(slots=True)
class ErrorMetadata:
    """Structured metadata for mapping errors across interfaces."""

    category: str


class ApiError(RuntimeError):
    """Base error for gptzator client operations.

    ``status`` is set only when the failure came from an HTTP response, so a
    missing status marks a local or business failure.
    """

    metadata = ErrorMetadata(category="API_ERROR")

    def __init__(
        self,
        message: str,
        status: int | None = None,
        data: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    @property
    def category(self) -> str:
        return self.metadata.category

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        result: dict[str, Any] = {"error": self.message, "category": self.category}
        if self.status is not None:
            result["status"] = self.status
        if self.data is not None:
            result["data"] = self.data
        return result


class TransportError(ApiError):
    """Network or HTTP status failure."""

    metadata = ErrorMetadata(category="TRANSPORT")


class AuthError(TransportError):
    """401 that could not be recovered by a token refresh."""

    metadata = ErrorMetadata(category="AUTH")


class RequestTimeoutError(TransportError):
    """HTTP request exceeded the configured timeout."""

    metadata = ErrorMetadata(category="TIMEOUT")


class CallAppError(ApiError):
    """Base error for the create/trigger/poll project workflow."""

    metadata = ErrorMetadata(category="CALL_APP")


class ProjectCreationError(CallAppError):
    """Project could not be created."""

    metadata = ErrorMetadata(category="PROJECT_CREATE")


class GenerationTriggerError(CallAppError):
    """Generation could not be started for a new project."""

    metadata = ErrorMetadata(category="GENERATION_TRIGGER")


class ProjectStatusError(CallAppError):
    """Project state could not be fetched while polling."""

    metadata = ErrorMetadata(category="PROJECT_STATUS")


class GenerationFailedError(CallAppError):
    """Remote project reported a generation error."""

    metadata = ErrorMetadata(category="GENERATION_FAILED")


class GenerationTimeoutError(CallAppError):
    """Project generation did not finish before the workflow timeout."""

    metadata = ErrorMetadata(category="GENERATION_TIMEOUT")


class CallAppCancelledError(CallAppError):
    """Workflow was cancelled through its cancel event."""

    metadata = ErrorMetadata(category="CANCELLED")
