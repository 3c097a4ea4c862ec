"""Authenticated transport, token storage and error contract shared by all resources."""

from .call import api_call
from .errors import raise_api_error
from .exceptions import (
    ApiError,
    AuthError,
    CallAppCancelledError,
    CallAppError,
    GenerationFailedError,
    GenerationTimeoutError,
    GenerationTriggerError,
    ProjectCreationError,
    ProjectStatusError,
    RequestTimeoutError,
    TransportError,
)
from .http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, AuthenticatedTransport
from .tokens import (
    DEFAULT_TOKEN_KEY,
    AuthFailedHook,
    FileTokenStorage,
    InMemoryTokenStorage,
    KeyValueTokenStorage,
    RefreshFn,
    Tokens,
    TokenStorage,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_TOKEN_KEY",
    "ApiError",
    "AuthError",
    "AuthFailedHook",
    "AuthenticatedTransport",
    "CallAppCancelledError",
    "CallAppError",
    "FileTokenStorage",
    "GenerationFailedError",
    "GenerationTimeoutError",
    "GenerationTriggerError",
    "InMemoryTokenStorage",
    "KeyValueTokenStorage",
    "ProjectCreationError",
    "ProjectStatusError",
    "RefreshFn",
    "RequestTimeoutError",
    "TokenStorage",
    "Tokens",
    "TransportError",
    "api_call",
    "raise_api_error",
]
