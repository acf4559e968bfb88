"""Typed async client for the Cubicler orchestrator."""

from .client import CubicClient
from .config import ClientOptions, ClientSettings, get_settings
from .errors import (
    ConfigError,
    CubicClientError,
    EmptyInputError,
    MissingArgumentError,
    TransportError,
    ValidationError,
)
from .normalizer import prepare_call_request, validate_message
from .retry import RetryPolicy, is_transient, linear_backoff
from .types import (
    AgentsResponse,
    CallRequest,
    CallResponse,
    CallResponseMetadata,
    HealthServices,
    HealthStatus,
    Message,
    MessageSender,
    ServiceStatus,
)

__all__ = [
    "CubicClient",
    "ClientOptions",
    "ClientSettings",
    "get_settings",
    "CubicClientError",
    "ConfigError",
    "ValidationError",
    "EmptyInputError",
    "MissingArgumentError",
    "TransportError",
    "prepare_call_request",
    "validate_message",
    "RetryPolicy",
    "is_transient",
    "linear_backoff",
    "Message",
    "MessageSender",
    "CallRequest",
    "CallResponse",
    "CallResponseMetadata",
    "AgentsResponse",
    "ServiceStatus",
    "HealthServices",
    "HealthStatus",
]
