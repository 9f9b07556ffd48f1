"""HTTP helpers shared by the platform client and token provider."""

from .clients import DEFAULT_HEADERS, create_async_client
from .retry import log_retry_attempt, retry_on_network_error, retry_on_transient_error

__all__ = [
    "DEFAULT_HEADERS",
    "create_async_client",
    "log_retry_attempt",
    "retry_on_network_error",
    "retry_on_transient_error",
]
