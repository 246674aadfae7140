"""
Client for invoking functions hosted behind a gateway.

Responses are normalized into FunctionsResponse; failures are returned as
FunctionsError values instead of being raised.
"""

from .client import AsyncFunctionsClient, FunctionsClient
from .core.config import FunctionsClientConfig
from .core.exceptions import (
    ErrorKind,
    FunctionsDecodeError,
    FunctionsError,
    FunctionsFetchError,
    FunctionsHttpError,
    FunctionsRelayError,
)
from .models.result import Blob, FunctionsResponse, ResponseType

__all__ = [
    "AsyncFunctionsClient",
    "Blob",
    "ErrorKind",
    "FunctionsClient",
    "FunctionsClientConfig",
    "FunctionsDecodeError",
    "FunctionsError",
    "FunctionsFetchError",
    "FunctionsHttpError",
    "FunctionsRelayError",
    "FunctionsResponse",
    "ResponseType",
]
