"""
Custom exception classes.

Represent the ways a function invocation can fail. The client returns
these as values in FunctionsResponse.error instead of raising them.
"""

from enum import Enum
from typing import Any, Optional

import httpx


class ErrorKind(str, Enum):
    """Discriminator for FunctionsError subclasses."""

    FETCH = "fetch"
    RELAY = "relay"
    HTTP = "http"
    DECODE = "decode"


class FunctionsError(Exception):
    """Base exception class for function invocation."""

    kind: ErrorKind

    def __init__(self, message: str, context: Any = None):
        self.message = message
        self.context = context
        super().__init__(message)

    @property
    def status_code(self) -> Optional[int]:
        if isinstance(self.context, httpx.Response):
            return self.context.status_code
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class FunctionsFetchError(FunctionsError):
    """The request never completed (DNS, connection, timeout)."""

    kind = ErrorKind.FETCH

    def __init__(self, cause: Exception):
        super().__init__("Failed to send a request to the function", cause)


class FunctionsRelayError(FunctionsError):
    """The relay reached us but could not execute the function."""

    kind = ErrorKind.RELAY

    def __init__(self, response: httpx.Response):
        super().__init__("Relay error invoking the function", response)


class FunctionsHttpError(FunctionsError):
    """The function answered with a non-2xx status code."""

    kind = ErrorKind.HTTP

    def __init__(self, response: httpx.Response):
        super().__init__(
            f"Function returned a non-2xx status code ({response.status_code})", response
        )


class FunctionsDecodeError(FunctionsError):
    """The response body could not be decoded as the declared response type."""

    kind = ErrorKind.DECODE

    def __init__(self, response_type: str, cause: Exception):
        self.response_type = response_type
        super().__init__(f"Failed to decode the function response as {response_type}", cause)
