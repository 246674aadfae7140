"""
Invocation result models.

Standardizes the output of an invocation regardless of payload encoding.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from ..core.exceptions import FunctionsError


class ResponseType(str, Enum):
    """Caller-declared decoding strategy for the response body."""

    JSON = "json"
    TEXT = "text"
    ARRAY_BUFFER = "arrayBuffer"
    BLOB = "blob"

    @classmethod
    def parse(cls, value: "ResponseType | str") -> "ResponseType":
        """
        Raises:
            ValueError: value is not one of the supported response types
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(repr(member.value) for member in cls)
            raise ValueError(f"Invalid response type {value!r}; expected one of {allowed}") from None


@dataclass(frozen=True)
class Blob:
    """
    Opaque byte payload with its content type.

    Used both as a request body and as the decoded value of a "blob" response.
    """

    content: bytes = b""
    content_type: str = ""

    @property
    def size(self) -> int:
        return len(self.content)

    def to_bytes(self) -> bytes:
        return self.content

    def text(self, encoding: str = "utf-8") -> str:
        return self.content.decode(encoding)

    def json(self) -> Any:
        return json.loads(self.content)


@dataclass
class FunctionsResponse:
    """
    Unified result of an invocation.

    Exactly one side is meaningful: when `error` is set `data` is None.
    Unpacks as a pair so call sites can write `data, error = ...`.
    """

    data: Any = None
    error: Optional[FunctionsError] = None
    status_code: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if self.error is not None and self.data is not None:
            raise ValueError("FunctionsResponse cannot carry both data and error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        yield self.data
        yield self.error
