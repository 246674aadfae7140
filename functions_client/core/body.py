"""
Request body encoding.

Maps the runtime shape of an invoke body to the bytes put on the wire and
the content-type inferred for it. The client never JSON-encodes objects:
callers serialize JSON themselves and set the content-type.
"""

from collections.abc import Mapping
from typing import List, Optional, Tuple, Union
from urllib.parse import urlencode

from ..models.result import Blob

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
TEXT_CONTENT_TYPE = "text/plain"
BINARY_CONTENT_TYPE = "application/octet-stream"

FormPairs = Union[Mapping, List[Tuple[str, str]], Tuple[Tuple[str, str], ...]]
InvokeBody = Union[str, bytes, bytearray, memoryview, Blob, FormPairs, None]


def _form_pairs(body) -> Optional[List[Tuple[str, str]]]:
    """Return the ordered pairs of a form body, or None if body is not one."""
    if isinstance(body, Mapping):
        items = list(body.items())
    elif isinstance(body, (list, tuple)):
        items = []
        for item in body:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                return None
            items.append((item[0], item[1]))
    else:
        return None

    for key, value in items:
        if not isinstance(key, str) or not isinstance(value, str):
            return None
    return items


def encode_body(body: InvokeBody) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Encode an invoke body.

    Returns:
        (content, inferred content-type); both None for an absent body

    Raises:
        TypeError: body is not text, bytes, Blob or string form pairs
    """
    if body is None:
        return None, None
    if isinstance(body, str):
        return body.encode("utf-8"), TEXT_CONTENT_TYPE
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body), BINARY_CONTENT_TYPE
    if isinstance(body, Blob):
        return body.content, BINARY_CONTENT_TYPE

    pairs = _form_pairs(body)
    if pairs is not None:
        return urlencode(pairs).encode("ascii"), FORM_CONTENT_TYPE

    raise TypeError(
        f"Unsupported body type {type(body).__name__}: pass str, bytes, Blob or "
        "string form pairs; serialize JSON with json.dumps and set content-type"
    )
