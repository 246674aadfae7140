"""
Data model definitions package.
"""

from .result import Blob, FunctionsResponse, ResponseType

__all__ = [
    "Blob",
    "FunctionsResponse",
    "ResponseType",
]
