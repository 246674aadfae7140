"""
Functions Client

Invokes functions hosted behind a gateway/relay over HTTP and normalizes the
response into a FunctionsResponse. Network, relay, HTTP and decode failures
come back as error values; only caller bugs raise.
"""

import json
import logging
from typing import Mapping, Optional, Union

import httpx

from .core.body import InvokeBody, encode_body
from .core.config import FunctionsClientConfig
from .core.exceptions import (
    FunctionsDecodeError,
    FunctionsError,
    FunctionsFetchError,
    FunctionsHttpError,
    FunctionsRelayError,
)
from .core.http_client import HttpClientFactory
from .models.result import Blob, FunctionsResponse, ResponseType

logger = logging.getLogger("functions_client.client")

HeaderMap = Mapping[str, str]


def _normalize_base_url(url: str) -> str:
    if not isinstance(url, str) or not url.strip():
        raise ValueError("Base URL must be a non-empty string")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ValueError(f"Malformed base URL {url!r}: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ValueError(f"Base URL must be an absolute http(s) URL: {url!r}")
    return url.rstrip("/")


def _strip_query(path: str) -> str:
    # Query strings may carry credentials; keep them out of logs.
    return path.split("?", 1)[0]


class _BaseFunctionsClient:
    """
    Request construction and response normalization shared by the
    async and blocking clients.
    """

    def __init__(
        self,
        url: str,
        headers: Optional[HeaderMap] = None,
        auth: Optional[str] = None,
        config: Optional[FunctionsClientConfig] = None,
    ):
        self.config = config or FunctionsClientConfig()
        self._url = _normalize_base_url(url)

        default_headers = httpx.Headers(headers or {})
        if auth:
            default_headers["Authorization"] = f"Bearer {auth}"
        self._headers = default_headers

    @property
    def url(self) -> str:
        return self._url

    @property
    def headers(self) -> httpx.Headers:
        """Copy of the default headers sent with every invocation."""
        return httpx.Headers(self._headers)

    def set_auth(self, token: str) -> None:
        """
        Set the bearer credential used by subsequent invocations.

        The default header map is rebuilt and swapped in one assignment, so
        invocations already building their request keep the previous value.
        """
        headers = httpx.Headers(self._headers)
        headers["Authorization"] = f"Bearer {token}"
        self._headers = headers
        logger.debug("Authorization header updated")

    def _merge_headers(
        self, headers: Optional[HeaderMap], inferred_content_type: Optional[str]
    ) -> httpx.Headers:
        merged = httpx.Headers(self._headers)
        if headers:
            merged.update(headers)
        if inferred_content_type and "content-type" not in merged:
            merged["Content-Type"] = inferred_content_type
        return merged

    def _build_request(
        self,
        client: Union[httpx.Client, httpx.AsyncClient],
        path: str,
        headers: Optional[HeaderMap],
        body: InvokeBody,
    ) -> httpx.Request:
        """
        Raises:
            TypeError: unsupported body
            ValueError: path produces an invalid URL
        """
        if not isinstance(path, str):
            raise TypeError(f"Function path must be a string, got {type(path).__name__}")

        content, inferred_content_type = encode_body(body)
        url = f"{self._url}/{path.lstrip('/')}"
        try:
            return client.build_request(
                "POST",
                url,
                headers=self._merge_headers(headers, inferred_content_type),
                content=content,
            )
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid function path {path!r}: {e}") from e

    def _is_relay_error(self, response: httpx.Response) -> bool:
        signal = response.headers.get(self.config.RELAY_ERROR_HEADER)
        return signal is not None and signal.strip().lower() == "true"

    def _failed(
        self, path: str, error: FunctionsError, status_code: Optional[int] = None
    ) -> FunctionsResponse:
        if status_code is None:
            status_code = error.status_code
        path = _strip_query(path)
        extra = {
            "function_path": path,
            "error_kind": error.kind.value,
            "status_code": status_code,
        }
        if isinstance(error.context, Exception):
            extra["error_type"] = type(error.context).__name__
            extra["error_detail"] = str(error.context)
        logger.warning(f"Invocation of '{path}' failed: {error.message}", extra=extra)
        return FunctionsResponse(data=None, error=error, status_code=status_code)

    def _fetch_failed(self, path: str, cause: httpx.RequestError) -> FunctionsResponse:
        return self._failed(path, FunctionsFetchError(cause))

    def _handle_response(
        self, path: str, response: httpx.Response, response_type: ResponseType
    ) -> FunctionsResponse:
        if self._is_relay_error(response):
            return self._failed(path, FunctionsRelayError(response))

        if not response.is_success:
            return self._failed(path, FunctionsHttpError(response))

        try:
            data = _decode(response, response_type)
        except (ValueError, LookupError, RecursionError) as e:
            error = FunctionsDecodeError(response_type.value, e)
            return self._failed(path, error, status_code=response.status_code)

        return FunctionsResponse(data=data, error=None, status_code=response.status_code)


def _decode(response: httpx.Response, response_type: ResponseType):
    if response_type is ResponseType.JSON:
        return json.loads(response.text)
    if response_type is ResponseType.TEXT:
        return response.text
    if response_type is ResponseType.ARRAY_BUFFER:
        return response.content
    return Blob(response.content, response.headers.get("content-type", ""))


class AsyncFunctionsClient(_BaseFunctionsClient):
    """
    asyncio client.

    Args:
        url: Base URL of the functions gateway
        headers: Default headers sent with every invocation
        auth: Bearer credential, sent as "Authorization: Bearer <auth>"
        http_client: Shared httpx.AsyncClient; created (and owned) when omitted
        config: FunctionsClientConfig instance
    """

    def __init__(
        self,
        url: str,
        headers: Optional[HeaderMap] = None,
        auth: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        config: Optional[FunctionsClientConfig] = None,
    ):
        super().__init__(url, headers=headers, auth=auth, config=config)
        self._owns_client = http_client is None
        self.client = http_client or HttpClientFactory(self.config).create_async_client()

    async def invoke(
        self,
        path: str,
        *,
        headers: Optional[HeaderMap] = None,
        body: InvokeBody = None,
        response_type: Union[ResponseType, str] = ResponseType.JSON,
    ) -> FunctionsResponse:
        """
        Invoke a function with POST.

        Args:
            path: Function path relative to the base URL, may carry a query string
            headers: Per-call headers, override defaults case-insensitively
            body: str, bytes, Blob or string form pairs
            response_type: json, text, arrayBuffer or blob

        Returns:
            FunctionsResponse with either data or error set

        Raises:
            ValueError: invalid response type or path
            TypeError: unsupported body
        """
        response_type = ResponseType.parse(response_type)
        request = self._build_request(self.client, path, headers, body)
        function_path = _strip_query(path)
        logger.debug(f"Invoking {function_path}", extra={"function_path": function_path})

        try:
            response = await self.client.send(request)
        except httpx.RequestError as e:
            return self._fetch_failed(path, e)

        return self._handle_response(path, response, response_type)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "AsyncFunctionsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


class FunctionsClient(_BaseFunctionsClient):
    """
    Blocking client with the same contract as AsyncFunctionsClient.
    """

    def __init__(
        self,
        url: str,
        headers: Optional[HeaderMap] = None,
        auth: Optional[str] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        config: Optional[FunctionsClientConfig] = None,
    ):
        super().__init__(url, headers=headers, auth=auth, config=config)
        self._owns_client = http_client is None
        self.client = http_client or HttpClientFactory(self.config).create_sync_client()

    def invoke(
        self,
        path: str,
        *,
        headers: Optional[HeaderMap] = None,
        body: InvokeBody = None,
        response_type: Union[ResponseType, str] = ResponseType.JSON,
    ) -> FunctionsResponse:
        response_type = ResponseType.parse(response_type)
        request = self._build_request(self.client, path, headers, body)
        function_path = _strip_query(path)
        logger.debug(f"Invoking {function_path}", extra={"function_path": function_path})

        try:
            response = self.client.send(request)
        except httpx.RequestError as e:
            return self._fetch_failed(path, e)

        return self._handle_response(path, response, response_type)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "FunctionsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
