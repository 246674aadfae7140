import logging

import httpx

from .config import FunctionsClientConfig

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """
    HTTP Client Factory for centralized transport settings.
    """

    def __init__(self, config: FunctionsClientConfig):
        self.config = config

    def _apply_defaults(self, kwargs: dict) -> dict:
        verify = kwargs.pop("verify", None)

        # If verify is not explicitly provided, use config default
        if verify is None:
            verify = self.config.VERIFY_SSL
        if not verify:
            logger.debug("SSL verification disabled (VERIFY_SSL=False)")

        kwargs.setdefault("timeout", self.config.REQUEST_TIMEOUT)
        kwargs["verify"] = verify
        return kwargs

    def create_async_client(self, **kwargs) -> httpx.AsyncClient:
        """
        Create an httpx.AsyncClient with configured SSL verification and timeout.

        Args:
            **kwargs: Additional arguments for httpx.AsyncClient
        """
        return httpx.AsyncClient(**self._apply_defaults(kwargs))

    def create_sync_client(self, **kwargs) -> httpx.Client:
        """
        Create an httpx.Client with configured SSL verification and timeout.
        """
        return httpx.Client(**self._apply_defaults(kwargs))
