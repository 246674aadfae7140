from unittest.mock import patch

from functions_client.core.config import FunctionsClientConfig
from functions_client.core.http_client import HttpClientFactory


class TestHttpClientFactory:
    @patch("httpx.AsyncClient")
    def test_create_async_client_uses_config(self, mock_client):
        """VERIFY_SSL and REQUEST_TIMEOUT flow into the async client"""
        config = FunctionsClientConfig(VERIFY_SSL=False, REQUEST_TIMEOUT=3.0)
        HttpClientFactory(config).create_async_client()

        mock_client.assert_called_once()
        _, kwargs = mock_client.call_args
        assert kwargs["verify"] is False
        assert kwargs["timeout"] == 3.0

    @patch("httpx.AsyncClient")
    def test_explicit_kwargs_win(self, mock_client):
        config = FunctionsClientConfig(VERIFY_SSL=True, REQUEST_TIMEOUT=3.0)
        HttpClientFactory(config).create_async_client(verify=False, timeout=10.0)

        _, kwargs = mock_client.call_args
        assert kwargs["verify"] is False
        assert kwargs["timeout"] == 10.0

    @patch("httpx.Client")
    def test_create_sync_client_defaults(self, mock_client):
        """Default config keeps verification on and no timeout"""
        HttpClientFactory(FunctionsClientConfig()).create_sync_client()

        _, kwargs = mock_client.call_args
        assert kwargs["verify"] is True
        assert kwargs["timeout"] is None
