import pytest

from functions_client.tests.mirror import MIRROR_ORIGIN

_CONFIG_ENV = (
    "LOG_LEVEL",
    "VERIFY_SSL",
    "REQUEST_TIMEOUT",
    "RELAY_ERROR_HEADER",
    "FUNCTIONS_URL",
    "FUNCTIONS_AUTH",
)


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):
    """Keep host environment variables out of FunctionsClientConfig."""
    for name in _CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url():
    return "http://functions.test/functions/v1"


@pytest.fixture
def mirror_url():
    return f"{MIRROR_ORIGIN}/mirror"
