import pytest

from graphnode import Config


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("GRAPHNODE_BASE_URL", raising=False)
    monkeypatch.delenv("GRAPHNODE_ACCESS_TOKEN", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.graphnode.test"


@pytest.fixture
def access_token() -> str:
    return "secret-access-token"


@pytest.fixture
def config(base_url: str, access_token: str) -> Config:
    return Config(base_url=base_url, access_token=access_token, max_attempts=1)
