import pytest

from jira_client._config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("JIRA_URL", raising=False)
    monkeypatch.delenv("JIRA_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("JIRA_API_VERSION", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://test.atlassian.net"


@pytest.fixture
def api_root(base_url: str) -> str:
    return f"{base_url}/rest/api/2"


@pytest.fixture
def secret() -> str:
    return "secret"


@pytest.fixture
def config(base_url: str, secret: str) -> Config:
    return Config(base_url=base_url, secret=secret)
