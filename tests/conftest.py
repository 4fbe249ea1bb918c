import pytest

from hubspotex import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("HUBSPOT_BASE_URL", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.hubapi.com"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url)


@pytest.fixture
def unconfigured() -> Config:
    return Config()
