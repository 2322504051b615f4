"""Root pytest configuration for mws-easy-ship tests."""
import pytest

from mws_easy_ship.settings import Settings
from mws_easy_ship.transports import DryRunTransport
from .fakes.fake_shared_client import FakeSharedClient


# Set up test environment variables
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Isolate tests from the developer's MWS environment."""
    monkeypatch.delenv("MWS_ENDPOINT", raising=False)
    monkeypatch.setenv("MWS_SELLER_ID", "SELLER1")
    monkeypatch.setenv("MWS_MARKETPLACE_ID", "A21TJRUUN4KGV")


@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings(seller_id="SELLER1", marketplace_id="A21TJRUUN4KGV")


@pytest.fixture
def transport():
    """Dry-run transport that records prepared requests."""
    return DryRunTransport()


@pytest.fixture
def shared_client():
    """Recording fake shared client."""
    return FakeSharedClient()


@pytest.fixture
def dims():
    return {"Length": 10, "Width": 8, "Height": 5, "Unit": "Cm"}


@pytest.fixture
def weight():
    return {"Value": 500, "Unit": "g"}
