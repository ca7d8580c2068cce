"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from src.seaport_api.models.config import APIConfig
from src.seaport_api.utils.retry import RetryPolicy
from tests.fixtures.orders import SAMPLE_ASSET, make_signed_order, make_wire_order

# ===== Pytest Markers =====


def pytest_configure(config: Any) -> None:
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")


# ===== Client Fixtures =====


@pytest.fixture
def mock_session() -> MagicMock:
    """HTTP session double; tests set get/post return values."""
    return MagicMock()


@pytest.fixture
def mock_sleep() -> MagicMock:
    """Sleep double so retries do not wait."""
    return MagicMock()


@pytest.fixture
def retry_policy(mock_sleep: MagicMock) -> RetryPolicy:
    return RetryPolicy(retries=2, delay=3.0, sleep=mock_sleep)


@pytest.fixture
def api_config() -> APIConfig:
    return APIConfig(chain_id=1, api_key="test-api-key", api_timeout=5.0)


# ===== Payload Fixtures =====


@pytest.fixture
def wire_order() -> dict[str, Any]:
    """Sample listing as returned by the orders endpoint."""
    return make_wire_order()


@pytest.fixture
def signed_listing() -> dict[str, Any]:
    """Signed listing payload."""
    return make_signed_order()


@pytest.fixture
def sample_asset() -> dict[str, Any]:
    return dict(SAMPLE_ASSET)
