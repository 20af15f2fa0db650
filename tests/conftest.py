"""pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from declarative_pattern import build_default_registry


@pytest.fixture
def registry():
    """Fresh default registry (never the shared one)."""
    return build_default_registry()


@pytest.fixture
def hit():
    """Result callable expected to be invoked."""
    return Mock(return_value="hit")


@pytest.fixture
def miss():
    """Result callable expected to stay untouched."""
    return Mock(return_value="miss")


@pytest.fixture
def sample_event():
    """Nested document used by structural pattern tests."""
    return {
        "type": "order",
        "id": 42,
        "customer": {"name": "Alice", "tier": "gold"},
        "items": [
            {"sku": "A-1", "qty": 2},
            {"sku": "B-7", "qty": 1},
        ],
    }
