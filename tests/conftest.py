"""Pytest configuration for the fsq-venues project."""
from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Ensure the project root is on sys.path so that import fsq_venues works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fsq_venues.services.venues import VenuesClient  # noqa: E402


@pytest.fixture
def invoker():
    """Stand-in for the shared transport; returns a canned value."""
    mock_invoker = AsyncMock()
    mock_invoker.call_api.return_value = {"ok": True}
    return mock_invoker


@pytest.fixture
def logger():
    return Mock()


@pytest.fixture
def venues(invoker, logger):
    return VenuesClient(invoker, logger=logger)
