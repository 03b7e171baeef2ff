"""Shared fixtures for the checkout scraper test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from checkout_scraper.utils import humanizer
from tests.helpers import make_page


@pytest.fixture
def no_delays(monkeypatch) -> AsyncMock:
    """Replace humanizer.sleep so pacing steps return immediately."""
    sleep = AsyncMock()
    monkeypatch.setattr(humanizer, "sleep", sleep)
    return sleep


@pytest.fixture
def no_moves(monkeypatch, no_delays) -> AsyncMock:
    """Replace humanizer.random_move (and sleep) with no-op mocks."""
    move = AsyncMock(return_value=0)
    monkeypatch.setattr(humanizer, "random_move", move)
    return move


@pytest.fixture
def page():
    return make_page()
