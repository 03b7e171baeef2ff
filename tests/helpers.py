"""Fake Playwright objects shared by the test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class FakeEventContext:
    """Stands in for the async context managers returned by expect_navigation / expect_page."""

    def __init__(self, value=None, exit_error: Exception | None = None):
        self._value = value
        self.exit_error = exit_error
        self.entered = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc is None and self.exit_error is not None:
            raise self.exit_error
        return False

    @property
    def value(self):
        async def _value():
            return self._value
        return _value()


def navigation_timeout(timeout_ms: int = 10000) -> PlaywrightTimeoutError:
    return PlaywrightTimeoutError(f"Timeout {timeout_ms}ms exceeded.\n=== logs ===\nwaiting for navigation")


def make_page(evaluate=None, navigation_error: Exception | None = None) -> MagicMock:
    """Create a fake Page whose navigation waits succeed unless navigation_error is set."""
    page = MagicMock(name="page")
    page.viewport_size = {"width": 1300, "height": 800}
    page.url = "https://www.example.com/listing/1"
    page.evaluate = evaluate if evaluate is not None else AsyncMock(return_value=None)
    page.wait_for_selector = AsyncMock()
    page.goto = AsyncMock()
    page.type = AsyncMock()
    page.close = AsyncMock()
    page.set_viewport_size = AsyncMock()
    page.is_closed = MagicMock(return_value=False)
    page.expect_navigation = MagicMock(
        side_effect=lambda **kwargs: FakeEventContext(exit_error=navigation_error)
    )
    return page


def card(link="/listing/1", name="Linen Shirt", price="$25.00", has_info=True) -> dict:
    """Raw card facts as returned by the in-page listing script."""
    return {"link": link, "hasInfo": has_info, "name": name, "price": price}
