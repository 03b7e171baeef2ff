"""Tests for click and submit actions."""

from unittest.mock import AsyncMock

import pytest

from checkout_scraper.core.errors import NavigationTimeoutError, is_navigation_timeout
from checkout_scraper.dom.actions import click_and_wait_navigation, click_element, navigation, submit_form
from tests.helpers import make_page, navigation_timeout


class TestIsNavigationTimeout:
    def test_playwright_timeout(self):
        assert is_navigation_timeout(navigation_timeout()) is True

    def test_own_timeout_type(self):
        assert is_navigation_timeout(NavigationTimeoutError("slow")) is True

    def test_message_content(self):
        assert is_navigation_timeout(RuntimeError("Navigation timeout of 10000 ms exceeded")) is True

    def test_other_errors(self):
        assert is_navigation_timeout(RuntimeError("Execution context was destroyed")) is False


class TestNavigation:
    @pytest.mark.asyncio
    async def test_timeout_raised_as_navigation_timeout(self):
        timeout = navigation_timeout()
        page = make_page(navigation_error=timeout)

        with pytest.raises(NavigationTimeoutError) as raised:
            async with navigation(page, 10000):
                pass

        assert raised.value.__cause__ is timeout
        page.expect_navigation.assert_called_once_with(timeout=10000)

    @pytest.mark.asyncio
    async def test_other_errors_pass_through(self):
        page = make_page()

        with pytest.raises(RuntimeError, match="detached"):
            async with navigation(page, 10000):
                raise RuntimeError("detached")


class TestClickAndWaitNavigation:
    @pytest.mark.asyncio
    async def test_navigated(self):
        page = make_page(evaluate=AsyncMock(return_value=True))
        assert await click_and_wait_navigation(page, 'a[href="/x"]') is True
        page.expect_navigation.assert_called_once_with(timeout=10000)

    @pytest.mark.asyncio
    async def test_navigation_timeout_is_not_fatal(self):
        page = make_page(evaluate=AsyncMock(return_value=True), navigation_error=navigation_timeout())
        assert await click_and_wait_navigation(page, 'a[href="/x"]') is False
        page.evaluate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_click_error_is_swallowed(self):
        page = make_page(evaluate=AsyncMock(side_effect=RuntimeError("detached")))
        assert await click_and_wait_navigation(page, 'a[href="/x"]') is False


class TestSubmitForm:
    @pytest.mark.asyncio
    async def test_submitted(self):
        page = make_page(evaluate=AsyncMock(return_value=True))
        assert await submit_form(page, "form.wt-validation") is True
        page.expect_navigation.assert_called_once_with(timeout=60000)

    @pytest.mark.asyncio
    async def test_missing_form(self):
        page = make_page(evaluate=AsyncMock(return_value=False))
        assert await submit_form(page, "form.missing") is False

    @pytest.mark.asyncio
    async def test_navigation_timeout_is_not_fatal(self):
        page = make_page(evaluate=AsyncMock(return_value=True), navigation_error=navigation_timeout(60000))
        assert await submit_form(page, "form.wt-validation") is False


class TestClickElement:
    @pytest.mark.asyncio
    async def test_click(self):
        page = make_page(evaluate=AsyncMock(return_value=True))
        assert await click_element(page, ".proceed-to-checkout") is True

    @pytest.mark.asyncio
    async def test_error(self):
        page = make_page(evaluate=AsyncMock(side_effect=RuntimeError("boom")))
        assert await click_element(page, ".proceed-to-checkout") is False
