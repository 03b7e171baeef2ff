"""
Page actions shared by the product and checkout phases.
Clicks and form submits are dispatched in-page and paired with a navigation wait.
"""

from contextlib import asynccontextmanager

from playwright.async_api import Page

from checkout_scraper.core import constants
from checkout_scraper.core.errors import NavigationTimeoutError, is_navigation_timeout
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('actions')

CLICK_JS = """
    (selector) => {
        const element = document.querySelector(selector);
        if (!element) return false;
        element.click();
        return true;
    }
"""

SUBMIT_JS = """
    (selector) => {
        const form = document.querySelector(selector);
        if (!form) return false;
        form.submit();
        return true;
    }
"""


@asynccontextmanager
async def navigation(page: Page, timeout_ms: int):
    """
    Wait for the navigation triggered inside the block.

    Raises:
        NavigationTimeoutError: no navigation happened within timeout_ms
    """
    try:
        async with page.expect_navigation(timeout=timeout_ms):
            yield
    except NavigationTimeoutError:
        raise
    except Exception as e:
        if is_navigation_timeout(e):
            raise NavigationTimeoutError(f"Navigation timeout of {timeout_ms}ms exceeded") from e
        raise


async def click_element(page: Page, selector: str) -> bool:
    """Click an element through the DOM. Returns False when missing or on error."""
    try:
        clicked = await page.evaluate(CLICK_JS, selector)
    except Exception as e:
        log(logger, 'error', f"Error in clicking the button! Selector: {selector}. {e}", 'ACTIONS', 'CLICK')
        return False

    if not clicked:
        log(logger, 'warning', f"Nothing to click for {selector}", 'ACTIONS', 'CLICK')
    return bool(clicked)


async def click_and_wait_navigation(page: Page, selector: str,
                                    timeout_ms: int = constants.DEFAULT_TIMEOUT_MS) -> bool:
    """
    Click a link and wait for the navigation it may trigger.
    A navigation timeout is expected when the link opens a new tab.

    Returns:
        True if the current tab navigated
    """
    try:
        async with navigation(page, timeout_ms):
            await page.evaluate(CLICK_JS, selector)
        return True
    except NavigationTimeoutError:
        log(logger, 'info', f"Supposed navigation error! Selector: {selector}", 'ACTIONS', 'NAVIGATE')
        return False
    except Exception as e:
        log(logger, 'error', f"Error in navigating to product: {e}", 'ACTIONS', 'NAVIGATE')
        return False


async def submit_form(page: Page, selector: str,
                      timeout_ms: int = constants.SUBMIT_NAVIGATION_TIMEOUT_MS) -> bool:
    """
    Submit a form with form.submit() (bypassing submit buttons) and wait for navigation.

    Returns:
        True when the form existed and the page navigated
    """
    try:
        async with navigation(page, timeout_ms):
            submitted = await page.evaluate(SUBMIT_JS, selector)
            if not submitted:
                log(logger, 'warning', f"Form not found: {selector}", 'ACTIONS', 'SUBMIT')
        return bool(submitted)
    except NavigationTimeoutError:
        log(logger, 'warning', f"Submit navigation timed out for {selector}", 'ACTIONS', 'SUBMIT')
        return False
    except Exception as e:
        log(logger, 'error', f"Submit error for {selector}: {e}", 'ACTIONS', 'SUBMIT')
        return False
