"""
Shipping form filler - types the fixed shipping details into the checkout form.
"""

from playwright.async_api import Page

from checkout_scraper.core import constants
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('shipping_form')


async def fill_shipping_form(page: Page) -> bool:
    """Wait for every shipping field, then type the fixed values. Returns False on any error."""
    try:
        for selector, _ in constants.SHIPPING_FIELDS:
            await page.wait_for_selector(selector, timeout=constants.DEFAULT_TIMEOUT_MS)
        await page.wait_for_selector(constants.COUNTRY_SELECTOR, timeout=constants.DEFAULT_TIMEOUT_MS)

        for selector, value in constants.SHIPPING_FIELDS:
            await page.type(selector, value)

    except Exception as e:
        log(logger, 'error', f"Error in filling the shipping form: {e}", 'CHECKOUT', 'SHIPPING')
        return False

    log(logger, 'info', f"Filled {len(constants.SHIPPING_FIELDS)} shipping fields", 'CHECKOUT', 'SHIPPING')
    return True
