"""
Checkout Flow - Phase 2
Runs on the last product tab: proceed to checkout, continue as guest,
fill shipping details and submit. Every step is best effort.
"""

import random
from typing import Any, Dict, Optional

from playwright.async_api import Page

from checkout_scraper.browser.session import BrowserSession
from checkout_scraper.core import constants
from checkout_scraper.dom.actions import click_element, submit_form
from checkout_scraper.phase2.shipping_form import fill_shipping_form
from checkout_scraper.utils import humanizer
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('checkout_flow')


async def continue_as_guest(page: Page) -> bool:
    """
    Submit the guest-checkout form if the site shows one.
    Absent for remembered or signed-in sessions, so failure is expected.
    """
    try:
        await page.wait_for_selector(constants.GUEST_CHECKOUT_FORM_SELECTOR, timeout=constants.GUEST_FORM_TIMEOUT_MS)
    except Exception as e:
        log(logger, 'warning', f"Guest checkout unavailable, continuing: {e}", 'CHECKOUT', 'GUEST')
        return False

    return await submit_form(page, constants.GUEST_CHECKOUT_FORM_SELECTOR)


async def run_checkout(session: BrowserSession, page: Page, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """
    Drive the guest checkout up to the shipping form submission.

    Returns:
        Dict with the outcome of each step
    """
    log(logger, 'info', "Starting checkout", 'CHECKOUT', 'FLOW')
    steps: Dict[str, Any] = {}

    await humanizer.random_move(page, 3, rng)

    try:
        await page.wait_for_selector(
            constants.PROCEED_TO_CHECKOUT_SELECTOR,
            state='visible',
            timeout=constants.CHECKOUT_BUTTON_TIMEOUT_MS,
        )
    except Exception as e:
        log(logger, 'error', f"Proceed to checkout button not visible: {e}", 'CHECKOUT', 'FLOW')
    steps['proceed_to_checkout'] = await click_element(page, constants.PROCEED_TO_CHECKOUT_SELECTOR)

    steps['guest_checkout'] = await continue_as_guest(page)

    await humanizer.random_move(page, 5, rng)
    steps['shipping_form'] = await fill_shipping_form(page)

    await humanizer.sleep(constants.SHIPPING_DELAY_S)
    await humanizer.random_move(page, 2, rng)

    # Confirmation prompts may appear on final submission
    session.accept_dialogs(page)
    steps['submitted'] = await submit_form(page, constants.SHIPPING_FORM_SELECTOR)

    log(logger, 'info', f"Checkout finished: {steps}", 'CHECKOUT', 'FLOW')
    return steps
