#!/usr/bin/env python3
"""
Product Visitor - Phase 1
Opens a listing card's product in its own tab, scrapes it, picks variants,
adds it to the cart and, for the last item, hands over to checkout.
"""

import random
from typing import Optional

from playwright.async_api import Page

from checkout_scraper.browser.session import BrowserSession
from checkout_scraper.core import constants
from checkout_scraper.core.errors import MissingTabError
from checkout_scraper.dom.actions import click_and_wait_navigation, submit_form
from checkout_scraper.dom.product import scrape_product_details
from checkout_scraper.models import ProductDetail
from checkout_scraper.phase1.variant_selector import choose_select_options
from checkout_scraper.phase2.checkout_flow import run_checkout
from checkout_scraper.utils import humanizer
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('product_visitor')

# Navigation wait on the main tab plus slack for the new tab to appear
NEW_TAB_TIMEOUT_MS = constants.DEFAULT_TIMEOUT_MS + 5 * 1000


def link_selector(link: str) -> str:
    escaped = link.replace('\\', '\\\\').replace('"', '\\"')
    return f'a[href="{escaped}"]'


async def open_product_tab(session: BrowserSession, main_page: Page, link: str,
                           rng: Optional[random.Random] = None) -> Page:
    """
    Click the product link on the main tab and return the tab it opens.

    Raises:
        MissingTabError: the click did not open a product tab
    """
    selector = link_selector(link)

    try:
        await main_page.wait_for_selector(selector, state='attached', timeout=constants.PRODUCT_LINK_TIMEOUT_MS)
    except Exception as e:
        log(logger, 'warning', f"Product link not found on listing: {e}", 'VISITOR', 'NAVIGATE')

    await humanizer.random_move(main_page, 2, rng)

    return await session.wait_for_new_tab(
        lambda: click_and_wait_navigation(main_page, selector),
        link,
        NEW_TAB_TIMEOUT_MS,
    )


async def visit_product(session: BrowserSession, main_page: Page, link: str, is_last_item: bool,
                        rng: Optional[random.Random] = None) -> Optional[ProductDetail]:
    """
    Visit one product and run the add-to-cart flow on it.

    Returns:
        Scraped ProductDetail (even when later steps fail), or None if the
        product tab never opened or extraction failed
    """
    log(logger, 'info', f"Visiting product: {link} (last={is_last_item})", 'VISITOR', 'FLOW')

    try:
        product_tab = await open_product_tab(session, main_page, link, rng)
    except MissingTabError as e:
        log(logger, 'error', f"New page not found. {e}", 'VISITOR', 'FLOW')
        return None

    details = None
    try:
        details = await scrape_product_details(product_tab)

        await humanizer.random_move(product_tab, 3, rng)
        await choose_select_options(product_tab, rng)

        await humanizer.random_move(product_tab, 2, rng)
        await humanizer.sleep(constants.STEP_DELAY_S)

        added = await submit_form(product_tab, constants.ADD_TO_CART_FORM_SELECTOR)
        log(logger, 'info', f"Add to cart submitted: {added}", 'VISITOR', 'CART')

        await humanizer.random_move(product_tab, 3, rng)

        if is_last_item:
            try:
                await run_checkout(session, product_tab, rng)
            except Exception as e:
                log(logger, 'error', f"Checkout failed: {e}", 'VISITOR', 'CHECKOUT')

        await humanizer.random_move(product_tab, 3, rng)
        await humanizer.sleep(constants.STEP_DELAY_S)

    except Exception as e:
        log(logger, 'error', f"Product visit aborted: {e}", 'VISITOR', 'FLOW')

    finally:
        # The last tab stays open for the checkout result
        if not is_last_item:
            await session.close_tab(product_tab)

    return details
