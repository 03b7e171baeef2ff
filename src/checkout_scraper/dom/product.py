#!/usr/bin/env python3
"""
Product page extraction: name, price, description, sizes and carousel images.
"""

from typing import List, Optional

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from checkout_scraper.core import constants
from checkout_scraper.core.errors import ExtractionError, SelectorTimeoutError
from checkout_scraper.models import ProductDetail
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('product')

REQUIRED_SELECTORS = [
    constants.PRODUCT_NAME_SELECTOR,
    constants.PRODUCT_PRICE_SELECTOR,
    constants.PRODUCT_IMAGE_SELECTOR,
]

PRODUCT_DETAILS_JS = """
    (sel) => {
        const text = (selector) => {
            const el = document.querySelector(selector);
            return el ? el.innerText : null;
        };
        const images = Array.from(document.querySelectorAll(sel.image))
            .map(img => img.getAttribute('src') || '');

        return {
            name: text(sel.name),
            price: text(sel.price),
            description: text(sel.description),
            images: images
        };
    }
"""

SELECT_OPTIONS_JS = """
    (selector) => {
        const select = document.querySelector(selector);
        if (!select) return null;
        return Array.from(select.querySelectorAll('option'))
            .map(option => ({ value: option.value, text: option.text }));
    }
"""


def clean_price(raw: Optional[str]) -> Optional[str]:
    """Strip the 'Price' label and every newline from the price text"""
    if raw is None:
        return None
    return raw.replace(constants.PRICE_LABEL, '', 1).replace('\n', '')


def clean_description(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    return raw.replace('\n', '')


async def get_select_options(page: Page, selector: str = constants.PRODUCT_SIZE_SELECTOR) -> Optional[List[str]]:
    """Option texts of a select, skipping placeholder options without a value"""
    try:
        options = await page.evaluate(SELECT_OPTIONS_JS, selector)
    except Exception as e:
        log(logger, 'warning', f"Error in getting select options: {e}", 'PRODUCT', 'SIZES')
        return None

    if options is None:
        return None
    return [option['text'] for option in options if option.get('value')]


async def _wait_for(page: Page, selector: str, timeout_ms: int):
    try:
        await page.wait_for_selector(selector, timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise SelectorTimeoutError(selector, timeout_ms) from e


async def scrape_product_details(page: Page) -> Optional[ProductDetail]:
    """
    Extract all product information from an open product tab.

    Returns:
        ProductDetail, or None when a required element never appears or the
        in-page evaluation throws
    """
    try:
        for selector in REQUIRED_SELECTORS:
            await _wait_for(page, selector, constants.DEFAULT_TIMEOUT_MS)

        raw = await page.evaluate(PRODUCT_DETAILS_JS, {
            'name': constants.PRODUCT_NAME_SELECTOR,
            'price': constants.PRODUCT_PRICE_SELECTOR,
            'description': constants.PRODUCT_DESCRIPTION_SELECTOR,
            'image': constants.PRODUCT_IMAGE_SELECTOR,
        })
        if not isinstance(raw, dict):
            raise ExtractionError(f"Unexpected product payload: {type(raw).__name__}")

        detail = ProductDetail(
            name=raw.get('name'),
            price=clean_price(raw.get('price')),
            description=clean_description(raw.get('description')),
            availableSizes=await get_select_options(page),
            images=raw.get('images'),
        )

    except Exception as e:
        log(logger, 'error', f"Error in scraping page details: {e}", 'PRODUCT', 'EXTRACT')
        return None

    log(logger, 'info', f"Scraped product: {detail.name}", 'PRODUCT', 'EXTRACT')
    return detail
