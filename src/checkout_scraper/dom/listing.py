#!/usr/bin/env python3
"""
Listing Extractor
Reads the first N product cards of a listing page.
"""

from typing import Any, Dict, List, Optional

from playwright.async_api import Page

from checkout_scraper.core import constants
from checkout_scraper.core.errors import ExtractionError
from checkout_scraper.models import ListingCandidate
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('listing')

# Collects raw facts per card; the null/keep decision is made in Python
LISTING_CARDS_JS = """
    (args) => {
        const cardElements = document.querySelectorAll(args.cardSelector);
        const total = Math.min(args.count, cardElements.length);
        const cards = [];

        for (let i = 0; i < total; i++) {
            const card = cardElements[i];
            const infoContainer = card.parentElement
                ? card.parentElement.querySelector(args.infoSelector)
                : null;

            if (!infoContainer) {
                cards.push({ link: card.getAttribute('href'), hasInfo: false, name: null, price: null });
                continue;
            }

            const titleElement = infoContainer.querySelector(args.titleSelector);
            const priceElement = infoContainer.querySelector(args.priceSelector);

            cards.push({
                link: card.getAttribute('href'),
                hasInfo: true,
                name: titleElement && titleElement.textContent ? titleElement.textContent.trim() : null,
                price: priceElement && priceElement.textContent ? priceElement.textContent.trim() : null
            });
        }
        return cards;
    }
"""


def candidate_from_card(card: Optional[Dict[str, Any]]) -> Optional[ListingCandidate]:
    """A card without info container, link, title or price becomes None"""
    if not card or not card.get('hasInfo'):
        return None

    link = card.get('link')
    name = (card.get('name') or '').strip()
    price = (card.get('price') or '').strip()
    if not link or not name or not price:
        return None

    return ListingCandidate(link=link, name=name, price=price)


async def extract_listing(page: Page, count: int) -> List[Optional[ListingCandidate]]:
    """
    Extract up to `count` listing cards in page order.
    Clamped to the number of cards present. Any evaluation error blanks the
    whole listing (returns []).
    """
    if count <= 0:
        return []

    try:
        raw_cards = await page.evaluate(LISTING_CARDS_JS, {
            'count': count,
            'cardSelector': constants.LISTING_CARD_SELECTOR,
            'infoSelector': constants.LISTING_INFO_SELECTOR,
            'titleSelector': constants.LISTING_TITLE_SELECTOR,
            'priceSelector': constants.LISTING_PRICE_SELECTOR,
        })
        if not isinstance(raw_cards, list):
            raise ExtractionError(f"Unexpected listing payload: {type(raw_cards).__name__}")

        candidates = [candidate_from_card(card) for card in raw_cards[:count]]

    except Exception as e:
        log(logger, 'error', f"Error in getting product elements: {e}", 'LISTING', 'EXTRACT')
        return []

    found = sum(1 for candidate in candidates if candidate is not None)
    log(logger, 'info', f"Extracted {found}/{len(candidates)} listing cards", 'LISTING', 'EXTRACT')
    return candidates
