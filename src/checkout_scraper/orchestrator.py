#!/usr/bin/env python3
"""
Main Orchestrator - stitches the listing scrape, product visits and checkout.
Flow: Launch -> Listing page -> Extract cards -> Visit each product -> Checkout (last item)
"""

import random
from typing import List, Optional

from playwright.async_api import Page

from checkout_scraper.browser.session import BrowserSession
from checkout_scraper.core import constants
from checkout_scraper.core.errors import NavigationError
from checkout_scraper.dom.listing import extract_listing
from checkout_scraper.models import ListingCandidate
from checkout_scraper.phase1.product_visitor import visit_product
from checkout_scraper.utils import humanizer
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('orchestrator')


def last_linked_index(candidates: List[Optional[ListingCandidate]]) -> Optional[int]:
    """Index of the last candidate that has a link to visit"""
    for index in range(len(candidates) - 1, -1, -1):
        candidate = candidates[index]
        if candidate is not None and candidate.link:
            return index
    return None


class ScrapeOrchestrator:
    """Owns the browser session and sequences the scrape -> visit -> checkout pipeline"""

    def __init__(self, rng: Optional[random.Random] = None, session_factory=BrowserSession):
        self.rng = rng or random.Random()
        self.session_factory = session_factory
        self.session: Optional[BrowserSession] = None

    async def open_listing(self, page: Page, url: str):
        """
        Raises:
            NavigationError: the listing cards did not load in time
        """
        log(logger, 'info', f"Navigating to: {url}", 'ORCHESTRATOR', 'LISTING')
        try:
            await page.goto(url)
            await page.wait_for_selector(constants.LISTING_CARD_SELECTOR, timeout=constants.LISTING_TIMEOUT_MS)
        except Exception as e:
            raise NavigationError(f"Listing did not load from {url}: {e}") from e

    async def visit_candidates(self, page: Page, candidates: List[Optional[ListingCandidate]]):
        """Visit every candidate with a link in order, attaching scraped details in place"""
        last_index = last_linked_index(candidates)

        for index, candidate in enumerate(candidates):
            if candidate is None or not candidate.link:
                continue

            await humanizer.sleep(constants.ITEM_DELAY_S)
            await humanizer.random_move(page, 3, self.rng)

            try:
                detail = await visit_product(
                    self.session, page, candidate.link, index == last_index, self.rng
                )
            except Exception as e:
                log(logger, 'error', f"Product visit failed for {candidate.link}: {e}", 'ORCHESTRATOR', 'VISIT')
                continue

            if detail is not None:
                candidate.attach_detail(detail)

    async def run(self, url: str, count: int, headless: bool) -> List[Optional[ListingCandidate]]:
        """
        Run the whole pipeline.

        Returns:
            Candidates in page order (None where a card was incomplete)

        Raises:
            LaunchError: the browser could not be started
        """
        self.session = self.session_factory(headless=headless)
        page = await self.session.launch()
        candidates: List[Optional[ListingCandidate]] = []

        try:
            await self.open_listing(page, url)
            candidates = await extract_listing(page, count)
            await self.visit_candidates(page, candidates)
        except NavigationError as e:
            log(logger, 'error', str(e), 'ORCHESTRATOR', 'LISTING')
        finally:
            await self.session.close()

        log(logger, 'info', f"Run finished with {len(candidates)} candidates", 'ORCHESTRATOR', 'FLOW')
        return candidates
