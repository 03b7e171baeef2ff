#!/usr/bin/env python3
"""
Human behaviour mimicry: random pointer movement and pauses between actions.
"""

import asyncio
import random
from typing import Optional

from playwright.async_api import Page

from checkout_scraper.core.constants import MOVE_DELAY_RANGE_S
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('humanizer')

MOUSE_MOVE_JS = """
    ([x, y]) => {
        const element = document.elementFromPoint(x, y);
        if (!element) return false;
        element.dispatchEvent(new MouseEvent('mousemove', {
            bubbles: true,
            clientX: x,
            clientY: y
        }));
        return true;
    }
"""


async def sleep(seconds: float):
    """Pause the current flow without blocking the event loop"""
    await asyncio.sleep(seconds)


async def random_move(page: Page, num_moves: int, rng: Optional[random.Random] = None) -> int:
    """
    Dispatch num_moves mousemove events at random points of the viewport,
    sleeping 1-2 seconds after each one.

    Returns:
        Number of moves dispatched
    """
    rng = rng or random
    moves = 0

    for _ in range(num_moves):
        viewport = page.viewport_size
        if not viewport:
            log(logger, 'debug', "No viewport, skipping mouse movement", 'HUMANIZER', 'MOVE')
            return moves

        x = rng.randrange(viewport['width'])
        y = rng.randrange(viewport['height'])
        try:
            await page.evaluate(MOUSE_MOVE_JS, [x, y])
        except Exception as e:
            # Page may be mid-navigation; movement is cosmetic
            log(logger, 'warning', f"Mouse move failed: {e}", 'HUMANIZER', 'MOVE')
            return moves
        moves += 1

        await sleep(rng.uniform(*MOVE_DELAY_RANGE_S))

    return moves
