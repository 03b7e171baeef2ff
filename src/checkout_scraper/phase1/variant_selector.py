#!/usr/bin/env python3
"""
Variant Selector
Picks a random option on every labelled <select> and fills the personalization box.
"""

import random
from typing import Dict, List, Optional, Sequence

from playwright.async_api import Page

from checkout_scraper.core import constants
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('variant_selector')

COLLECT_SELECTS_JS = """
    (selector) => Array.from(document.querySelectorAll(selector))
        .map(select => Array.from(select.options).map(option => option.value))
"""

APPLY_SELECTIONS_JS = """
    (args) => {
        const fire = (el) => el.dispatchEvent(new Event('change', { bubbles: true }));

        const textarea = document.querySelector(args.personalizationSelector);
        if (textarea) {
            textarea.value = args.personalizationText;
            fire(textarea);
        }

        const selects = Array.from(document.querySelectorAll(args.selectSelector));
        selects.forEach((select, index) => {
            const value = args.choices[index];
            if (value !== null && value !== undefined) select.value = value;
        });
        selects.forEach(fire);

        return { personalized: !!textarea, selects: selects.length };
    }
"""


def pick_option(values: Sequence[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """Uniformly pick one of the non-empty option values, None if there are none"""
    candidates = [value for value in values if value]
    if not candidates:
        return None
    return (rng or random).choice(candidates)


async def choose_select_options(page: Page, rng: Optional[random.Random] = None) -> Dict[str, object]:
    """
    Make a random selection on every select[aria-labelledby] and fill the
    personalization textarea, firing change events so the page reacts.

    Returns:
        Dict with 'choices': picked values per select, 'personalized': bool
    """
    try:
        await page.wait_for_selector(constants.LABELED_SELECT_SELECTOR, timeout=constants.DEFAULT_TIMEOUT_MS)
    except Exception:
        log(logger, 'info', "No select elements found! Continue...", 'VARIANTS', 'SELECT')

    try:
        option_values: List[List[str]] = await page.evaluate(
            COLLECT_SELECTS_JS, constants.LABELED_SELECT_SELECTOR
        )
        choices = [pick_option(values, rng) for values in option_values]

        result = await page.evaluate(APPLY_SELECTIONS_JS, {
            'selectSelector': constants.LABELED_SELECT_SELECTOR,
            'personalizationSelector': constants.PERSONALIZATION_SELECTOR,
            'personalizationText': constants.PERSONALIZATION_TEXT,
            'choices': choices,
        })
    except Exception as e:
        log(logger, 'error', f"Error in getting select: {e}", 'VARIANTS', 'SELECT')
        return {'choices': [], 'personalized': False}

    personalized = bool(result and result.get('personalized'))
    log(logger, 'info', f"Selected options {choices} (personalized={personalized})", 'VARIANTS', 'SELECT')
    return {'choices': choices, 'personalized': personalized}
