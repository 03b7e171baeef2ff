"""Tests for random variant selection."""

import random
from unittest.mock import AsyncMock

import pytest
from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from checkout_scraper.core import constants
from checkout_scraper.phase1.variant_selector import choose_select_options, pick_option
from tests.helpers import make_page


class TestPickOption:
    def test_seeded_pick_is_deterministic(self):
        values = ["", "s", "m", "l", "xl"]
        first = [pick_option(values, random.Random(42)) for _ in range(5)]
        second = [pick_option(values, random.Random(42)) for _ in range(5)]
        assert first == second

    def test_never_picks_empty_value(self):
        rng = random.Random(7)
        picks = {pick_option(["", "red", "", "blue"], rng) for _ in range(200)}
        assert picks == {"red", "blue"}

    def test_only_placeholder_gives_none(self):
        assert pick_option(["", ""], random.Random(1)) is None
        assert pick_option([], random.Random(1)) is None


class TestChooseSelectOptions:
    @pytest.mark.asyncio
    async def test_choices_passed_to_page(self):
        page = make_page(evaluate=AsyncMock(side_effect=[
            [["", "101", "102"], ["", "red"]],
            {"personalized": True, "selects": 2},
        ]))

        result = await choose_select_options(page, random.Random(3))

        assert result["personalized"] is True
        assert result["choices"][0] in ("101", "102")
        assert result["choices"][1] == "red"

        apply_args = page.evaluate.call_args_list[1].args[1]
        assert apply_args["choices"] == result["choices"]
        assert apply_args["personalizationText"] == constants.PERSONALIZATION_TEXT

    @pytest.mark.asyncio
    async def test_no_selects_still_personalizes(self):
        page = make_page(evaluate=AsyncMock(side_effect=[[], {"personalized": True, "selects": 0}]))
        page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 10000ms exceeded."))

        result = await choose_select_options(page, random.Random(0))

        assert result == {"choices": [], "personalized": True}
        assert page.evaluate.await_count == 2

    @pytest.mark.asyncio
    async def test_evaluation_error_is_swallowed(self):
        page = make_page(evaluate=AsyncMock(side_effect=RuntimeError("detached")))
        result = await choose_select_options(page)
        assert result == {"choices": [], "personalized": False}

    @pytest.mark.asyncio
    async def test_closed_tab_during_wait_is_swallowed(self):
        closed = PlaywrightError("Target page, context or browser has been closed")
        page = make_page(evaluate=AsyncMock(side_effect=closed))
        page.wait_for_selector = AsyncMock(side_effect=closed)

        result = await choose_select_options(page, random.Random(0))

        assert result == {"choices": [], "personalized": False}
