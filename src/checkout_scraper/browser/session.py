#!/usr/bin/env python3
"""
Browser Session
Owns the single Chromium context and its ordered set of tabs.
One main tab drives the listing; at most one product tab is open beside it.
"""

import shutil
import tempfile
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from playwright.async_api import (
    BrowserContext,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)
from playwright_stealth import Stealth

from checkout_scraper.core import constants
from checkout_scraper.core.errors import LaunchError, MissingTabError
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('session')

MAX_TABS = 2


class BrowserSession:
    """Handles the browser lifecycle and tab bookkeeping using Playwright"""

    def __init__(self, headless: bool = False, profile_dir: Optional[str] = None):
        self.headless = headless
        self.profile_dir = profile_dir
        self._owns_profile = profile_dir is None
        self.playwright: Optional[Playwright] = None
        self.context: Optional[BrowserContext] = None
        self.main_tab: Optional[Page] = None
        self.tabs: List[Page] = []
        self._subscriptions: Dict[Page, List[Tuple[str, Callable]]] = {}

    async def launch(self) -> Page:
        """
        Launch Chromium with a persistent profile, apply stealth patches and
        open the single working tab. Any tab opened by default is closed.

        Returns:
            The main tab
        """
        try:
            self.playwright = await async_playwright().start()

            if self._owns_profile:
                self.profile_dir = tempfile.mkdtemp(prefix='checkout_scraper_')

            log(logger, 'info', f"Launching Chromium (headless={self.headless})", 'SESSION', 'LAUNCH')
            self.context = await self.playwright.chromium.launch_persistent_context(
                user_data_dir=self.profile_dir,
                headless=self.headless,
                viewport=constants.VIEWPORT,
                device_scale_factor=constants.DEVICE_SCALE_FACTOR,
                has_touch=False,
                is_mobile=False,
                user_agent=constants.USER_AGENT,
                args=constants.LAUNCH_ARGS,
                ignore_default_args=constants.IGNORE_DEFAULT_ARGS,
            )

            await Stealth().apply_stealth_async(self.context)

            default_tabs = list(self.context.pages)
            self.main_tab = await self.context.new_page()
            for tab in default_tabs:
                if tab is not self.main_tab:
                    await tab.close()

            self.tabs = [self.main_tab]
            self.context.on('page', self._on_tab_opened)
            self.main_tab.on('close', self._on_tab_closed)

            await self.main_tab.set_viewport_size(constants.VIEWPORT)
            log(logger, 'info', "Browser launched with a single working tab", 'SESSION', 'LAUNCH')
            return self.main_tab

        except Exception as e:
            log(logger, 'critical', f"Browser launch failed: {e}", 'SESSION', 'LAUNCH')
            await self.close()
            raise LaunchError(str(e)) from e

    def _on_tab_opened(self, tab: Page):
        if tab in self.tabs:
            return
        self.tabs.append(tab)
        tab.on('close', self._on_tab_closed)
        log(logger, 'info', f"Tab opened ({len(self.tabs)} open)", 'SESSION', 'TABS')
        if len(self.tabs) > MAX_TABS:
            log(logger, 'warning', f"{len(self.tabs)} tabs open, expected at most {MAX_TABS}", 'SESSION', 'TABS')

    def _on_tab_closed(self, tab: Page):
        self._drop_subscriptions(tab)
        if tab in self.tabs:
            self.tabs.remove(tab)

    async def open_tab(self) -> Page:
        """Open a new blank tab with the fixed viewport"""
        tab = await self.context.new_page()
        self._on_tab_opened(tab)
        await tab.set_viewport_size(constants.VIEWPORT)
        return tab

    async def close_tab(self, tab: Page):
        """Close a tab and drop everything subscribed to it"""
        self._drop_subscriptions(tab)
        if tab in self.tabs:
            self.tabs.remove(tab)
        try:
            if not tab.is_closed():
                await tab.close()
        except Exception as e:
            log(logger, 'warning', f"Error closing tab: {e}", 'SESSION', 'TABS')

    def active_non_main_tab(self) -> Optional[Page]:
        """Most recently opened tab that is still open and is not the main tab"""
        for tab in reversed(self.tabs):
            if tab is not self.main_tab and not tab.is_closed():
                return tab
        return None

    async def wait_for_new_tab(self, action: Callable[[], Awaitable], link: str, timeout_ms: int) -> Page:
        """
        Run action while listening for the context's tab-opened event.

        Raises:
            MissingTabError: no tab other than the main one exists afterwards
        """
        tab = None
        try:
            async with self.context.expect_page(timeout=timeout_ms) as tab_info:
                await action()
            tab = await tab_info.value
            self._on_tab_opened(tab)
        except PlaywrightTimeoutError:
            log(logger, 'warning', f"No tab-opened event within {timeout_ms}ms", 'SESSION', 'TABS')

        if tab is None or tab.is_closed():
            tab = self.active_non_main_tab()
        if tab is None:
            raise MissingTabError(link)

        await tab.set_viewport_size(constants.VIEWPORT)
        return tab

    def accept_dialogs(self, tab: Page):
        """Auto-accept every native dialog on this tab until the tab closes"""
        async def _accept(dialog):
            log(logger, 'info', f"Accepting {dialog.type} dialog: {dialog.message}", 'SESSION', 'DIALOG')
            await dialog.accept()

        tab.on('dialog', _accept)
        self._subscriptions.setdefault(tab, []).append(('dialog', _accept))

    def _drop_subscriptions(self, tab: Page):
        for event, handler in self._subscriptions.pop(tab, []):
            try:
                tab.remove_listener(event, handler)
            except Exception as e:
                log(logger, 'debug', f"Listener already gone: {e}", 'SESSION', 'DIALOG')

    async def close(self):
        """Close every tab, the context and Playwright, then remove the temp profile"""
        for tab in list(self._subscriptions):
            self._drop_subscriptions(tab)

        try:
            if self.context:
                await self.context.close()
        except Exception as e:
            log(logger, 'error', f"Error closing context: {e}", 'SESSION', 'CLOSE')

        try:
            if self.playwright:
                await self.playwright.stop()
        except Exception as e:
            log(logger, 'error', f"Error stopping playwright: {e}", 'SESSION', 'CLOSE')

        if self._owns_profile and self.profile_dir:
            shutil.rmtree(self.profile_dir, ignore_errors=True)

        self.context = None
        self.playwright = None
        self.main_tab = None
        self.tabs = []
