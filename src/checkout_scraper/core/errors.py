"""
Error taxonomy for the scraper.
Every step catches its own failures; only LaunchError is allowed to end a run.
"""

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class ScraperError(Exception):
    """Base class for all scraper errors"""


class LaunchError(ScraperError):
    """The browser session could not be started"""


class NavigationError(ScraperError):
    """The listing page never showed its product cards"""


class SelectorTimeoutError(ScraperError):
    """An expected element did not appear within its budget"""

    def __init__(self, selector: str, timeout_ms: int):
        super().__init__(f"Selector {selector!r} not found within {timeout_ms}ms")
        self.selector = selector
        self.timeout_ms = timeout_ms


class NavigationTimeoutError(ScraperError):
    """A page transition did not signal completion within its budget"""


class MissingTabError(ScraperError):
    """A product tab was expected after the click but never opened"""

    def __init__(self, link: str):
        super().__init__(f"No product tab opened for {link}")
        self.link = link


class ExtractionError(ScraperError):
    """In-page evaluation failed while scraping cards or product details"""


def is_navigation_timeout(error: BaseException) -> bool:
    """True when the error is a navigation wait running out of time"""
    if isinstance(error, NavigationTimeoutError):
        return True
    message = str(error).lower()
    if 'navigation timeout' in message:
        return True
    return isinstance(error, PlaywrightTimeoutError) and (
        'navigation' in message or 'exceeded' in message
    )
