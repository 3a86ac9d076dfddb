"""
Locator strategies for the Hazard Tool page.

The page markup is not under our control, so every element or text
fragment we need is found by an ordered list of strategies. The first
strategy that produces a match wins.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Comment
from playwright.sync_api import TimeoutError as PlaywrightTimeout

logger = logging.getLogger(__name__)

# Tags whose text is never rendered
NON_RENDERED_TAGS = ('script', 'style', 'noscript', 'template')


class SelectorStrategy:
    """Find an element by CSS selector."""

    def __init__(self, selector: str, visible: bool = False, timeout_ms: Optional[int] = None):
        """
        Args:
            selector: CSS selector
            visible: Require the element to be visible (only when waiting)
            timeout_ms: Wait up to this long; None queries the current DOM once
        """
        self.selector = selector
        self.visible = visible
        self.timeout_ms = timeout_ms

    def __repr__(self):
        return f"SelectorStrategy({self.selector!r}, visible={self.visible})"

    def locate(self, page):
        if self.timeout_ms is None:
            return page.query_selector(self.selector)

        state = 'visible' if self.visible else 'attached'
        try:
            return page.wait_for_selector(self.selector, state=state, timeout=self.timeout_ms)
        except PlaywrightTimeout:
            return None


class TextStrategy:
    """Find an element by tag name and contained text."""

    def __init__(self, tag: str, text: str, timeout_ms: int):
        self.tag = tag
        self.text = text
        self.timeout_ms = timeout_ms

    def __repr__(self):
        return f"TextStrategy({self.tag!r}, {self.text!r})"

    @property
    def selector(self) -> str:
        return f'xpath=//{self.tag}[contains(text(), "{self.text}")]'

    def locate(self, page):
        try:
            return page.wait_for_selector(self.selector, timeout=self.timeout_ms)
        except PlaywrightTimeout:
            return None


class Locator:
    """Ordered list of strategies for one element; first match wins."""

    def __init__(self, description: str, strategies: List):
        self.description = description
        self.strategies = strategies

    def find(self, page):
        """
        Run each strategy in order.

        Args:
            page: Playwright page object

        Returns:
            Element handle from the first matching strategy, or None
        """
        for strategy in self.strategies:
            element = strategy.locate(page)
            if element:
                logger.debug(f"Found {self.description} via {strategy!r}")
                return element

        logger.debug(f"No strategy found {self.description}")
        return None

    def click(self, page, timeout_ms: Optional[int] = None) -> bool:
        """
        Find the element and click it. Returns True if clicked.

        timeout_ms bounds the actionability wait; None uses the page default.
        """
        element = self.find(page)
        if not element:
            return False
        if timeout_ms is None:
            element.click()
        else:
            element.click(timeout=timeout_ms)
        return True


class LeafElementScan:
    """
    First element with exactly one child node whose text contains the marker.

    The child may be a text node or an element; the whole text of the
    element is returned, so "<p>Wind Speed: <b>Vmph</b> 115</p>" wrapped
    in a single <div> yields "Wind Speed: Vmph 115".
    """

    def find(self, soup: BeautifulSoup, marker: str) -> Optional[str]:
        for element in soup.find_all(True):
            # A rendered <html> always holds <head> and <body>; html.parser
            # may leave it with a single child.
            if element.name == 'html' or element.name in NON_RENDERED_TAGS:
                continue
            if len(element.contents) != 1:
                continue
            text = element.get_text()
            if marker in text:
                return text.strip()
        return None


class TextNodeWalk:
    """First text node under <body> containing the marker."""

    def find(self, soup: BeautifulSoup, marker: str) -> Optional[str]:
        root = soup.body or soup
        for node in root.find_all(string=True):
            if isinstance(node, Comment):
                continue
            if node.parent is not None and node.parent.name in NON_RENDERED_TAGS:
                continue
            if marker in node:
                return node.strip()
        return None


DEFAULT_TEXT_STRATEGIES = (LeafElementScan(), TextNodeWalk())


def find_marker_text(html: str, marker: str, strategies=DEFAULT_TEXT_STRATEGIES) -> Optional[str]:
    """
    Find the first text fragment containing the marker.

    Args:
        html: Rendered page HTML (page.content())
        marker: Substring identifying the result, e.g. 'Vmph'
        strategies: Text strategies to try in order

    Returns:
        Stripped text fragment, or None if no strategy matched
    """
    soup = BeautifulSoup(html, 'html.parser')

    for strategy in strategies:
        text = strategy.find(soup, marker)
        if text:
            logger.debug(f"{type(strategy).__name__} found marker text: {text}")
            return text

    return None
