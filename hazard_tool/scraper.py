"""
Playwright-based scraper for the ASCE Hazard Tool.

The tool has no API, so the wind speed design value is read off the rendered
page after driving the UI the way a person would: dismiss the onboarding
popups, type the address, pick the first suggestion, set Risk Category II and
the Wind load, click View Results and wait for the "Vmph" text to appear.

Each lookup launches its own browser and always closes it before returning.
"""

import base64
import logging

from playwright.sync_api import sync_playwright, TimeoutError as PlaywrightTimeout

from common.config import config
from hazard_tool.config import (
    BASE_URL,
    VIEWPORT,
    LAUNCH_ARGS,
    NAVIGATION_TIMEOUT_MS,
    CLICK_BY_TEXT_TIMEOUT_MS,
    ACTION_TIMEOUT_MS,
    INPUT_VISIBLE_TIMEOUT_MS,
    SUGGESTION_TIMEOUT_MS,
    RESULT_TIMEOUT_MS,
    ESCAPE_DELAY_MS,
    POPUP_CLOSE_DELAY_MS,
    BEFORE_OPTIONS_DELAY_MS,
    AFTER_VIEW_RESULTS_DELAY_MS,
    AFTER_RESULT_DELAY_MS,
    GOT_IT_BUTTON_TEXT,
    CLOSE_SELECTORS,
    ADDRESS_INPUT,
    ADDRESS_INPUT_KEY_DELAY_MS,
    SUGGESTION_ITEM,
    RISK_CATEGORY_SELECT,
    ANY_SELECT,
    RISK_CATEGORY,
    WIND_LABEL_TEXT,
    WIND_CHECKBOX,
    VIEW_RESULTS_BUTTON_TEXT,
    RESULT_MARKER,
)
from hazard_tool.locators import Locator, SelectorStrategy, TextStrategy, find_marker_text
from hazard_tool.models import Screenshot, WindSpeedResult
from hazard_tool.parser import parse_wind_speed
from hazard_tool.pipeline import Phase, run_phases

logger = logging.getLogger(__name__)


class WindSpeedLookupError(Exception):
    """Base class for lookup failures raised by this module."""


class AddressInputError(WindSpeedLookupError):
    """The address field could not be found or filled."""


class ResultNotFoundError(WindSpeedLookupError):
    """The wind speed never appeared on the results page."""


GOT_IT_BUTTON = Locator('onboarding button', [
    TextStrategy('button', GOT_IT_BUTTON_TEXT, CLICK_BY_TEXT_TIMEOUT_MS),
])

# The input is often covered by the welcome modal, so fall back to any
# matching element in the DOM and fill it by script.
ADDRESS_FIELD = Locator('address input', [
    SelectorStrategy(ADDRESS_INPUT, visible=True, timeout_ms=INPUT_VISIBLE_TIMEOUT_MS),
    SelectorStrategy(ADDRESS_INPUT),
])

FIRST_SUGGESTION = Locator('address suggestion', [
    SelectorStrategy(SUGGESTION_ITEM, timeout_ms=SUGGESTION_TIMEOUT_MS),
])

RISK_CATEGORY_FIELD = Locator('risk category select', [
    SelectorStrategy(RISK_CATEGORY_SELECT),
    SelectorStrategy(ANY_SELECT),
])

WIND_LOAD_OPTION = Locator('wind load option', [
    TextStrategy('label', WIND_LABEL_TEXT, CLICK_BY_TEXT_TIMEOUT_MS),
    SelectorStrategy(WIND_CHECKBOX),
])

VIEW_RESULTS_BUTTON = Locator('view results button', [
    TextStrategy('button', VIEW_RESULTS_BUTTON_TEXT, CLICK_BY_TEXT_TIMEOUT_MS),
])

CLICK_ALL_SCRIPT = '''
    selectors => {
        for (const sel of selectors) {
            document.querySelectorAll(sel).forEach(el => el.click());
        }
    }
'''

FORCE_VALUE_SCRIPT = '''
    (el, value) => {
        el.value = value;
        el.dispatchEvent(new Event('input', { bubbles: true }));
        el.dispatchEvent(new Event('change', { bubbles: true }));
        el.focus();
    }
'''

MARKER_VISIBLE_SCRIPT = 'marker => !!document.body && document.body.innerText.includes(marker)'


class HazardToolSession:
    """State of one lookup against an open Hazard Tool page."""

    def __init__(self, page, address: str, capture_screenshots: bool = True):
        self.page = page
        self.address = address
        self.capture_screenshots = capture_screenshots
        self.screenshots = []
        self.raw_value = None
        self.wind_speed = None

    def capture(self, name: str, force: bool = False) -> None:
        """Take a screenshot; failures are logged and the screenshot dropped."""
        if not (self.capture_screenshots or force):
            return

        try:
            png = self.page.screenshot()
        except Exception as e:
            logger.warning(f"Screenshot '{name}' failed: {e}")
            return

        self.screenshots.append(Screenshot(name=name, data=base64.b64encode(png).decode('ascii')))
        logger.debug(f"Screenshot: {name}")

    def navigate(self):
        logger.debug(f"Navigating to {BASE_URL}")
        self.page.goto(BASE_URL, wait_until='networkidle', timeout=NAVIGATION_TIMEOUT_MS)

    def dismiss_popups(self):
        """Close the onboarding and welcome dialogs, if any."""
        logger.debug("Handling popups...")

        try:
            GOT_IT_BUTTON.click(self.page, timeout_ms=ACTION_TIMEOUT_MS)
        except Exception as e:
            logger.debug(f"'{GOT_IT_BUTTON_TEXT}' click failed: {e}")

        try:
            self.page.keyboard.press('Escape')
            self.page.wait_for_timeout(ESCAPE_DELAY_MS)
            self.page.evaluate(CLICK_ALL_SCRIPT, CLOSE_SELECTORS)
            self.page.wait_for_timeout(POPUP_CLOSE_DELAY_MS)
        except Exception as e:
            logger.warning(f"Popup close sequence error: {e}")

    def fill_address(self):
        """
        Put the address into the search field.

        The value is set through the DOM with synthetic input/change events
        so it lands even when the field is covered, then a single keystroke
        is typed to wake up the autocomplete listener.

        Raises:
            AddressInputError: If no input field exists or it cannot be filled
        """
        logger.debug(f"Searching for address: {self.address}")

        try:
            field = ADDRESS_FIELD.find(self.page)
            if not field:
                raise AddressInputError('Could not input address')
            field.evaluate(FORCE_VALUE_SCRIPT, self.address)
        except AddressInputError:
            raise
        except Exception as e:
            logger.error(f"Error interacting with input: {e}")
            raise AddressInputError('Could not input address') from e

        try:
            field.type(' ', delay=ADDRESS_INPUT_KEY_DELAY_MS)
        except Exception as e:
            logger.debug(f"Keystroke on address input failed: {e}")

    def select_suggestion(self):
        """Click the first autocomplete suggestion, or press Enter."""
        try:
            suggestion = FIRST_SUGGESTION.find(self.page)
            if suggestion:
                suggestion.click(timeout=ACTION_TIMEOUT_MS)
                return
        except Exception as e:
            logger.debug(f"Suggestion click failed: {e}")

        logger.warning("No suggestions, using Enter...")
        self.page.keyboard.press('Enter')

    def select_risk_category(self):
        logger.debug("Setting Risk Category...")
        self.page.wait_for_timeout(BEFORE_OPTIONS_DELAY_MS)

        select = RISK_CATEGORY_FIELD.find(self.page)
        if not select:
            logger.warning("Could not auto-select Risk Category.")
            return
        select.select_option(RISK_CATEGORY, timeout=ACTION_TIMEOUT_MS)

    def select_wind_load(self):
        logger.debug("Selecting Wind Load...")
        if not WIND_LOAD_OPTION.click(self.page, timeout_ms=ACTION_TIMEOUT_MS):
            logger.warning("Could not select Wind load.")

    def view_results(self):
        logger.debug("Clicking View Results...")
        if not VIEW_RESULTS_BUTTON.click(self.page, timeout_ms=ACTION_TIMEOUT_MS):
            logger.warning(f"'{VIEW_RESULTS_BUTTON_TEXT}' button not found")
        self.page.wait_for_timeout(AFTER_VIEW_RESULTS_DELAY_MS)

    def extract_result(self):
        """
        Wait for the result marker and parse the wind speed.

        Raises:
            ResultNotFoundError: If the marker never appears or has no number
        """
        logger.debug("Waiting for results...")
        try:
            self.page.wait_for_function(
                MARKER_VISIBLE_SCRIPT,
                arg=RESULT_MARKER,
                timeout=RESULT_TIMEOUT_MS,
            )
        except PlaywrightTimeout as e:
            raise ResultNotFoundError(
                f"{RESULT_MARKER} not found on page after {RESULT_TIMEOUT_MS // 1000}s"
            ) from e

        self.page.wait_for_timeout(AFTER_RESULT_DELAY_MS)

        raw_value = find_marker_text(self.page.content(), RESULT_MARKER)
        if not raw_value:
            raise ResultNotFoundError(f"{RESULT_MARKER} not found on page.")

        try:
            self.wind_speed = parse_wind_speed(raw_value)
        except ValueError as e:
            raise ResultNotFoundError(str(e)) from e
        self.raw_value = raw_value


PHASES = [
    Phase('navigate', HazardToolSession.navigate, checkpoint='1_after_load'),
    Phase('dismiss_popups', HazardToolSession.dismiss_popups, fatal=False, checkpoint='2_after_modal_close'),
    Phase('fill_address', HazardToolSession.fill_address, checkpoint='3_after_address_input'),
    Phase('select_suggestion', HazardToolSession.select_suggestion, fatal=False),
    Phase('select_risk_category', HazardToolSession.select_risk_category, fatal=False),
    Phase('select_wind_load', HazardToolSession.select_wind_load, fatal=False, checkpoint='4_before_view_results'),
    Phase('view_results', HazardToolSession.view_results, fatal=False, checkpoint='5_after_view_results'),
    Phase('extract_result', HazardToolSession.extract_result),
]


def _close_browser(browser) -> None:
    try:
        browser.close()
    except Exception as e:
        logger.warning(f"Error closing browser: {e}")


def lookup_wind_speed(address: str, capture_screenshots: bool = None, headless: bool = None) -> WindSpeedResult:
    """
    Look up the ASCE 7 wind speed for an address.

    Args:
        address: Free-text address (e.g., "411 Crusaders Dr, Sanford, NC")
        capture_screenshots: Take checkpoint screenshots (default from config)
        headless: Run Chromium headless (default from config)

    Returns:
        WindSpeedResult; success=False carries the error message and any
        screenshots captured before the failure
    """
    if capture_screenshots is None:
        capture_screenshots = config.CAPTURE_SCREENSHOTS
    if headless is None:
        headless = config.HEADLESS

    logger.info(f"Starting wind speed lookup for: {address}")

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=headless, args=LAUNCH_ARGS)
            session = None
            try:
                page = browser.new_page(viewport=VIEWPORT)
                session = HazardToolSession(page, address, capture_screenshots)

                run_phases(session, PHASES)

                logger.info(f"Found wind speed: {session.raw_value}")
                return WindSpeedResult.succeeded(
                    address=address,
                    raw_value=session.raw_value,
                    wind_speed=session.wind_speed,
                    screenshots=session.screenshots,
                )

            except Exception as e:
                logger.error(f"Scraping failed for {address}: {e}")
                screenshots = []
                if session:
                    session.capture('error_state', force=True)
                    screenshots = session.screenshots
                return WindSpeedResult.failed(address=address, error=str(e), screenshots=screenshots)

            finally:
                _close_browser(browser)

    except Exception as e:
        logger.exception(f"Browser session failed for {address}")
        return WindSpeedResult.failed(address=address, error=str(e))
