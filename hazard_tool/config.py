"""ASCE Hazard Tool selectors and constants.

The tool is an ArcGIS/Calcite single-page app with no public API. Every
selector and text marker below was read off the rendered page and breaks
whenever the site's markup changes.
"""

from common.config import config

# Target page
BASE_URL = config.HAZARD_TOOL_URL
SOURCE_NAME = 'ASCE Hazard Tool'

# Browser
VIEWPORT = {'width': 1280, 'height': 800}
LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-dev-shm-usage',
    '--window-size=1280,800',
]

# Timeouts (ms)
NAVIGATION_TIMEOUT_MS = 60000
CLICK_BY_TEXT_TIMEOUT_MS = 3000
ACTION_TIMEOUT_MS = 3000  # click / select actionability on best-effort steps
INPUT_VISIBLE_TIMEOUT_MS = 5000
SUGGESTION_TIMEOUT_MS = 8000
RESULT_TIMEOUT_MS = 60000

# Fixed settling delays (ms)
ESCAPE_DELAY_MS = 1000
POPUP_CLOSE_DELAY_MS = 1000
BEFORE_OPTIONS_DELAY_MS = 3000
AFTER_VIEW_RESULTS_DELAY_MS = 2000
AFTER_RESULT_DELAY_MS = 3000

# Onboarding / welcome popups
GOT_IT_BUTTON_TEXT = 'Got it!'
CLOSE_SELECTORS = [
    'calcite-action[icon="x"]',
    'button[title="Close"]',
    '.modal-close',
    'span.esri-icon-close',
    'div[role="button"][aria-label="Close"]',
    '.calcite-action',
    'button.close',
    'calcite-modal .close',
]

# Address search
ADDRESS_INPUT = 'input[placeholder="Enter Location"], input[type="text"].esri-input'
ADDRESS_INPUT_KEY_DELAY_MS = 100
SUGGESTION_ITEM = '.esri-search__suggestions-list li, ul[role="listbox"] li'

# Options
RISK_CATEGORY_SELECT = 'select[aria-label*="Risk"]'
ANY_SELECT = 'select'
RISK_CATEGORY = 'II'
WIND_LABEL_TEXT = 'Wind'
WIND_CHECKBOX = 'input[value="Wind"], input[name="Wind"]'

# Results
VIEW_RESULTS_BUTTON_TEXT = 'View Results'
RESULT_MARKER = 'Vmph'
