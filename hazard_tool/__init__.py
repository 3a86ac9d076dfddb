"""
ASCE Hazard Tool scraping.

Submodules:
- config: Page URL, selectors, timeouts
- locators: Element and text locator strategies
- pipeline: Ordered phase runner
- scraper: Browser lookup sequence
- parser: Wind speed parsing
- models: Result types
"""

from hazard_tool.scraper import lookup_wind_speed

__all__ = ['lookup_wind_speed']
