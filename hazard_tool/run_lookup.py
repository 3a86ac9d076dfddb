#!/usr/bin/env python3
"""CLI script for a one-off wind speed lookup.

Usage:
    # Print the wind speed for an address
    PYTHONPATH=$(pwd) python hazard_tool/run_lookup.py "411 Crusaders Dr, Sanford, NC"

    # Print the full JSON response (without screenshot data)
    PYTHONPATH=$(pwd) python hazard_tool/run_lookup.py "411 Crusaders Dr, Sanford, NC" --json

    # Save screenshots for debugging selector problems
    PYTHONPATH=$(pwd) python hazard_tool/run_lookup.py "411 Crusaders Dr, Sanford, NC" --save-screenshots ./data/screenshots

    # Watch the browser
    PYTHONPATH=$(pwd) python hazard_tool/run_lookup.py "411 Crusaders Dr, Sanford, NC" --headed
"""

import argparse
import base64
import json
import logging
import sys
from pathlib import Path

from hazard_tool.scraper import lookup_wind_speed
from common.logger import configure_service_logging

logger = logging.getLogger('hazard_tool.run_lookup')


def save_screenshots(result, output_dir: str) -> int:
    """Write result screenshots as PNG files. Returns number written."""
    path = Path(output_dir)
    path.mkdir(parents=True, exist_ok=True)

    for screenshot in result.screenshots:
        screenshot_file = path / f"{screenshot.name}.png"
        screenshot_file.write_bytes(base64.b64decode(screenshot.data))
        logger.info(f"  Saved screenshot: {screenshot_file}")

    return len(result.screenshots)


def main(argv=None):
    parser = argparse.ArgumentParser(description='ASCE Hazard Tool wind speed lookup')

    parser.add_argument('address', help='Address to look up')
    parser.add_argument('--json', action='store_true', help='Print the full JSON response')
    parser.add_argument('--no-screenshots', action='store_true', help='Skip checkpoint screenshots')
    parser.add_argument('--save-screenshots', metavar='DIR', help='Write screenshots to DIR as PNG files')
    parser.add_argument('--headed', action='store_true', help='Show the browser window')

    args = parser.parse_args(argv)
    configure_service_logging()

    result = lookup_wind_speed(
        args.address,
        capture_screenshots=not args.no_screenshots,
        headless=False if args.headed else None,
    )

    if args.save_screenshots:
        save_screenshots(result, args.save_screenshots)

    if args.json:
        data = result.to_dict()
        data['screenshots'] = [s['name'] for s in data['screenshots']]
        print(json.dumps(data, indent=2))
    elif result.success:
        print(f"{result.wind_speed} mph ({result.raw_value})")
    else:
        print(f"Lookup failed: {result.error}", file=sys.stderr)

    return 0 if result.success else 1


if __name__ == '__main__':
    sys.exit(main())
