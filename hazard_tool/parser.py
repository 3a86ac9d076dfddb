"""Parse the wind speed value out of the Hazard Tool result text."""

import re

NUMBER_PATTERN = re.compile(r'\d+')


def parse_wind_speed(raw_value: str) -> int:
    """
    Parse the first integer in the result text.

    The Hazard Tool renders the design value as e.g. "Vmph = 115" or
    "115 Vmph". Only the first run of digits is used, so "115.5" parses
    as 115.

    Args:
        raw_value: Text fragment containing the Vmph marker

    Returns:
        Wind speed in mph

    Raises:
        ValueError: If the text contains no digits
    """
    match = NUMBER_PATTERN.search(raw_value or '')
    if not match:
        raise ValueError(f"No numeric wind speed in result text: {raw_value!r}")
    return int(match.group(0))
