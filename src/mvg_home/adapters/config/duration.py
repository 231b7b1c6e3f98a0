"""Parsing of human readable durations such as ``"5m"`` or ``"1h 30min"``."""

import re
from datetime import timedelta

_UNITS = {
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
}

_COMPONENT = re.compile(r"(\d+)\s*([a-z]+)")


def parse_duration(value: str) -> timedelta:
    """Parse a duration made of ``<number><unit>`` components.

    Args:
        value: Duration text, e.g. ``"5m"``, ``"1h 5min"``, ``"90s"``.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If the text is not a valid duration.
    """
    text = value.strip().lower()
    if not text:
        raise ValueError("Duration must not be empty")

    seconds = 0
    position = 0
    for match in _COMPONENT.finditer(text):
        if text[position : match.start()].strip():
            raise ValueError(f"Invalid duration: {value!r}")
        number, unit = match.groups()
        if unit not in _UNITS:
            raise ValueError(f"Unknown time unit {unit!r} in duration {value!r}")
        seconds += int(number) * _UNITS[unit]
        position = match.end()

    if position == 0 or text[position:].strip():
        raise ValueError(f"Invalid duration: {value!r}")
    return timedelta(seconds=seconds)
