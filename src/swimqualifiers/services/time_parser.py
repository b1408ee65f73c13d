"""Utilities for reading swim times from spreadsheet cells."""

import math
import re
from datetime import time, timedelta

# Matches H:MM:SS.cc, M:SS.cc or SS.cc (fraction optional)
TIME_PATTERN_HOURS = re.compile(r"^(\d+):(\d{1,2}):(\d{1,2}(?:\.\d+)?)$")
TIME_PATTERN_MINUTES = re.compile(r"^(\d+):(\d{1,2}(?:\.\d+)?)$")
TIME_PATTERN_SECONDS = re.compile(r"^\d+(?:\.\d+)?$")

# Cell markers that mean "no time"
NO_TIME_MARKERS = {"", "nan", "nt", "ns", "dq", "dnf", "dns", "scr", "-"}


def parse_time_to_seconds(value: object) -> float | None:
    """Convert a spreadsheet cell to a time in seconds.

    Supports:
    - numbers, taken as seconds (65.79)
    - ``datetime.time`` and ``datetime.timedelta`` from time-formatted cells
    - strings "59.45", "1:05.79", "1:02:03.45" (comma decimals accepted)

    Returns:
        Seconds, or None for blanks, "NT"/"DQ" style markers and
        anything that cannot be read as a time
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int | float):
        seconds = float(value)
        return None if math.isnan(seconds) else seconds

    if isinstance(value, timedelta):
        return value.total_seconds()

    if isinstance(value, time):
        return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000

    text = str(value).strip().replace(",", ".")
    if text.lower() in NO_TIME_MARKERS:
        return None

    match = TIME_PATTERN_HOURS.match(text)
    if match:
        hours, minutes, seconds = match.groups()
        return int(hours) * 3600 + int(minutes) * 60 + float(seconds)

    match = TIME_PATTERN_MINUTES.match(text)
    if match:
        minutes, seconds = match.groups()
        return int(minutes) * 60 + float(seconds)

    if TIME_PATTERN_SECONDS.match(text):
        return float(text)

    return None
