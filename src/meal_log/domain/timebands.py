"""Date, time and time-band helpers for logged meals."""

import re
from datetime import datetime

MORNING = "morning"
MIDDAY = "midday"
EVENING = "evening"
SNACK = "snack"

MORNING_END_HOUR = 10
MIDDAY_END_HOUR = 15
EVENING_END_HOUR = 20

_HHMM_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)


def today_str(now: datetime | None = None) -> str:
    """Return the local date as YYYY-MM-DD."""
    current = now or datetime.now()
    return current.strftime("%Y-%m-%d")


def now_hhmm(now: datetime | None = None) -> str:
    """Return the local time as zero-padded HH:MM."""
    current = now or datetime.now()
    return current.strftime("%H:%M")


def is_valid_hhmm(value: str) -> bool:
    """Return True when value is exactly two digits, a colon and two digits."""
    return _HHMM_PATTERN.fullmatch(value) is not None


def assign_band(time_hhmm: str) -> str:
    """Map an HH:MM time to its band by hour; an unreadable hour counts as 0."""
    hour_text = time_hhmm.split(":", 1)[0].strip()
    hour = int(hour_text) if hour_text.isdigit() else 0
    if hour < MORNING_END_HOUR:
        return MORNING
    if hour < MIDDAY_END_HOUR:
        return MIDDAY
    if hour < EVENING_END_HOUR:
        return EVENING
    return SNACK
