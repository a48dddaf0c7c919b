#!/usr/bin/env python3
"""
Forecast utilities for the weather tools.
Collapses the provider's 3-hour series into one sample per day.
"""

from dateutil import parser as dateparser

from utils.payload import require_number, require_text
from utils.results import ForecastSample


def date_stamp(dt_txt):
    """'2024-01-01 12:00:00' -> '2024-01-01'"""
    return dt_txt.split(" ")[0]


def sort_chronologically(items):
    """Stable sort of raw forecast items by their parsed ``dt_txt``."""
    return sorted(items, key=lambda item: dateparser.parse(require_text(item, "dt_txt")))


def dedupe_days(items, limit=3, to_sample=None):
    """
    Keep the first item seen for each date, up to ``limit`` distinct dates.

    ``items`` must already be in chronological order (the provider emits
    them that way); the kept item is the first one encountered, not the
    earliest by time of day. ``to_sample`` converts a kept raw item; it is
    only called for items that are kept.
    """
    seen = set()
    kept = []
    for item in items:
        day = date_stamp(require_text(item, "dt_txt"))
        if len(kept) < limit and day not in seen:
            seen.add(day)
            kept.append(to_sample(item, day) if to_sample else item)
    return tuple(kept)


def forecast_sample(item, day):
    """Build a ForecastSample from one entry of the provider's ``list``."""
    return ForecastSample(
        date_stamp=day,
        description=require_text(item, "weather", 0, "description"),
        temperature=require_number(item, "main", "temp"),
    )
