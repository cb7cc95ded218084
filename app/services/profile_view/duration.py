"""
Humanized elapsed-time policies for the "Member for ..." line.

The boundaries of phrases such as "about 1 month" are a presentation
convention, so the policy is pluggable and picked through
MEMBERSHIP_DURATION_STYLE.
"""

import calendar
import math
from datetime import datetime
from typing import Protocol

MINUTES_IN_YEAR = 525600
MINUTES_IN_QUARTER_YEAR = 131400
MINUTES_IN_THREE_QUARTERS_YEAR = 394200


class DurationFormatter(Protocol):
    def format(self, start: datetime, end: datetime) -> str: ...


def _round(value: float) -> int:
    """Round halves up, unlike the built-in round()."""
    return math.floor(value + 0.5)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


class RailsDistanceFormatter:
    """Same boundaries as Rails' distance_of_time_in_words (without seconds)."""

    def format(self, start: datetime, end: datetime) -> str:
        if start > end:
            start, end = end, start

        seconds = (end - start).total_seconds()
        minutes = _round(seconds / 60)

        if minutes <= 1:
            return "less than a minute" if minutes == 0 else "1 minute"
        if minutes < 45:
            return _plural(minutes, "minute")
        if minutes < 90:
            return "about 1 hour"
        if minutes < 1440:
            return f"about {_plural(_round(minutes / 60), 'hour')}"
        if minutes < 2520:
            return "1 day"
        if minutes < 43200:
            return _plural(_round(minutes / 1440), "day")
        if minutes < 86400:
            return f"about {_plural(_round(minutes / 43200), 'month')}"
        if minutes < MINUTES_IN_YEAR:
            return _plural(_round(minutes / 43200), "month")

        return self._years(start, end, minutes)

    @staticmethod
    def _years(start: datetime, end: datetime, minutes: int) -> str:
        # Leap days inside the range would otherwise push the remainder past the thresholds
        from_year = start.year + 1 if start.month >= 3 else start.year
        to_year = end.year - 1 if end.month < 3 else end.year
        leap_years = 0
        if from_year <= to_year:
            leap_years = sum(1 for year in range(from_year, to_year + 1) if calendar.isleap(year))

        minutes_with_offset = minutes - leap_years * 1440
        years, remainder = divmod(minutes_with_offset, MINUTES_IN_YEAR)

        if remainder < MINUTES_IN_QUARTER_YEAR:
            return f"about {_plural(years, 'year')}"
        if remainder < MINUTES_IN_THREE_QUARTERS_YEAR:
            return f"over {_plural(years, 'year')}"
        return f"almost {_plural(years + 1, 'year')}"


class CoarseDistanceFormatter:
    """Whole days, then whole months (30 days), then whole years (365 days)."""

    def format(self, start: datetime, end: datetime) -> str:
        days = abs((end - start).days)
        if days < 1:
            return "less than a day"
        if days < 30:
            return _plural(days, "day")
        if days < 365:
            return _plural(days // 30, "month")
        return _plural(days // 365, "year")


FORMATTERS: dict[str, type] = {
    "rails": RailsDistanceFormatter,
    "coarse": CoarseDistanceFormatter,
}


def get_duration_formatter(style: str) -> DurationFormatter:
    try:
        return FORMATTERS[style]()
    except KeyError:
        raise ValueError(f"Unknown membership duration style: {style}") from None
