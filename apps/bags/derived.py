"""
Derived bag and brew fields.

Everything here is a pure function of its arguments (the current time is
passed in or taken once from ``timezone.now()``), so the same inputs always
produce the same output and nothing is written back to the database.

Functions:
    compute_roast_age_days: Whole days since roasting, clamped at 0.
    compute_resting_status: Band a roast age into RESTING / READY / PAST_PEAK.
    average: Mean of non-null values rounded to 2 decimals.
    method_histogram: Brew count per brew method.
    rating_trend: Chronological series of rated brews.
    select_best_brew: Flagged best brew, or the best-rated one as a fallback.
"""

from collections import Counter
from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from typing import Iterable, Optional

from django.db import models
from django.utils import timezone


RESTING_MAX_DAYS = 3
READY_MAX_DAYS = 21


class RestingStatus(models.TextChoices):
    UNKNOWN = 'UNKNOWN', 'Unknown'
    RESTING = 'RESTING', 'Resting'
    READY = 'READY', 'Ready'
    PAST_PEAK = 'PAST_PEAK', 'Past peak'


def compute_roast_age_days(roast_date: Optional[date], now: Optional[datetime] = None) -> Optional[int]:
    """
    Calculate whole days elapsed since the roast date.

    A roast date is taken as midnight UTC of that day. Roast dates in the
    future give 0, never a negative age.

    Args:
        roast_date: Roast date (or datetime), None if unknown
        now: Reference time, defaults to the current time

    Returns:
        Age in whole days, or None when there is no roast date
    """
    if roast_date is None:
        return None

    now = now or timezone.now()
    if isinstance(roast_date, datetime):
        roasted_at = roast_date
        if timezone.is_naive(roasted_at):
            roasted_at = roasted_at.replace(tzinfo=dt_timezone.utc)
    else:
        roasted_at = datetime.combine(roast_date, time.min, tzinfo=dt_timezone.utc)

    elapsed = now - roasted_at
    if elapsed < timedelta(0):
        return 0
    return elapsed // timedelta(days=1)


def compute_resting_status(roast_age_days: Optional[int]) -> RestingStatus:
    """Band a roast age: <=3 RESTING, <=21 READY, older PAST_PEAK."""
    if roast_age_days is None:
        return RestingStatus.UNKNOWN
    if roast_age_days <= RESTING_MAX_DAYS:
        return RestingStatus.RESTING
    if roast_age_days <= READY_MAX_DAYS:
        return RestingStatus.READY
    return RestingStatus.PAST_PEAK


def build_bag_computed_fields(roast_date: Optional[date], now: Optional[datetime] = None) -> dict:
    """Computed fields attached to every bag response."""
    roast_age_days = compute_roast_age_days(roast_date, now=now)
    return {
        'roast_age_days': roast_age_days,
        'resting_status': compute_resting_status(roast_age_days),
    }


def average(values: Iterable[Optional[float]]) -> Optional[float]:
    """
    Arithmetic mean of the non-null values, rounded to 2 decimals.

    Returns None (not 0) when there is nothing to average.

    Example:
        >>> average([3.6, None, 3.4])
        3.5
        >>> average([]) is None
        True
    """
    present = [float(value) for value in values if value is not None]
    if not present:
        return None
    return round(sum(present) / len(present), 2)


def method_histogram(brews: Iterable) -> list:
    """Count brews per method as ``[{'method': ..., 'count': ...}]``."""
    counts = Counter(brew.method for brew in brews)
    return [{'method': method, 'count': count} for method, count in counts.items()]


def rating_trend(brews: Iterable) -> list:
    """
    Chronological rating series for charts.

    Only rated brews appear; ``brew_number`` is the 1-based position among
    rated brews, so unrated brews never consume a number.

    Args:
        brews: Brews in ascending creation order
    """
    rated = [brew for brew in brews if brew.rating is not None]
    return [
        {
            'brew_number': position,
            'rating': brew.rating,
            'created_at': brew.created_at,
        }
        for position, brew in enumerate(rated, start=1)
    ]


def select_best_brew(brews: Iterable):
    """
    Pick the brew to present as best.

    The brew flagged ``is_best`` wins. Otherwise the highest rating wins,
    ties going to the most recently created brew. Returns None when no brew
    is flagged or rated.
    """
    brews = list(brews)
    for brew in brews:
        if brew.is_best:
            return brew

    rated = [brew for brew in brews if brew.rating is not None]
    if not rated:
        return None
    return max(rated, key=lambda brew: (brew.rating, brew.created_at))
