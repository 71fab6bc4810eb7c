"""Brew statistics service - grouped aggregates for bag listings."""

from django.db.models import Avg, Count
from typing import Iterable
from uuid import UUID

from apps.bags.models import Brew


def get_brew_stats_by_bag(*, bag_ids: Iterable[UUID]) -> dict:
    """
    Brew count and average rating for many bags in one grouped query.

    Listing N bags would otherwise cost N extra queries.

    Args:
        bag_ids: Bag UUIDs to aggregate

    Returns:
        Dict keyed by bag id with ``{'brew_count': int, 'average_rating': float | None}``.
        Bags without brews are absent from the result.

    Example:
        >>> stats = get_brew_stats_by_bag(bag_ids=[bag.id])
        >>> stats[bag.id]
        {'brew_count': 2, 'average_rating': 3.5}
    """
    bag_ids = list(bag_ids)
    if not bag_ids:
        return {}

    rows = (
        Brew.objects
        .filter(bag_id__in=bag_ids)
        .order_by()
        .values('bag_id')
        .annotate(brew_count=Count('id'), average_rating=Avg('rating'))
    )

    return {
        row['bag_id']: {
            'brew_count': row['brew_count'],
            'average_rating': (
                round(float(row['average_rating']), 2)
                if row['average_rating'] is not None else None
            ),
        }
        for row in rows
    }
