"""
Analytics Module
=================

Read-only queries behind the bag analytics screen and the public brew feed.

Classes:
    BrewAnalytics: Static methods for analytics queries.

Key Features:
    - Per-bag aggregates (average rating, taste profile, method mix)
    - Rating trend series for charts
    - Best brew selection for display
    - Cross-user brew feed, newest first

Example:
    Getting bag statistics::

        from apps.analytics.analytics import BrewAnalytics

        stats = BrewAnalytics.bag_analytics(bag_id=bag.id, owner_id=user_id)
        print(f"{stats['total_brews']} brews, average {stats['average_rating']}")

Note:
    This module is read-only and doesn't modify any data. Derived values come
    from apps.bags.derived, so the analytics screen and the bag endpoints
    always agree on roast age, resting status and averages.
"""

from django.db.models import F, OuterRef, Subquery
from django.utils import timezone

from apps.accounts.models import UserProfile
from apps.bags.derived import (
    average,
    build_bag_computed_fields,
    method_histogram,
    rating_trend,
    select_best_brew,
)
from apps.bags.models import Brew
from apps.bags.services.bag_management import get_owned_bag
from apps.bags.services.brew_management import list_brews


FEED_DEFAULT_LIMIT = 50
FEED_MAX_LIMIT = 200


class BrewAnalytics:
    """
    Queries for analytics endpoints.

    Methods:
        bag_analytics: Aggregates for one owned bag.
        get_brew_feed: Most recent brews across all users.

    Note:
        All methods return plain dictionaries or lists. The best brew in
        ``bag_analytics`` is the one exception and stays a Brew instance so
        the response serializer can render it like any other brew.
    """

    @staticmethod
    def bag_analytics(*, bag_id, owner_id, now=None):
        """
        Compute analytics for one of the user's bags.

        All aggregates come from a single chronological read of the bag's
        brews; nothing is cached or written back.

        Args:
            bag_id (UUID): Bag to analyse.
            owner_id (UUID): Requesting user; the bag must belong to them.
            now (datetime, optional): Reference time for roast age.

        Returns:
            dict: A dictionary containing:
                - bag_id (UUID)
                - roast_age_days (int | None)
                - resting_status (str): RESTING / READY / PAST_PEAK / UNKNOWN
                - total_brews (int)
                - average_rating (float | None): Mean of rated brews, 2 dp.
                - average_taste_profile (dict): Mean per taste field, 2 dp.
                - brew_methods (list): ``[{'method', 'count'}]``
                - rating_trend (list): ``[{'brew_number', 'rating', 'created_at'}]``
                - best_brew (Brew | None): Flagged brew, else best rated.

        Raises:
            BagNotFoundError: If no bag with that id belongs to the user.

        Example:
            Two brews rated 3.6 and 3.4::

                stats = BrewAnalytics.bag_analytics(bag_id=bag.id, owner_id=user_id)
                assert stats['average_rating'] == 3.5
                assert stats['total_brews'] == 2
        """
        bag = get_owned_bag(bag_id=bag_id, owner_id=owner_id)
        brews = list(list_brews(bag_id=bag.id, owner_id=owner_id, newest_first=False))
        computed = build_bag_computed_fields(bag.roast_date, now=now or timezone.now())

        return {
            'bag_id': bag.id,
            'roast_age_days': computed['roast_age_days'],
            'resting_status': computed['resting_status'],
            'total_brews': len(brews),
            'average_rating': average(brew.rating for brew in brews),
            'average_taste_profile': {
                field: average(getattr(brew, field) for brew in brews)
                for field in Brew.TASTE_FIELDS
            },
            'brew_methods': method_histogram(brews),
            'rating_trend': rating_trend(brews),
            'best_brew': select_best_brew(brews),
        }

    @staticmethod
    def get_brew_feed(*, limit=FEED_DEFAULT_LIMIT):
        """
        Most recent brews across every user, newest first.

        Each row joins in the bag's coffee name and roaster, and the owner's
        username when they have set up a profile.

        Args:
            limit (int): Maximum rows (1-200, validated by the caller).

        Returns:
            list: Dicts with brew_id, bag_id, user_id, username, coffee_name,
            roaster, method, brewer, grinder, dose, grind_setting,
            water_amount, rating, flavour_notes, is_best and created_at.
        """
        username = UserProfile.objects.filter(
            user_id=OuterRef('bag__user_id')
        ).values('username')[:1]

        rows = (
            Brew.objects
            .annotate(
                brew_id=F('id'),
                user_id=F('bag__user_id'),
                coffee_name=F('bag__coffee_name'),
                roaster=F('bag__roaster'),
                username=Subquery(username),
            )
            .order_by('-created_at', '-id')
            .values(
                'brew_id',
                'bag_id',
                'user_id',
                'username',
                'coffee_name',
                'roaster',
                'method',
                'brewer',
                'grinder',
                'dose',
                'grind_setting',
                'water_amount',
                'rating',
                'flavour_notes',
                'is_best',
                'created_at',
            )[:limit]
        )
        return list(rows)
