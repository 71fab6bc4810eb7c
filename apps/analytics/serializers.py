"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - camelCase output and API documentation

Input Serializers:
    FeedQuerySerializer - Validates the feed page size

Response Serializers:
    AnalyticsResponseSerializer - Bag analytics
    FeedItemSerializer - One brew in the public feed
"""

from rest_framework import serializers

from apps.bags.serializers import BrewSerializer
from .analytics import FEED_DEFAULT_LIMIT, FEED_MAX_LIMIT


LIMIT_MESSAGE = f'must be an integer between 1 and {FEED_MAX_LIMIT}'


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class FeedQuerySerializer(serializers.Serializer):
    """
    Validate feed query parameters.

    Query Parameters:
        limit (int): Number of brews, 1-200 (default: 50)
    """

    limit = serializers.IntegerField(
        required=False,
        default=FEED_DEFAULT_LIMIT,
        min_value=1,
        max_value=FEED_MAX_LIMIT,
        error_messages={
            'invalid': LIMIT_MESSAGE,
            'min_value': LIMIT_MESSAGE,
            'max_value': LIMIT_MESSAGE,
            'max_string_length': LIMIT_MESSAGE,
        },
        help_text='Number of brews to return',
    )


# =============================================================================
# Response Serializers
# =============================================================================

class TasteProfileSerializer(serializers.Serializer):
    """Average of each taste score over a bag's brews."""
    nutty = serializers.FloatField(allow_null=True)
    acidity = serializers.FloatField(allow_null=True)
    fruity = serializers.FloatField(allow_null=True)
    floral = serializers.FloatField(allow_null=True)
    sweetness = serializers.FloatField(allow_null=True)
    chocolate = serializers.FloatField(allow_null=True)


class BrewMethodCountSerializer(serializers.Serializer):
    method = serializers.CharField()
    count = serializers.IntegerField()


class RatingTrendPointSerializer(serializers.Serializer):
    brewNumber = serializers.IntegerField(source='brew_number')
    rating = serializers.FloatField()
    createdAt = serializers.DateTimeField(source='created_at')


class AnalyticsResponseSerializer(serializers.Serializer):
    """Bag analytics response."""
    bagId = serializers.UUIDField(source='bag_id')
    roastAgeDays = serializers.IntegerField(source='roast_age_days', allow_null=True)
    restingStatus = serializers.CharField(source='resting_status')
    totalBrews = serializers.IntegerField(source='total_brews')
    averageRating = serializers.FloatField(source='average_rating', allow_null=True)
    averageTasteProfile = TasteProfileSerializer(source='average_taste_profile')
    brewMethods = BrewMethodCountSerializer(source='brew_methods', many=True)
    ratingTrend = RatingTrendPointSerializer(source='rating_trend', many=True)
    bestBrew = BrewSerializer(source='best_brew', allow_null=True)


class FeedItemSerializer(serializers.Serializer):
    """One brew in the public feed."""
    brewId = serializers.UUIDField(source='brew_id')
    bagId = serializers.UUIDField(source='bag_id')
    userId = serializers.UUIDField(source='user_id')
    username = serializers.CharField(allow_null=True)
    coffeeName = serializers.CharField(source='coffee_name')
    roaster = serializers.CharField()
    method = serializers.CharField()
    brewer = serializers.CharField(allow_null=True)
    grinder = serializers.CharField(allow_null=True)
    dose = serializers.IntegerField(allow_null=True)
    grindSetting = serializers.IntegerField(source='grind_setting', allow_null=True)
    waterAmount = serializers.IntegerField(source='water_amount', allow_null=True)
    rating = serializers.FloatField(allow_null=True)
    flavourNotes = serializers.CharField(source='flavour_notes', allow_null=True)
    isBest = serializers.BooleanField(source='is_best')
    createdAt = serializers.DateTimeField(source='created_at')
