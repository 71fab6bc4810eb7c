from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.bags.serializers import ErrorSerializer, ValidationErrorSerializer
from apps.bags.services.exceptions import BagNotFoundError
from .analytics import BrewAnalytics
from .serializers import (
    # Input serializers
    FeedQuerySerializer,
    # Response serializers
    AnalyticsResponseSerializer,
    FeedItemSerializer,
)


@extend_schema(
    responses={
        200: AnalyticsResponseSerializer,
        404: ErrorSerializer,
    },
    description="Aggregates for one bag: averages, taste profile, method mix, rating trend and best brew.",
    tags=['analytics'],
)
@api_view(['GET'])
def bag_analytics(request, bag_id):
    """Get bag analytics - thin HTTP handler."""
    try:
        data = BrewAnalytics.bag_analytics(bag_id=bag_id, owner_id=request.user.user_id)
    except BagNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(AnalyticsResponseSerializer(data).data)


@extend_schema(
    parameters=[
        OpenApiParameter('limit', OpenApiTypes.INT, description='Number of brews (1-200)', default=50),
    ],
    responses={
        200: FeedItemSerializer(many=True),
        400: ValidationErrorSerializer,
    },
    description="Most recent brews across all users, newest first.",
    tags=['analytics'],
)
@api_view(['GET'])
def brew_feed(request):
    """Get the public brew feed - thin HTTP handler."""
    # Validate query parameters using input serializer
    query_serializer = FeedQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    rows = BrewAnalytics.get_brew_feed(limit=params['limit'])

    return Response(FeedItemSerializer(rows, many=True).data)
