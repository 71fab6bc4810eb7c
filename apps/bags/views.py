from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import (
    # Input serializers
    BagCreateSerializer,
    BagUpdateSerializer,
    BagStatusQuerySerializer,
    BrewCreateSerializer,
    # Response serializers
    BagDetailSerializer,
    BagListItemSerializer,
    BrewSerializer,
    ErrorSerializer,
    ValidationErrorSerializer,
)
from .services import (
    create_bag,
    list_bags,
    get_owned_bag,
    update_bag,
    archive_bag,
    unarchive_bag,
    create_brew,
    list_brews,
    mark_best_brew,
)
from .services.exceptions import BagNotFoundError, BrewNotFoundError


def _not_found(error):
    return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)


# =============================================================================
# Bags
# =============================================================================

@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('status', OpenApiTypes.STR, description='ACTIVE or ARCHIVED', default='ACTIVE'),
    ],
    responses={200: BagListItemSerializer(many=True), 400: ValidationErrorSerializer},
    description="List the current user's bags with brew count and average rating.",
    tags=['bags'],
)
@extend_schema(
    methods=['POST'],
    request=BagCreateSerializer,
    responses={201: BagDetailSerializer, 400: ValidationErrorSerializer},
    description="Add a bag to the current user's inventory.",
    tags=['bags'],
)
@api_view(['GET', 'POST'])
def bag_collection(request):
    """List or create bags - thin HTTP handler."""
    owner_id = request.user.user_id

    if request.method == 'POST':
        serializer = BagCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        bag = create_bag(owner_id=owner_id, **serializer.validated_data)
        return Response(BagDetailSerializer(bag).data, status=status.HTTP_201_CREATED)

    query_serializer = BagStatusQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    bags = list_bags(owner_id=owner_id, status=query_serializer.validated_data['status'])
    return Response(BagListItemSerializer(bags, many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: BagDetailSerializer, 404: ErrorSerializer},
    description="Get one of the current user's bags.",
    tags=['bags'],
)
@extend_schema(
    methods=['PATCH'],
    request=BagUpdateSerializer,
    responses={200: BagDetailSerializer, 400: ValidationErrorSerializer, 404: ErrorSerializer},
    description="Edit bag metadata. Only fields present in the body change.",
    tags=['bags'],
)
@api_view(['GET', 'PATCH'])
def bag_detail(request, bag_id):
    """Get or edit a bag - thin HTTP handler."""
    owner_id = request.user.user_id

    # Unknown or foreign bags are 404 before the body is looked at
    try:
        bag = get_owned_bag(bag_id=bag_id, owner_id=owner_id)
    except BagNotFoundError as e:
        return _not_found(e)

    if request.method == 'PATCH':
        serializer = BagUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            bag = update_bag(bag_id=bag.id, owner_id=owner_id, data=serializer.validated_data)
        except BagNotFoundError as e:
            return _not_found(e)

    return Response(BagDetailSerializer(bag).data)


@extend_schema(
    request=None,
    responses={200: BagDetailSerializer, 404: ErrorSerializer},
    description="Archive a bag (removes it from the active list).",
    tags=['bags'],
)
@api_view(['PATCH'])
def bag_archive(request, bag_id):
    """Archive a bag - thin HTTP handler."""
    try:
        bag = archive_bag(bag_id=bag_id, owner_id=request.user.user_id)
    except BagNotFoundError as e:
        return _not_found(e)
    return Response(BagDetailSerializer(bag).data)


@extend_schema(
    request=None,
    responses={200: BagDetailSerializer, 404: ErrorSerializer},
    description="Move an archived bag back to the active list.",
    tags=['bags'],
)
@api_view(['PATCH'])
def bag_unarchive(request, bag_id):
    """Unarchive a bag - thin HTTP handler."""
    try:
        bag = unarchive_bag(bag_id=bag_id, owner_id=request.user.user_id)
    except BagNotFoundError as e:
        return _not_found(e)
    return Response(BagDetailSerializer(bag).data)


# =============================================================================
# Brews
# =============================================================================

@extend_schema(
    methods=['GET'],
    responses={200: BrewSerializer(many=True), 404: ErrorSerializer},
    description="Brew history of a bag, newest first.",
    tags=['brews'],
)
@extend_schema(
    methods=['POST'],
    request=BrewCreateSerializer,
    responses={201: BrewSerializer, 400: ValidationErrorSerializer, 404: ErrorSerializer},
    description="Log a brew against a bag.",
    tags=['brews'],
)
@api_view(['GET', 'POST'])
def brew_collection(request, bag_id):
    """List or log brews of a bag - thin HTTP handler."""
    owner_id = request.user.user_id

    if request.method == 'POST':
        try:
            bag = get_owned_bag(bag_id=bag_id, owner_id=owner_id)
        except BagNotFoundError as e:
            return _not_found(e)

        serializer = BrewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            brew = create_brew(bag_id=bag.id, owner_id=owner_id, **serializer.validated_data)
        except BagNotFoundError as e:
            return _not_found(e)
        return Response(BrewSerializer(brew).data, status=status.HTTP_201_CREATED)

    try:
        brews = list_brews(bag_id=bag_id, owner_id=owner_id, newest_first=True)
    except BagNotFoundError as e:
        return _not_found(e)
    return Response(BrewSerializer(brews, many=True).data)


@extend_schema(
    request=None,
    responses={200: BrewSerializer, 404: ErrorSerializer},
    description="Mark a brew as the single best brew of its bag.",
    tags=['brews'],
)
@api_view(['PATCH'])
def brew_mark_best(request, bag_id, brew_id):
    """Mark best brew - thin HTTP handler."""
    try:
        brew = mark_best_brew(bag_id=bag_id, owner_id=request.user.user_id, brew_id=brew_id)
    except (BagNotFoundError, BrewNotFoundError) as e:
        return _not_found(e)
    return Response(BrewSerializer(brew).data)
