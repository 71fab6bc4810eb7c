from rest_framework import status, serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import UserProfileSerializer, UsernameUpdateSerializer
from .services import (
    get_profile,
    set_username,
    ProfileNotFoundError,
    UsernameTakenError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={
        200: UserProfileSerializer,
        404: ErrorResponseSerializer,
    },
    description="Get the current user's public profile.",
    tags=['profile'],
)
@extend_schema(
    methods=['PATCH'],
    request=UsernameUpdateSerializer,
    responses={200: UserProfileSerializer},
    description="Choose or change the username shown in the brew feed.",
    tags=['profile'],
)
@api_view(['GET', 'PATCH'])
def me_profile(request):
    """Get or update the current user's profile."""
    user_id = request.user.user_id

    if request.method == 'PATCH':
        serializer = UsernameUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            profile = set_username(
                user_id=user_id,
                username=serializer.validated_data['username'],
            )
        except UsernameTakenError as e:
            raise serializers.ValidationError({'username': [str(e)]})
        return Response(UserProfileSerializer(profile).data)

    try:
        profile = get_profile(user_id=user_id)
    except ProfileNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(UserProfileSerializer(profile).data)
