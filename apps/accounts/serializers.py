import re

from rest_framework import serializers
from .models import UserProfile


USERNAME_PATTERN = re.compile(r'^[a-z0-9_]{3,30}$')
USERNAME_MESSAGE = 'must be 3-30 characters of a-z, 0-9 or _'


class UserProfileSerializer(serializers.ModelSerializer):
    """Profile shown at /me/profile."""

    userId = serializers.UUIDField(source='user_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = UserProfile
        fields = ['userId', 'username', 'createdAt', 'updatedAt']
        read_only_fields = fields


class UsernameUpdateSerializer(serializers.Serializer):
    """Validate a username change. Input is trimmed and lowercased."""

    username = serializers.CharField(
        error_messages={
            'required': 'is required',
            'blank': 'is required',
            'null': 'is required',
        },
    )

    def validate_username(self, value):
        username = value.strip().lower()
        if not USERNAME_PATTERN.match(username):
            raise serializers.ValidationError(USERNAME_MESSAGE)
        return username
