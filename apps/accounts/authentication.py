"""
Request identity resolution.

Tokens are issued by an external identity provider; this service only
verifies them. Every request ends up with exactly one RequestIdentity:

1. A valid bearer token -> the user id from the token's user-id claim
2. No or invalid token while BREWLOG_AUTH_REQUIRED is on -> 401
3. ``X-Dev-User-Id`` header while BREWLOG_ALLOW_DEV_USER_HEADER is on -> that id
4. Otherwise -> the guest identity (BREWLOG_GUEST_USER_ID)

Views read ``request.user.user_id`` and pass it to services explicitly.
"""

import logging
import uuid

from django.conf import settings
from rest_framework import exceptions
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt import settings as jwt_settings

logger = logging.getLogger(__name__)


DEV_USER_HEADER = 'HTTP_X_DEV_USER_ID'


class RequestIdentity:
    """Who is making the request. Not backed by a database row."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, user_id, is_guest=False):
        self.user_id = user_id
        self.is_guest = is_guest

    def __eq__(self, other):
        if not isinstance(other, RequestIdentity):
            return NotImplemented
        return self.user_id == other.user_id and self.is_guest == other.is_guest

    def __hash__(self):
        return hash((self.user_id, self.is_guest))

    def __str__(self):
        return f"guest:{self.user_id}" if self.is_guest else str(self.user_id)

    def __repr__(self):
        return f"RequestIdentity(user_id={self.user_id!r}, is_guest={self.is_guest!r})"


def _parse_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class GuestFallbackAuthentication(JWTStatelessUserAuthentication):
    """
    Bearer token authentication that falls back to a guest identity.

    The fallback is disabled by ``BREWLOG_AUTH_REQUIRED``; with it on, any
    request without a valid token is rejected with 401.
    """

    def authenticate(self, request):
        auth_required = settings.BREWLOG_AUTH_REQUIRED

        try:
            result = super().authenticate(request)
        except exceptions.AuthenticationFailed as e:
            if auth_required:
                raise exceptions.AuthenticationFailed('Invalid or expired token') from e
            logger.warning("Ignoring invalid bearer token, falling back to guest identity")
            result = None

        if result is not None:
            return result

        if auth_required:
            raise exceptions.NotAuthenticated('Authentication required')

        dev_identity = self.get_dev_identity(request)
        if dev_identity is not None:
            return dev_identity, None

        return self.get_guest_identity(), None

    def get_user(self, validated_token):
        """Build the identity from the token's user-id claim."""
        user_id = _parse_uuid(validated_token.get(jwt_settings.api_settings.USER_ID_CLAIM))
        if user_id is None:
            raise InvalidToken('Token contained no recognizable user identification')
        return RequestIdentity(user_id)

    def get_dev_identity(self, request):
        if not settings.BREWLOG_ALLOW_DEV_USER_HEADER:
            return None
        raw = request.META.get(DEV_USER_HEADER)
        if not raw:
            return None
        user_id = _parse_uuid(raw.strip())
        if user_id is None:
            logger.warning("Ignoring malformed X-Dev-User-Id header %r", raw)
            return None
        return RequestIdentity(user_id)

    def get_guest_identity(self):
        return RequestIdentity(uuid.UUID(str(settings.BREWLOG_GUEST_USER_ID)), is_guest=True)
