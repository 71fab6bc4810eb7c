"""
Custom permission classes for accounts app.

Permission Classes:
    HasRequestIdentity - Requires a resolved RequestIdentity (default for every view)

Usage:
    REST_FRAMEWORK = {
        'DEFAULT_PERMISSION_CLASSES': [
            'apps.accounts.permissions.HasRequestIdentity',
        ],
    }
"""

from rest_framework.permissions import BasePermission
from .authentication import RequestIdentity


class HasRequestIdentity(BasePermission):
    """
    Allow the request once authentication has resolved an identity.

    Guest identities pass. With authentication classes disabled on a view
    (health check, schema) ``request.user`` is None and access is denied,
    so such views also set their own permission classes.
    """

    message = 'Authentication required'

    def has_permission(self, request, view):
        return isinstance(request.user, RequestIdentity)
