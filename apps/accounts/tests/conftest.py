import uuid

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.models import UserProfile


def make_token(user_id, claim='user_id'):
    """Mint an access token the way the identity provider would."""
    token = AccessToken()
    token[claim] = str(user_id)
    return str(token)


@pytest.fixture
def api_client():
    """Return an API client without credentials (guest identity)."""
    return APIClient()


@pytest.fixture
def user_id():
    return uuid.UUID('55555555-5555-5555-5555-555555555555')


@pytest.fixture
def other_user_id():
    return uuid.UUID('66666666-6666-6666-6666-666666666666')


@pytest.fixture
def authenticated_client(user_id):
    """Return an API client carrying a bearer token for user_id."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {make_token(user_id)}')
    return client


@pytest.fixture
def profile(db, user_id):
    """Profile of the authenticated user."""
    return UserProfile.objects.create(user_id=user_id, username='morning_pour')


@pytest.fixture
def other_profile(db, other_user_id):
    """Profile of another user."""
    return UserProfile.objects.create(user_id=other_user_id, username='espresso_bob')
