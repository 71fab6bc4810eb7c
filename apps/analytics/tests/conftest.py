import uuid
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.models import UserProfile
from apps.bags.models import Bag, Brew


@pytest.fixture
def api_client():
    """Return an API client without credentials (guest identity)."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_user_id():
    return uuid.UUID('33333333-3333-3333-3333-333333333333')


@pytest.fixture
def feed_user_id():
    return uuid.UUID('44444444-4444-4444-4444-444444444444')


@pytest.fixture
def analytics_user_client(analytics_user_id):
    """Return API client authenticated as the analytics user."""
    token = AccessToken()
    token['user_id'] = str(analytics_user_id)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def analytics_profile(db, analytics_user_id):
    return UserProfile.objects.create(user_id=analytics_user_id, username='analytics_fan')


# =============================================================================
# Bags & Brews
# =============================================================================

@pytest.fixture
def analytics_bag(db, analytics_user_id):
    """Bag roasted ten days ago."""
    return Bag.objects.create(
        user_id=analytics_user_id,
        coffee_name='Huila Supremo',
        roaster='Father\'s Coffee',
        roast_date=timezone.now().date() - timedelta(days=10),
    )


@pytest.fixture
def analytics_brews(analytics_bag):
    """Two brews rated 3.6 and 3.4, oldest first."""
    return [
        Brew.objects.create(bag=analytics_bag, method='V60', rating=3.6, nutty=2, chocolate=4),
        Brew.objects.create(bag=analytics_bag, method='V60', rating=3.4, nutty=4, chocolate=3),
    ]


@pytest.fixture
def feed_bag(db, feed_user_id):
    """Bag of a user without a profile."""
    return Bag.objects.create(
        user_id=feed_user_id,
        coffee_name='Kenya AA',
        roaster='Nordbeans',
    )
