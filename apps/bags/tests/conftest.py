import uuid
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.bags.models import Bag, BagStatus, Brew


def make_token(user_id):
    """Mint an access token the way the identity provider would."""
    token = AccessToken()
    token['user_id'] = str(user_id)
    return str(token)


@pytest.fixture
def api_client():
    """Return an API client without credentials (guest identity)."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def owner_id():
    return uuid.UUID('11111111-1111-1111-1111-111111111111')


@pytest.fixture
def other_user_id():
    return uuid.UUID('22222222-2222-2222-2222-222222222222')


@pytest.fixture
def owner_client(owner_id):
    """Return API client authenticated as the bag owner."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {make_token(owner_id)}')
    return client


@pytest.fixture
def other_client(other_user_id):
    """Return API client authenticated as a different user."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {make_token(other_user_id)}')
    return client


# =============================================================================
# Bags & Brews
# =============================================================================

@pytest.fixture
def bag(db, owner_id):
    """Active bag roasted a week ago."""
    return Bag.objects.create(
        user_id=owner_id,
        coffee_name='Yirgacheffe Natural',
        roaster='Doubleshot',
        origin='Ethiopia',
        process='natural',
        roast_date=timezone.now().date() - timedelta(days=7),
    )


@pytest.fixture
def archived_bag(db, owner_id):
    """Archived bag."""
    return Bag.objects.create(
        user_id=owner_id,
        coffee_name='Santos',
        roaster='Coffee Source',
        roast_date=timezone.now().date() - timedelta(days=60),
        status=BagStatus.ARCHIVED,
        archived_at=timezone.now(),
    )


@pytest.fixture
def other_bag(db, other_user_id):
    """Bag owned by another user."""
    return Bag.objects.create(
        user_id=other_user_id,
        coffee_name='Kenya AA',
        roaster='Nordbeans',
        roast_date=timezone.now().date() - timedelta(days=10),
    )


@pytest.fixture
def brew(bag):
    """Rated V60 brew."""
    return Brew.objects.create(bag=bag, method='V60', dose=15, rating=3.6, fruity=4)


@pytest.fixture
def second_brew(bag):
    """Rated AeroPress brew."""
    return Brew.objects.create(bag=bag, method='AeroPress', dose=17, rating=3.4, fruity=2)


@pytest.fixture
def other_brew(other_bag):
    """Brew in another user's bag."""
    return Brew.objects.create(bag=other_bag, method='Chemex', rating=4.5)
