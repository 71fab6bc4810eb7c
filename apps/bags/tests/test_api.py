import uuid
from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.bags.models import Bag, BagStatus, Brew


GUEST_ID = '00000000-0000-0000-0000-000000000001'


def bag_payload(**overrides):
    payload = {
        'coffeeName': 'Yirgacheffe Natural',
        'roaster': 'Doubleshot',
        'roastDate': (timezone.now().date() - timedelta(days=5)).isoformat(),
        'origin': 'Ethiopia',
    }
    payload.update(overrides)
    return payload


# =============================================================================
# Create Bag Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateBag:
    """Tests for POST /bags"""

    def test_create_bag(self, owner_client, owner_id):
        response = owner_client.post(reverse('bags:bag-list'), bag_payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['coffeeName'] == 'Yirgacheffe Natural'
        assert response.data['userId'] == str(owner_id)
        assert response.data['status'] == 'ACTIVE'
        assert response.data['archivedAt'] is None
        assert response.data['roastAgeDays'] == 5
        assert response.data['restingStatus'] == 'READY'
        assert Bag.objects.filter(user_id=owner_id).count() == 1

    def test_create_bag_reports_all_missing_fields(self, owner_client):
        response = owner_client.post(reverse('bags:bag-list'), {'origin': 'Kenya'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            'errors': [
                {'field': 'coffeeName', 'message': 'is required'},
                {'field': 'roaster', 'message': 'is required'},
                {'field': 'roastDate', 'message': 'is required'},
            ]
        }
        assert not Bag.objects.exists()

    def test_create_bag_blank_strings_are_missing(self, owner_client):
        response = owner_client.post(
            reverse('bags:bag-list'),
            bag_payload(coffeeName='  ', roaster=''),
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert [issue['field'] for issue in response.data['errors']] == ['coffeeName', 'roaster']

    def test_create_bag_invalid_roast_date(self, owner_client):
        response = owner_client.post(
            reverse('bags:bag-list'),
            bag_payload(roastDate='last tuesday'),
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == [{'field': 'roastDate', 'message': 'must be a valid date'}]

    def test_create_bag_future_roast_date_is_age_zero(self, owner_client):
        future = (timezone.now().date() + timedelta(days=3)).isoformat()
        response = owner_client.post(reverse('bags:bag-list'), bag_payload(roastDate=future), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['roastAgeDays'] == 0
        assert response.data['restingStatus'] == 'RESTING'

    def test_create_bag_blank_optional_fields_become_null(self, owner_client):
        response = owner_client.post(
            reverse('bags:bag-list'),
            bag_payload(origin='', process='  ', notes=None),
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['origin'] is None
        assert response.data['process'] is None
        assert response.data['notes'] is None

    def test_create_bag_as_guest(self, api_client):
        """Requests without a token act as the guest user."""
        response = api_client.post(reverse('bags:bag-list'), bag_payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['userId'] == GUEST_ID


# =============================================================================
# List & Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestListBags:
    """Tests for GET /bags"""

    def test_list_active_bags_by_default(self, owner_client, bag, archived_bag, other_bag, brew, second_brew):
        response = owner_client.get(reverse('bags:bag-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == [str(bag.id)]
        assert response.data[0]['brewCount'] == 2
        assert response.data[0]['averageRating'] == 3.5
        assert response.data[0]['restingStatus'] == 'READY'

    def test_list_archived_bags(self, owner_client, bag, archived_bag):
        response = owner_client.get(reverse('bags:bag-list'), {'status': 'ARCHIVED'})

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == [str(archived_bag.id)]
        assert response.data[0]['brewCount'] == 0
        assert response.data[0]['averageRating'] is None

    def test_list_invalid_status(self, owner_client):
        response = owner_client.get(reverse('bags:bag-list'), {'status': 'FINISHED'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == [{'field': 'status', 'message': 'must be ACTIVE or ARCHIVED'}]


@pytest.mark.django_db
class TestBagDetail:
    """Tests for GET/PATCH /bags/{id}"""

    def test_get_bag(self, owner_client, bag):
        response = owner_client.get(reverse('bags:bag-detail', args=[bag.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(bag.id)
        assert response.data['roastDate'] == bag.roast_date.isoformat()
        assert response.data['roastAgeDays'] == 7

    def test_get_foreign_bag(self, owner_client, other_bag):
        response = owner_client.get(reverse('bags:bag-detail', args=[other_bag.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Bag not found'}

    def test_non_uuid_id_is_not_found(self, owner_client):
        response = owner_client.get('/bags/not-a-uuid')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_bag(self, owner_client, bag):
        response = owner_client.patch(
            reverse('bags:bag-detail', args=[bag.id]),
            {'notes': 'Great as pour-over', 'roastDate': '2026-01-02'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notes'] == 'Great as pour-over'
        assert response.data['roastDate'] == '2026-01-02'
        assert response.data['coffeeName'] == bag.coffee_name

    def test_update_blank_name_keeps_existing(self, owner_client, bag):
        response = owner_client.patch(
            reverse('bags:bag-detail', args=[bag.id]),
            {'coffeeName': '', 'origin': ''},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['coffeeName'] == 'Yirgacheffe Natural'
        assert response.data['origin'] is None

    def test_update_invalid_roast_date(self, owner_client, bag):
        response = owner_client.patch(
            reverse('bags:bag-detail', args=[bag.id]),
            {'roastDate': 'soon'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == [{'field': 'roastDate', 'message': 'must be a valid date'}]

    def test_update_foreign_bag(self, owner_client, other_bag):
        response = owner_client.patch(
            reverse('bags:bag-detail', args=[other_bag.id]),
            {'notes': 'hijacked'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        other_bag.refresh_from_db()
        assert other_bag.notes is None

    def test_invalid_update_of_foreign_bag_is_not_found(self, owner_client, other_bag):
        response = owner_client.patch(
            reverse('bags:bag-detail', args=[other_bag.id]),
            {'roastDate': 'soon'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Bag not found'}


# =============================================================================
# Archive Tests
# =============================================================================

@pytest.mark.django_db
class TestArchive:
    """Tests for PATCH /bags/{id}/archive and /unarchive"""

    def test_archive_moves_bag_between_lists(self, owner_client, bag):
        response = owner_client.patch(reverse('bags:bag-archive', args=[bag.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'ARCHIVED'
        assert response.data['archivedAt'] is not None

        active = owner_client.get(reverse('bags:bag-list'))
        archived = owner_client.get(reverse('bags:bag-list'), {'status': 'ARCHIVED'})
        assert active.data == []
        assert [item['id'] for item in archived.data] == [str(bag.id)]

    def test_unarchive_restores_bag(self, owner_client, archived_bag):
        response = owner_client.patch(reverse('bags:bag-unarchive', args=[archived_bag.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'ACTIVE'
        assert response.data['archivedAt'] is None

        active = owner_client.get(reverse('bags:bag-list'))
        assert [item['id'] for item in active.data] == [str(archived_bag.id)]

    def test_archive_foreign_bag(self, owner_client, other_bag):
        response = owner_client.patch(reverse('bags:bag-archive', args=[other_bag.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        other_bag.refresh_from_db()
        assert other_bag.status == BagStatus.ACTIVE


# =============================================================================
# Brew Tests
# =============================================================================

@pytest.mark.django_db
class TestBrews:
    """Tests for POST/GET /bags/{id}/brews"""

    def test_log_brew(self, owner_client, bag):
        response = owner_client.post(
            reverse('bags:brew-list', args=[bag.id]),
            {
                'method': 'V60',
                'grinder': 'Comandante C40',
                'dose': '15',
                'grindSetting': 22,
                'waterAmount': 250,
                'rating': 4.5,
                'fruity': 4,
                'flavourNotes': 'Blueberry',
            },
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['bagId'] == str(bag.id)
        assert response.data['dose'] == 15
        assert response.data['grindSetting'] == 22
        assert response.data['rating'] == 4.5
        assert response.data['isBest'] is False
        assert response.data['brewer'] is None

    def test_dose_out_of_range_persists_nothing(self, owner_client, bag):
        response = owner_client.post(
            reverse('bags:brew-list', args=[bag.id]),
            {'method': 'V60', 'dose': 1001},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert {'field': 'dose', 'message': 'must be between 0 and 1000'} in response.data['errors']
        assert not Brew.objects.filter(bag=bag).exists()

    def test_all_field_issues_reported_together(self, owner_client, bag):
        response = owner_client.post(
            reverse('bags:brew-list', args=[bag.id]),
            {'dose': 'lots', 'grindSetting': 2.5, 'rating': 6, 'nutty': True},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == [
            {'field': 'method', 'message': 'is required'},
            {'field': 'dose', 'message': 'must be a number'},
            {'field': 'grindSetting', 'message': 'must be an integer'},
            {'field': 'rating', 'message': 'must be between 0 and 5'},
            {'field': 'nutty', 'message': 'must be a number'},
        ]

    def test_log_brew_on_foreign_bag(self, owner_client, other_bag):
        response = owner_client.post(
            reverse('bags:brew-list', args=[other_bag.id]),
            {'method': 'V60'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Bag not found'}

    def test_invalid_brew_on_missing_bag_is_not_found(self, owner_client):
        response = owner_client.post(
            reverse('bags:brew-list', args=[uuid.uuid4()]),
            {'dose': 1001},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Bag not found'}

    def test_history_newest_first(self, owner_client, bag, brew, second_brew):
        response = owner_client.get(reverse('bags:brew-list', args=[bag.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == [str(second_brew.id), str(brew.id)]

    def test_history_of_missing_bag(self, owner_client):
        response = owner_client.get(reverse('bags:brew-list', args=[uuid.uuid4()]))
        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Best Brew Tests
# =============================================================================

@pytest.mark.django_db
class TestMarkBestBrew:
    """Tests for PATCH /bags/{bagId}/brews/{brewId}/best"""

    def test_mark_best(self, owner_client, bag, brew, second_brew):
        owner_client.patch(reverse('bags:brew-mark-best', args=[bag.id, brew.id]))
        response = owner_client.patch(reverse('bags:brew-mark-best', args=[bag.id, second_brew.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(second_brew.id)
        assert response.data['isBest'] is True
        assert list(Brew.objects.filter(bag=bag, is_best=True)) == [second_brew]

    def test_missing_brew_is_not_found_and_keeps_flag(self, owner_client, bag, brew):
        owner_client.patch(reverse('bags:brew-mark-best', args=[bag.id, brew.id]))

        response = owner_client.patch(reverse('bags:brew-mark-best', args=[bag.id, uuid.uuid4()]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Brew not found'}
        brew.refresh_from_db()
        assert brew.is_best is True

    def test_brew_from_another_bag(self, owner_client, bag, other_brew):
        response = owner_client.patch(reverse('bags:brew-mark-best', args=[bag.id, other_brew.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        other_brew.refresh_from_db()
        assert other_brew.is_best is False

    def test_foreign_bag(self, owner_client, other_bag, other_brew):
        response = owner_client.patch(reverse('bags:brew-mark-best', args=[other_bag.id, other_brew.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Bag not found'}


# =============================================================================
# Identity Tests
# =============================================================================

@pytest.mark.django_db
class TestIdentity:
    """Bag access under the different identity modes."""

    def test_guest_cannot_see_token_users_bags(self, api_client, bag):
        response = api_client.get(reverse('bags:bag-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_auth_required_rejects_anonymous(self, api_client, settings):
        settings.BREWLOG_AUTH_REQUIRED = True

        response = api_client.get(reverse('bags:bag-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': 'Authentication required'}

    def test_auth_required_accepts_token(self, owner_client, bag, settings):
        settings.BREWLOG_AUTH_REQUIRED = True

        response = owner_client.get(reverse('bags:bag-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
