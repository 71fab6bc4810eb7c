"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 3 user profiles (alice, bob, and the guest user)
- Bags for each of them, one archived
- A handful of brews per bag, with a best brew marked on some bags

It prints a bearer token for each sample user.
"""

import uuid
from datetime import date, timedelta

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction
from rest_framework_simplejwt import settings as jwt_settings
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.models import UserProfile
from apps.accounts.services import set_username
from apps.bags.models import Bag
from apps.bags.services import archive_bag, create_bag, create_brew, mark_best_brew


ALICE_ID = uuid.UUID('00000000-0000-0000-0000-00000000a11c')
BOB_ID = uuid.UUID('00000000-0000-0000-0000-000000000b0b')


class Command(BaseCommand):
    help = 'Create sample bags, brews and profiles for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_profiles()
        self.create_bags_and_brews(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Bearer tokens:')
        for username, user_id in users.items():
            self.stdout.write(f'  {username}: {self.token_for(user_id)}')

    def clear_data(self):
        """Clear all bags (brews cascade) and profiles."""
        Bag.objects.all().delete()
        UserProfile.objects.all().delete()

    def create_profiles(self):
        """Create user profiles."""
        self.stdout.write('  Creating profiles...')
        users = {
            'alice': ALICE_ID,
            'bob': BOB_ID,
            'guest': uuid.UUID(str(settings.BREWLOG_GUEST_USER_ID)),
        }
        for username, user_id in users.items():
            set_username(user_id=user_id, username=username)
        return users

    def create_bags_and_brews(self, users):
        """Create bags with brews for every sample user."""
        self.stdout.write('  Creating bags and brews...')
        today = date.today()

        bags_data = [
            {
                'owner': 'alice',
                'coffee_name': 'Yirgacheffe Natural',
                'roaster': 'Doubleshot',
                'origin': 'Ethiopia',
                'process': 'natural',
                'roast_date': today - timedelta(days=2),
                'brews': [
                    {'method': 'V60', 'dose': 15, 'grind_setting': 22, 'water_amount': 250,
                     'rating': 3.5, 'fruity': 4, 'floral': 4, 'acidity': 3},
                    {'method': 'V60', 'dose': 15, 'grind_setting': 20, 'water_amount': 250,
                     'rating': 4.25, 'fruity': 5, 'floral': 4, 'acidity': 4,
                     'flavour_notes': 'Blueberry, jasmine', 'best': True},
                ],
            },
            {
                'owner': 'alice',
                'coffee_name': 'Huila Supremo',
                'roaster': 'Father\'s Coffee',
                'origin': 'Colombia',
                'process': 'washed',
                'roast_date': today - timedelta(days=14),
                'brews': [
                    {'method': 'AeroPress', 'brewer': 'AeroPress Go', 'dose': 17,
                     'water_amount': 220, 'rating': 4, 'chocolate': 4, 'nutty': 3, 'sweetness': 4},
                    {'method': 'Espresso', 'dose': 18, 'grind_setting': 8, 'water_amount': 36,
                     'rating': 3, 'chocolate': 5, 'nutty': 4},
                ],
            },
            {
                'owner': 'bob',
                'coffee_name': 'Santos',
                'roaster': 'Coffee Source',
                'origin': 'Brazil',
                'process': 'pulped natural',
                'roast_date': today - timedelta(days=40),
                'archived': True,
                'brews': [
                    {'method': 'French Press', 'dose': 30, 'water_amount': 500,
                     'rating': 2.5, 'nutty': 4, 'chocolate': 3},
                ],
            },
            {
                'owner': 'guest',
                'coffee_name': 'Kenya AA',
                'roaster': 'Nordbeans',
                'origin': 'Kenya',
                'roast_date': today - timedelta(days=7),
                'brews': [
                    {'method': 'Chemex', 'grinder': 'Comandante C40', 'dose': 30,
                     'grind_setting': 28, 'water_amount': 500, 'rating': 4.5,
                     'acidity': 5, 'fruity': 4, 'sweetness': 3},
                ],
            },
        ]

        for bag_data in bags_data:
            owner_id = users[bag_data.pop('owner')]
            brews = bag_data.pop('brews')
            archived = bag_data.pop('archived', False)

            bag = create_bag(owner_id=owner_id, **bag_data)
            for brew_data in brews:
                best = brew_data.pop('best', False)
                brew = create_brew(bag_id=bag.id, owner_id=owner_id, **brew_data)
                if best:
                    mark_best_brew(bag_id=bag.id, owner_id=owner_id, brew_id=brew.id)

            if archived:
                archive_bag(bag_id=bag.id, owner_id=owner_id)

    def token_for(self, user_id):
        """Mint an access token carrying the user id claim."""
        token = AccessToken()
        token[jwt_settings.api_settings.USER_ID_CLAIM] = str(user_id)
        return str(token)
