"""Profile management service."""

import logging
from uuid import UUID

from django.db import IntegrityError, transaction

from apps.accounts.models import UserProfile
from .exceptions import ProfileNotFoundError, UsernameTakenError

logger = logging.getLogger(__name__)


def get_profile(*, user_id: UUID) -> UserProfile:
    """
    Get a user's profile.

    Raises:
        ProfileNotFoundError: If the user never set a username
    """
    try:
        return UserProfile.objects.get(user_id=user_id)
    except UserProfile.DoesNotExist:
        raise ProfileNotFoundError("Profile not found")


@transaction.atomic
def set_username(*, user_id: UUID, username: str) -> UserProfile:
    """
    Create the user's profile or change its username.

    Args:
        user_id: User's ID (from the request identity)
        username: Already validated username

    Returns:
        The saved UserProfile

    Raises:
        UsernameTakenError: If another user holds the username
    """
    if UserProfile.objects.filter(username=username).exclude(user_id=user_id).exists():
        raise UsernameTakenError("is already taken")

    try:
        # Savepoint so a lost race on the unique index leaves the outer transaction usable
        with transaction.atomic():
            profile, created = UserProfile.objects.update_or_create(
                user_id=user_id,
                defaults={'username': username},
            )
    except IntegrityError:
        raise UsernameTakenError("is already taken")

    logger.info("%s profile for user %s", "Created" if created else "Updated", user_id)
    return profile
