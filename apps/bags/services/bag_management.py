"""Bag management service - CRUD and lifecycle operations for bags."""

import logging
from datetime import date
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.bags.models import Bag, BagStatus
from .brew_statistics import get_brew_stats_by_bag
from .exceptions import BagNotFoundError, BagPersistenceError

logger = logging.getLogger(__name__)


# Fields a bag edit may touch; everything else is server-managed
EDITABLE_FIELDS = ['coffee_name', 'roaster', 'origin', 'process', 'roast_date', 'notes']


def create_bag(
    *,
    owner_id: UUID,
    coffee_name: str,
    roaster: str,
    roast_date: Optional[date],
    origin: Optional[str] = None,
    process: Optional[str] = None,
    notes: Optional[str] = None,
) -> Bag:
    """
    Create a new active bag.

    Args:
        owner_id: UUID of the owning user
        coffee_name: Coffee name (required)
        roaster: Roaster name (required)
        roast_date: Roast date
        origin: Origin country or region
        process: Processing method (washed, natural, ...)
        notes: Free-form notes

    Returns:
        Created Bag instance
    """
    bag = Bag.objects.create(
        user_id=owner_id,
        coffee_name=coffee_name,
        roaster=roaster,
        roast_date=roast_date,
        origin=origin,
        process=process,
        notes=notes,
        status=BagStatus.ACTIVE,
    )
    logger.info("Created bag %s for user %s", bag.id, owner_id)
    return bag


def list_bags(*, owner_id: UUID, status: str = BagStatus.ACTIVE) -> list:
    """
    List a user's bags in one lifecycle state, with brew statistics.

    Bags come back ordered by last update (oldest first). Each bag gets
    ``brew_count`` and ``average_rating`` attributes, computed for all
    bags in a single grouped query.

    Args:
        owner_id: UUID of the owning user
        status: ACTIVE or ARCHIVED

    Returns:
        List of Bag instances
    """
    bags = list(
        Bag.objects
        .filter(user_id=owner_id, status=status)
        .order_by('updated_at')
    )
    if not bags:
        return []

    stats = get_brew_stats_by_bag(bag_ids=[bag.id for bag in bags])
    for bag in bags:
        bag_stats = stats.get(bag.id, {})
        bag.brew_count = bag_stats.get('brew_count', 0)
        bag.average_rating = bag_stats.get('average_rating')
    return bags


def get_owned_bag(*, bag_id: UUID, owner_id: UUID) -> Bag:
    """
    Get a bag owned by the given user.

    Existence and ownership are checked by one query, so a bag belonging
    to someone else is indistinguishable from a missing bag.

    Raises:
        BagNotFoundError: If no bag with that id belongs to the user
    """
    try:
        return Bag.objects.get(id=bag_id, user_id=owner_id)
    except Bag.DoesNotExist:
        raise BagNotFoundError("Bag not found")


@transaction.atomic
def update_bag(*, bag_id: UUID, owner_id: UUID, data: Dict[str, Any]) -> Bag:
    """
    Update an owned bag's editable fields.

    Args:
        bag_id: Bag UUID
        owner_id: UUID of the owning user
        data: Fields to update; keys outside EDITABLE_FIELDS are ignored

    Returns:
        Updated Bag instance

    Raises:
        BagNotFoundError: If no bag with that id belongs to the user
    """
    try:
        bag = (
            Bag.objects
            .select_for_update()
            .get(id=bag_id, user_id=owner_id)
        )
    except Bag.DoesNotExist:
        raise BagNotFoundError("Bag not found")

    for field, value in data.items():
        if field in EDITABLE_FIELDS:
            setattr(bag, field, value)

    bag.save()
    return bag


@transaction.atomic
def set_bag_status(*, bag_id: UUID, owner_id: UUID, status: str) -> Bag:
    """
    Move an owned bag between ACTIVE and ARCHIVED.

    ``archived_at`` is set to now when archiving and cleared when
    unarchiving, in the same UPDATE that changes the status.

    Raises:
        BagNotFoundError: If no bag with that id belongs to the user
        BagPersistenceError: If the updated row cannot be read back
    """
    now = timezone.now()
    archived_at = now if status == BagStatus.ARCHIVED else None

    updated = (
        Bag.objects
        .filter(id=bag_id, user_id=owner_id)
        .update(status=status, archived_at=archived_at, updated_at=now)
    )
    if not updated:
        raise BagNotFoundError("Bag not found")

    try:
        bag = Bag.objects.get(id=bag_id, user_id=owner_id)
    except Bag.DoesNotExist:
        raise BagPersistenceError(f"Bag {bag_id} vanished after status update")

    logger.info("Bag %s is now %s", bag_id, status)
    return bag


def archive_bag(*, bag_id: UUID, owner_id: UUID) -> Bag:
    """Archive an owned bag (hidden from the ACTIVE list)."""
    return set_bag_status(bag_id=bag_id, owner_id=owner_id, status=BagStatus.ARCHIVED)


def unarchive_bag(*, bag_id: UUID, owner_id: UUID) -> Bag:
    """Move an archived bag back to active inventory."""
    return set_bag_status(bag_id=bag_id, owner_id=owner_id, status=BagStatus.ACTIVE)
