"""Brew management service - logging brews and choosing the best one."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.bags.models import Bag, Brew
from .bag_management import get_owned_bag
from .exceptions import BagNotFoundError, BrewNotFoundError

logger = logging.getLogger(__name__)


def create_brew(
    *,
    bag_id: UUID,
    owner_id: UUID,
    method: str,
    brewer: Optional[str] = None,
    grinder: Optional[str] = None,
    dose: Optional[int] = None,
    grind_setting: Optional[int] = None,
    water_amount: Optional[int] = None,
    rating: Optional[float] = None,
    nutty: Optional[int] = None,
    acidity: Optional[int] = None,
    fruity: Optional[int] = None,
    floral: Optional[int] = None,
    sweetness: Optional[int] = None,
    chocolate: Optional[int] = None,
    flavour_notes: Optional[str] = None,
) -> Brew:
    """
    Log a brew against an owned bag.

    Values are expected to be validated already (see apps.bags.validation).
    New brews are never flagged best.

    Args:
        bag_id: Bag UUID
        owner_id: UUID of the owning user
        method: Brew method (free text, required)
        brewer: Brewer equipment name
        grinder: Grinder name
        dose: Coffee dose in grams (0-1000)
        grind_setting: Grinder setting (0-1000)
        water_amount: Water in ml or grams (0-5000)
        rating: Overall rating (0.0-5.0)
        nutty, acidity, fruity, floral, sweetness, chocolate: Taste scores (0-5)
        flavour_notes: Free-form tasting notes

    Returns:
        Created Brew instance

    Raises:
        BagNotFoundError: If no bag with that id belongs to the user
    """
    bag = get_owned_bag(bag_id=bag_id, owner_id=owner_id)

    brew = Brew.objects.create(
        bag=bag,
        method=method,
        brewer=brewer,
        grinder=grinder,
        dose=dose,
        grind_setting=grind_setting,
        water_amount=water_amount,
        rating=rating,
        nutty=nutty,
        acidity=acidity,
        fruity=fruity,
        floral=floral,
        sweetness=sweetness,
        chocolate=chocolate,
        is_best=False,
        flavour_notes=flavour_notes,
    )
    logger.info("Logged brew %s on bag %s", brew.id, bag.id)
    return brew


def list_brews(*, bag_id: UUID, owner_id: UUID, newest_first: bool = True) -> QuerySet:
    """
    Brews of an owned bag.

    History views want newest first; analytics wants chronological order.

    Raises:
        BagNotFoundError: If no bag with that id belongs to the user
    """
    bag = get_owned_bag(bag_id=bag_id, owner_id=owner_id)
    ordering = '-created_at' if newest_first else 'created_at'
    return Brew.objects.filter(bag=bag).order_by(ordering)


@transaction.atomic
def mark_best_brew(*, bag_id: UUID, owner_id: UUID, brew_id: UUID) -> Brew:
    """
    Make one brew the only best brew of its bag.

    This operation:
    1. Locks the owned bag row, so concurrent calls on the bag run one at a time
    2. Clears every best flag in the bag
    3. Sets the flag on the requested brew

    All three steps share one transaction. If the brew does not exist or
    belongs to another bag, the exception rolls back the clear and the
    existing flags stay exactly as they were.

    Args:
        bag_id: Bag UUID
        owner_id: UUID of the owning user
        brew_id: Brew UUID to flag

    Returns:
        The flagged Brew instance

    Raises:
        BagNotFoundError: If no bag with that id belongs to the user
        BrewNotFoundError: If the brew is not in that bag
    """
    try:
        bag = (
            Bag.objects
            .select_for_update()
            .get(id=bag_id, user_id=owner_id)
        )
    except Bag.DoesNotExist:
        raise BagNotFoundError("Bag not found")

    Brew.objects.filter(bag=bag, is_best=True).update(is_best=False)

    flagged = Brew.objects.filter(id=brew_id, bag=bag).update(is_best=True)
    if not flagged:
        raise BrewNotFoundError("Brew not found")

    logger.info("Brew %s is now the best brew of bag %s", brew_id, bag.id)
    return Brew.objects.get(id=brew_id)
