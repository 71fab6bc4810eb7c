"""
Bags services - Business logic layer.

This package contains all persistence operations for bags and brews:
- Bag CRUD and lifecycle (archive / unarchive)
- Brew logging and history
- Best-brew selection
- Batched brew statistics for bag listings

Every bag-scoped operation takes the caller's ``owner_id`` explicitly and
reports a bag owned by someone else exactly like a missing bag.
"""

from .bag_management import (
    create_bag,
    list_bags,
    get_owned_bag,
    update_bag,
    set_bag_status,
    archive_bag,
    unarchive_bag,
)

from .brew_management import (
    create_brew,
    list_brews,
    mark_best_brew,
)

from .brew_statistics import get_brew_stats_by_bag

from .exceptions import (
    BagsServiceError,
    BagNotFoundError,
    BrewNotFoundError,
    BagPersistenceError,
)

__all__ = [
    # Bag Management Services
    'create_bag',
    'list_bags',
    'get_owned_bag',
    'update_bag',
    'set_bag_status',
    'archive_bag',
    'unarchive_bag',
    # Brew Management Services
    'create_brew',
    'list_brews',
    'mark_best_brew',
    # Brew Statistics
    'get_brew_stats_by_bag',
    # Exceptions
    'BagsServiceError',
    'BagNotFoundError',
    'BrewNotFoundError',
    'BagPersistenceError',
]
