"""Domain exceptions for bags services."""


class BagsServiceError(Exception):
    """Base exception for bags services."""
    pass


class BagNotFoundError(BagsServiceError):
    """Bag does not exist or belongs to another user."""
    pass


class BrewNotFoundError(BagsServiceError):
    """Brew does not exist or belongs to another bag."""
    pass


class BagPersistenceError(BagsServiceError):
    """The database did not return the row a write should have produced."""
    pass
