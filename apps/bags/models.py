# ==========================================
# apps/bags/models.py
# ==========================================

from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


# Allowed ranges for numeric brew fields (null means not recorded)
BREW_FIELD_RANGES = {
    'dose': (0, 1000),
    'grind_setting': (0, 1000),
    'water_amount': (0, 5000),
    'rating': (0, 5),
    'nutty': (0, 5),
    'acidity': (0, 5),
    'fruity': (0, 5),
    'floral': (0, 5),
    'sweetness': (0, 5),
    'chocolate': (0, 5),
}


def range_check(field, low, high):
    """CheckConstraint keeping an optional numeric field within [low, high]."""
    return models.CheckConstraint(
        condition=Q(**{f'{field}__isnull': True}) | Q(**{f'{field}__gte': low, f'{field}__lte': high}),
        name=f'brew_{field}_in_range',
    )


class BagStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    ARCHIVED = 'ARCHIVED', 'Archived'


class Bag(models.Model):
    """A purchased bag of coffee, tracked from roast date until archived."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Owner id comes from the identity provider; there is no local user row
    user_id = models.UUIDField(db_index=True)

    coffee_name = models.CharField(max_length=200)
    roaster = models.CharField(max_length=200)
    origin = models.CharField(max_length=200, null=True, blank=True)
    process = models.CharField(max_length=100, null=True, blank=True)
    roast_date = models.DateField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)

    # Lifecycle
    status = models.CharField(max_length=10, choices=BagStatus.choices, default=BagStatus.ACTIVE)
    archived_at = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bags'
        indexes = [
            models.Index(fields=['user_id', 'status', 'updated_at'], name='bags_owner_status_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(status=BagStatus.ARCHIVED, archived_at__isnull=False) |
                    Q(status=BagStatus.ACTIVE, archived_at__isnull=True)
                ),
                name='bag_archived_at_matches_status',
            ),
        ]
        ordering = ['updated_at']

    def __str__(self):
        return f"{self.roaster} - {self.coffee_name}"


class Brew(models.Model):
    """One logged attempt at brewing coffee from a bag."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bag = models.ForeignKey(Bag, on_delete=models.CASCADE, related_name='brews')

    # Recipe
    method = models.CharField(max_length=100)
    brewer = models.CharField(max_length=200, null=True, blank=True)
    grinder = models.CharField(max_length=200, null=True, blank=True)
    dose = models.IntegerField(null=True, blank=True)  # grams
    grind_setting = models.IntegerField(null=True, blank=True)
    water_amount = models.IntegerField(null=True, blank=True)  # ml or grams

    # Result
    rating = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0), MaxValueValidator(5)])
    nutty = models.PositiveSmallIntegerField(null=True, blank=True, validators=[MaxValueValidator(5)])
    acidity = models.PositiveSmallIntegerField(null=True, blank=True, validators=[MaxValueValidator(5)])
    fruity = models.PositiveSmallIntegerField(null=True, blank=True, validators=[MaxValueValidator(5)])
    floral = models.PositiveSmallIntegerField(null=True, blank=True, validators=[MaxValueValidator(5)])
    sweetness = models.PositiveSmallIntegerField(null=True, blank=True, validators=[MaxValueValidator(5)])
    chocolate = models.PositiveSmallIntegerField(null=True, blank=True, validators=[MaxValueValidator(5)])
    flavour_notes = models.TextField(null=True, blank=True)

    is_best = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    TASTE_FIELDS = ('nutty', 'acidity', 'fruity', 'floral', 'sweetness', 'chocolate')

    class Meta:
        db_table = 'brews'
        indexes = [
            models.Index(fields=['bag', 'created_at'], name='brews_bag_created_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['bag'],
                condition=Q(is_best=True),
                name='one_best_brew_per_bag',
            ),
            *[range_check(field, low, high) for field, (low, high) in BREW_FIELD_RANGES.items()],
        ]
        ordering = ['-created_at']

    def __str__(self):
        rating = f"{self.rating}★" if self.rating is not None else "unrated"
        return f"{self.method} - {self.bag.coffee_name} ({rating})"
