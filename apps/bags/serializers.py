"""
Serializers for bags app.

This module contains:
1. Request fields - DRF fields backed by apps.bags.validation
2. Input serializers - Request body and query parameter validation
3. Output serializers - camelCase response bodies

Every field of an input serializer is validated independently, so one bad
request reports all of its problems together (see config.exceptions for the
rendered shape).
"""

from django.utils import timezone
from rest_framework import serializers

from . import validation
from .derived import build_bag_computed_fields
from .models import Bag, BagStatus, Brew


MSG_NOT_A_STRING = 'must be a string'


# =============================================================================
# Request Fields
# =============================================================================

class RequiredTextField(serializers.Field):
    """Non-blank string, stripped."""

    default_error_messages = {
        'required': validation.MSG_REQUIRED,
        'null': validation.MSG_REQUIRED,
    }

    def __init__(self, max_length=None, **kwargs):
        self.max_length = max_length
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value, problem = validation.validate_required_text(data, self.field_name)
        if problem:
            raise serializers.ValidationError(problem['message'])
        if self.max_length and len(value) > self.max_length:
            raise serializers.ValidationError(f'must be at most {self.max_length} characters')
        return value

    def to_representation(self, value):
        return value


class OptionalTextField(serializers.Field):
    """Optional string; blank or null becomes None."""

    def __init__(self, max_length=None, **kwargs):
        self.max_length = max_length
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if validation.is_blank(data):
            return None
        if not isinstance(data, str):
            raise serializers.ValidationError(MSG_NOT_A_STRING)
        value = data.strip()
        if self.max_length and len(value) > self.max_length:
            raise serializers.ValidationError(f'must be at most {self.max_length} characters')
        return value

    def to_representation(self, value):
        return value


class BoundedIntegerField(serializers.Field):
    """Optional whole number within [minimum, maximum]."""

    def __init__(self, minimum, maximum, **kwargs):
        self.minimum = minimum
        self.maximum = maximum
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value, problem = validation.validate_optional_integer(
            data, self.field_name, self.minimum, self.maximum
        )
        if problem:
            raise serializers.ValidationError(problem['message'])
        return value

    def to_representation(self, value):
        return value


class BoundedNumberField(serializers.Field):
    """Optional decimal number within [minimum, maximum]."""

    def __init__(self, minimum, maximum, **kwargs):
        self.minimum = minimum
        self.maximum = maximum
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value, problem = validation.validate_optional_number(
            data, self.field_name, self.minimum, self.maximum
        )
        if problem:
            raise serializers.ValidationError(problem['message'])
        return value

    def to_representation(self, value):
        return value


class CalendarDateField(serializers.Field):
    """
    Calendar date from ``YYYY-MM-DD`` or an ISO datetime.

    A required date reports a missing or blank value as "is required". An
    optional one (bag edits) must still be a valid date when it is sent.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        blank_message = validation.MSG_REQUIRED if self.required else validation.MSG_INVALID_DATE
        self.error_messages['required'] = validation.MSG_REQUIRED
        self.error_messages['null'] = blank_message

    def to_internal_value(self, data):
        if validation.is_blank(data):
            raise serializers.ValidationError(self.error_messages['null'])
        value, problem = validation.validate_date(data, self.field_name, required=self.required)
        if problem:
            raise serializers.ValidationError(problem['message'])
        return value

    def to_representation(self, value):
        return value.isoformat()


# =============================================================================
# Input Serializers
# =============================================================================

class BagCreateSerializer(serializers.Serializer):
    """
    Validate a new bag.

    Body:
        coffeeName (str): required
        roaster (str): required
        roastDate (date): required, YYYY-MM-DD or ISO datetime
        origin, process, notes (str): optional
    """

    coffeeName = RequiredTextField(source='coffee_name', max_length=200)
    roaster = RequiredTextField(max_length=200)
    roastDate = CalendarDateField(source='roast_date')
    origin = OptionalTextField(max_length=200)
    process = OptionalTextField(max_length=100)
    notes = OptionalTextField()


class BagUpdateSerializer(serializers.Serializer):
    """
    Validate a partial bag edit.

    Only keys present in the body are applied. A blank coffeeName or roaster
    keeps the stored value; a blank origin, process or notes clears it.
    """

    coffeeName = OptionalTextField(source='coffee_name', max_length=200)
    roaster = OptionalTextField(max_length=200)
    roastDate = CalendarDateField(source='roast_date', required=False)
    origin = OptionalTextField(max_length=200)
    process = OptionalTextField(max_length=100)
    notes = OptionalTextField()

    def validate(self, attrs):
        """Drop blank values for fields that can never be empty."""
        for field in ('coffee_name', 'roaster'):
            if field in attrs and attrs[field] is None:
                attrs.pop(field)
        return attrs


class BagStatusQuerySerializer(serializers.Serializer):
    """
    Validate the bag list filter.

    Query Parameters:
        status (str): ACTIVE (default) or ARCHIVED
    """

    status = serializers.ChoiceField(
        choices=BagStatus.choices,
        required=False,
        default=BagStatus.ACTIVE,
        error_messages={'invalid_choice': 'must be ACTIVE or ARCHIVED'},
    )


class BrewCreateSerializer(serializers.Serializer):
    """
    Validate a new brew.

    Body:
        method (str): required
        brewer, grinder, flavourNotes (str): optional
        dose (int): 0-1000 grams
        grindSetting (int): 0-1000
        waterAmount (int): 0-5000
        rating (number): 0-5
        nutty, acidity, fruity, floral, sweetness, chocolate (int): 0-5
    """

    method = RequiredTextField(max_length=100)
    brewer = OptionalTextField(max_length=200)
    grinder = OptionalTextField(max_length=200)
    dose = BoundedIntegerField(0, 1000)
    grindSetting = BoundedIntegerField(0, 1000, source='grind_setting')
    waterAmount = BoundedIntegerField(0, 5000, source='water_amount')
    rating = BoundedNumberField(0, 5)
    nutty = BoundedIntegerField(0, 5)
    acidity = BoundedIntegerField(0, 5)
    fruity = BoundedIntegerField(0, 5)
    floral = BoundedIntegerField(0, 5)
    sweetness = BoundedIntegerField(0, 5)
    chocolate = BoundedIntegerField(0, 5)
    flavourNotes = OptionalTextField(source='flavour_notes')


# =============================================================================
# Output Serializers
# =============================================================================

class BrewSerializer(serializers.ModelSerializer):
    """Stored brew."""

    bagId = serializers.UUIDField(source='bag_id', read_only=True)
    grindSetting = serializers.IntegerField(source='grind_setting', read_only=True)
    waterAmount = serializers.IntegerField(source='water_amount', read_only=True)
    flavourNotes = serializers.CharField(source='flavour_notes', read_only=True)
    isBest = serializers.BooleanField(source='is_best', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Brew
        fields = [
            'id',
            'bagId',
            'method',
            'brewer',
            'grinder',
            'dose',
            'grindSetting',
            'waterAmount',
            'rating',
            'nutty',
            'acidity',
            'fruity',
            'floral',
            'sweetness',
            'chocolate',
            'flavourNotes',
            'isBest',
            'createdAt',
        ]
        read_only_fields = fields


class BagDetailSerializer(serializers.ModelSerializer):
    """
    Stored bag plus its roast age and resting status.

    Pass ``context={'now': ...}`` to pin the reference time.
    """

    userId = serializers.UUIDField(source='user_id', read_only=True)
    coffeeName = serializers.CharField(source='coffee_name', read_only=True)
    roastDate = serializers.DateField(source='roast_date', read_only=True)
    archivedAt = serializers.DateTimeField(source='archived_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    roastAgeDays = serializers.SerializerMethodField()
    restingStatus = serializers.SerializerMethodField()

    class Meta:
        model = Bag
        fields = [
            'id',
            'userId',
            'coffeeName',
            'roaster',
            'origin',
            'process',
            'roastDate',
            'notes',
            'status',
            'archivedAt',
            'createdAt',
            'updatedAt',
            'roastAgeDays',
            'restingStatus',
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        # Both derived fields come from one reading of the clock
        now = self.context.get('now') or timezone.now()
        self._computed = build_bag_computed_fields(instance.roast_date, now=now)
        return super().to_representation(instance)

    def get_roastAgeDays(self, obj):
        return self._computed['roast_age_days']

    def get_restingStatus(self, obj):
        return self._computed['resting_status']


class BagListItemSerializer(BagDetailSerializer):
    """Bag detail plus brew statistics attached by services.list_bags."""

    brewCount = serializers.IntegerField(source='brew_count', read_only=True)
    averageRating = serializers.FloatField(source='average_rating', read_only=True, allow_null=True)

    class Meta(BagDetailSerializer.Meta):
        fields = BagDetailSerializer.Meta.fields + ['brewCount', 'averageRating']
        read_only_fields = fields


class ErrorSerializer(serializers.Serializer):
    """Error response."""
    error = serializers.CharField()


class FieldIssueSerializer(serializers.Serializer):
    field = serializers.CharField()
    message = serializers.CharField()


class ValidationErrorSerializer(serializers.Serializer):
    """Validation error response listing every field issue."""
    errors = FieldIssueSerializer(many=True)
