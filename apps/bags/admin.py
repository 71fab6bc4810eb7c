from django.contrib import admin
from .models import Bag, BagStatus, Brew
from .services import archive_bag, mark_best_brew, unarchive_bag


class BrewInline(admin.TabularInline):
    """Brews logged against a bag."""

    model = Brew
    extra = 0
    fields = ['method', 'rating', 'dose', 'grind_setting', 'water_amount', 'is_best', 'created_at']
    readonly_fields = ['is_best', 'created_at']
    ordering = ['-created_at']


@admin.register(Bag)
class BagAdmin(admin.ModelAdmin):
    """
    Admin interface for Bags.

    Status changes go through the archive/unarchive actions so that
    archived_at always follows status.
    """

    list_display = ['coffee_name', 'roaster', 'user_id', 'roast_date', 'status', 'updated_at']
    list_filter = ['status', 'roast_date']
    search_fields = ['coffee_name', 'roaster', 'origin', 'user_id']
    readonly_fields = ['id', 'status', 'archived_at', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    inlines = [BrewInline]

    fieldsets = (
        ('Coffee', {
            'fields': ('id', 'user_id', 'coffee_name', 'roaster', 'origin', 'process', 'roast_date', 'notes')
        }),
        ('Lifecycle', {
            'fields': ('status', 'archived_at', 'created_at', 'updated_at')
        }),
    )

    actions = ['archive_bags', 'unarchive_bags']

    @admin.action(description='Archive selected bags')
    def archive_bags(self, request, queryset):
        """Archive selected active bags."""
        bags = list(queryset.filter(status=BagStatus.ACTIVE))
        for bag in bags:
            archive_bag(bag_id=bag.id, owner_id=bag.user_id)
        self.message_user(request, f'Archived {len(bags)} bag(s).')

    @admin.action(description='Unarchive selected bags')
    def unarchive_bags(self, request, queryset):
        """Move selected archived bags back to active."""
        bags = list(queryset.filter(status=BagStatus.ARCHIVED))
        for bag in bags:
            unarchive_bag(bag_id=bag.id, owner_id=bag.user_id)
        self.message_user(request, f'Unarchived {len(bags)} bag(s).')


@admin.register(Brew)
class BrewAdmin(admin.ModelAdmin):
    """Admin interface for Brews."""

    list_display = ['method', 'get_coffee_name', 'rating', 'is_best', 'created_at']
    list_filter = ['method', 'is_best', 'created_at']
    search_fields = ['method', 'brewer', 'grinder', 'bag__coffee_name', 'flavour_notes']
    readonly_fields = ['id', 'is_best', 'created_at']
    list_select_related = ['bag']
    ordering = ['-created_at']

    actions = ['mark_as_best']

    def get_coffee_name(self, obj):
        return obj.bag.coffee_name
    get_coffee_name.short_description = 'Coffee'
    get_coffee_name.admin_order_field = 'bag__coffee_name'

    @admin.action(description='Mark as best brew of its bag')
    def mark_as_best(self, request, queryset):
        """Flag each selected brew as best; the last one per bag wins."""
        count = 0
        for brew in queryset.select_related('bag').order_by('created_at'):
            mark_best_brew(bag_id=brew.bag_id, owner_id=brew.bag.user_id, brew_id=brew.id)
            count += 1
        self.message_user(request, f'Marked {count} brew(s) as best.')
