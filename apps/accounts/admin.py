from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    """Admin interface for user profiles."""

    list_display = ['username', 'user_id', 'created_at', 'updated_at']
    search_fields = ['username', 'user_id']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['username']
