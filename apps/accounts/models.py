from django.db import models


class UserProfile(models.Model):
    """
    Public profile of an identity-provider user.

    Users have no local account row; the profile only exists once a user
    picks a username, which the brew feed then shows next to their brews.
    """

    user_id = models.UUIDField(primary_key=True)
    username = models.CharField(max_length=30, unique=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_profiles'
        ordering = ['username']

    def __str__(self):
        return self.username
