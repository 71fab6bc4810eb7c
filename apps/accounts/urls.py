from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Current user's profile
    path('me/profile', views.me_profile, name='me-profile'),
]
