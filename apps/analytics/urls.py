from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Bag analytics
    path('bags/<uuid:bag_id>/analytics', views.bag_analytics, name='bag-analytics'),

    # Public feed
    path('feed/brews', views.brew_feed, name='brew-feed'),
]
