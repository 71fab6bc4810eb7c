from django.urls import path
from . import views

app_name = 'bags'

urlpatterns = [
    # Bags
    path('bags', views.bag_collection, name='bag-list'),
    path('bags/<uuid:bag_id>', views.bag_detail, name='bag-detail'),
    path('bags/<uuid:bag_id>/archive', views.bag_archive, name='bag-archive'),
    path('bags/<uuid:bag_id>/unarchive', views.bag_unarchive, name='bag-unarchive'),

    # Brews
    path('bags/<uuid:bag_id>/brews', views.brew_collection, name='brew-list'),
    path('bags/<uuid:bag_id>/brews/<uuid:brew_id>/best', views.brew_mark_best, name='brew-mark-best'),
]
