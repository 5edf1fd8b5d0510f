"""
Activity URL patterns.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('', views.activities, name='activity-list'),
]
