"""
Statistics URL patterns.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('stats/', views.stats, name='stats'),
    path('contributions/', views.contributions, name='contributions'),
    path('activity-by-day/', views.activity_by_day, name='activity-by-day'),
    path('users/', views.team, name='team'),
]
