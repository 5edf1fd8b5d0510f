"""
Project URL patterns.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('', views.projects, name='project-list'),
    path('<int:project_id>/members/', views.project_members, name='project-members'),
]
