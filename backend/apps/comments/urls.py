"""
Comment URL patterns.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('comments/', views.comments, name='comment-list'),
    path('files/<int:file_id>/comments/', views.file_comments, name='file-comments'),
]
