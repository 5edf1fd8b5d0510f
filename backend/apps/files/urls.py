"""
File URL patterns.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('', views.FileListView.as_view(), name='file-list'),
    path('recent/', views.recent_files, name='file-recent'),
    path('upload/', views.upload_file, name='file-upload'),
    path('<int:file_id>/', views.file_detail, name='file-detail'),
    path('<int:file_id>/download/', views.download_file, name='file-download'),
    path('<int:file_id>/versions/', views.file_versions, name='file-versions'),
]
