"""
URL configuration for the TeamShare backend.
"""
from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse
from django.utils import timezone
from drf_spectacular.views import SpectacularAPIView

from apps.files.views import download_project
from apps.projects.views import invite


def health_check(request):
    """Health check endpoint for Docker/Kubernetes."""
    return JsonResponse({
        'status': 'healthy',
        'timestamp': timezone.now().isoformat(),
        'version': '1.0.0',
    })


urlpatterns = [
    path('admin/', admin.site.urls),

    # Health check
    path('api/health/', health_check, name='health_check'),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),

    # API endpoints
    path('api/', include('apps.users.urls')),
    path('api/projects/', include('apps.projects.urls')),
    path('api/files/', include('apps.files.urls')),
    path('api/', include('apps.comments.urls')),
    path('api/activities/', include('apps.activity.urls')),
    path('api/', include('apps.stats.urls')),
    path('api/invites/', invite, name='invites'),
    path('api/project/download/', download_project, name='project-download'),
]
