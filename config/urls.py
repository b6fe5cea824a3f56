"""
URL configuration for DocumentCloud help pages and contact relay.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),
    # Authentication
    path("auth/", include("allauth.urls")),
    # Help pages and contact form
    path("help/", include("apps.help.urls")),
]
