"""URL configuration for the metabox demo site."""
from django.urls import include, path

urlpatterns = [
    path("accounts/", include("django.contrib.auth.urls")),
    path("meta/", include("django_metabox.urls")),
]
