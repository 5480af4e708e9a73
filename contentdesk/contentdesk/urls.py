"""URL configuration for the contentdesk project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.0/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from django.views.generic.base import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('contents/', include('contents.urls')),
    path('', RedirectView.as_view(pattern_name='contents:list', permanent=False)),
]
