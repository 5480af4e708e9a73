"""Django Contents app."""

from django.apps import AppConfig


class ContentsConfig(AppConfig):
    """Contents application configuration."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contents'
