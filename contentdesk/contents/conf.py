"""Runtime access to the contents app configuration with defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured

__all__ = ['ContentsSettings', 'settings']


@dataclass
class ContentsSettings:
    """Proxy object exposing Django settings with fallbacks for the contents app."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)

    def filter_box_path(self, role: str) -> str:
        """Returns the import path configured for a filter box collaborator role."""
        configured = {**self.defaults['CONTENTS_FILTER_BOX'], **self.CONTENTS_FILTER_BOX}
        try:
            return str(configured[role])
        except KeyError as exception:
            err_msg = f'Unknown filter box collaborator role: {role}.'
            raise ImproperlyConfigured(err_msg) from exception


settings = ContentsSettings(
    defaults={
        'CONTENTS_FILTER_BOX': {
            'DEFINITION_STORE': 'contents.services.ModelContentDefinitionStore',
            'AUTHORIZATION_SERVICE': 'contents.services.PermissionAuthorizationService',
            'CONTENT_MANAGER': 'contents.services.ContentManager',
            'LOCALIZER': 'contents.services.GettextLocalizer',
        },
        'CONTENTS_EDIT_PERMISSION': 'contents.edit_content',
    }
)
