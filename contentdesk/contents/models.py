"""Models for content type definitions and content items."""

from __future__ import annotations

from typing import Any, ClassVar

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _
from django_stubs_ext.db.models import TypedModelMeta


def _default_type_settings() -> dict[str, Any]:
    return {'listable': False}


class ContentTypeDefinitionModel(models.Model):
    """Definition of a content type, e.g. article or page.

    The settings are stored as a JSON object. Only the 'listable' key is read by the contents app.
    """

    name = models.CharField(verbose_name=_('Name'), max_length=100, unique=True)
    display_name = models.CharField(verbose_name=_('Display Name'), max_length=255)
    settings = models.JSONField(verbose_name=_('Settings'), default=_default_type_settings, blank=True)

    class Meta(TypedModelMeta):
        """Meta options for the content type definitions."""

        ordering: ClassVar[list[str]] = ['name']
        verbose_name = _('Content Type Definition')
        verbose_name_plural = _('Content Type Definitions')

    def __str__(self) -> str:
        """Returns the display name and the technical name."""
        return f'{self.display_name} ({self.name})'


class ContentItemModel(models.Model):
    """A single content item of some content type."""

    content_type = models.CharField(verbose_name=_('Content Type'), max_length=100, db_index=True)
    display_text = models.CharField(verbose_name=_('Display Text'), max_length=255, blank=True, default='')
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        verbose_name=_('Owner'),
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='content_items',
    )
    created_at = models.DateTimeField(verbose_name=_('Created'), auto_now_add=True)

    class Meta(TypedModelMeta):
        """Meta options including the edit permissions checked by the filter box."""

        verbose_name = _('Content Item')
        verbose_name_plural = _('Content Items')
        permissions: ClassVar[list[tuple[str, str]]] = [
            ('edit_content', 'Can edit content of all users'),
            ('edit_own_content', 'Can edit own content'),
        ]

    def __str__(self) -> str:
        """Returns the display text, or the content type for items without one."""
        return self.display_text or self.content_type
