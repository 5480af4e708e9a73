"""Admin registration of the contents models."""

from django.contrib import admin

from contents.models import ContentItemModel, ContentTypeDefinitionModel


@admin.register(ContentTypeDefinitionModel)
class ContentTypeDefinitionAdmin(admin.ModelAdmin[ContentTypeDefinitionModel]):
    """Maintains the content type definitions, including their listable setting."""

    list_display = ('name', 'display_name')
    search_fields = ('name', 'display_name')


@admin.register(ContentItemModel)
class ContentItemAdmin(admin.ModelAdmin[ContentItemModel]):
    """Maintains content items."""

    list_display = ('display_text', 'content_type', 'owner', 'created_at')
    list_filter = ('content_type',)
