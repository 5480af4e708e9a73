"""Collaborators of the filter box and their default implementations backed by Django."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from django.utils.translation import gettext

from contents.models import ContentItemModel, ContentTypeDefinitionModel

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from django.contrib.auth.models import AbstractBaseUser
    from django.http import HttpRequest


class Permissions:
    """Permission strings understood by the authorization service."""

    EDIT_CONTENT = 'contents.edit_content'
    EDIT_OWN_CONTENT = 'contents.edit_own_content'


@dataclass(frozen=True)
class ContentTypeSettings:
    """The typed view of the settings stored with a content type definition."""

    listable: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> ContentTypeSettings:
        """Reads the settings from the stored JSON object, ignoring unknown keys."""
        if not raw:
            return cls()
        return cls(listable=bool(raw.get('listable', False)))


@dataclass(frozen=True)
class ContentTypeDefinition:
    """Read-only definition of a content type."""

    name: str
    display_name: str
    settings: ContentTypeSettings = field(default_factory=ContentTypeSettings)


class ContentDefinitionStore(Protocol):
    """Provides the content type definitions."""

    def list_type_definitions(self) -> Sequence[ContentTypeDefinition]:
        """Returns all content type definitions."""
        ...


class AuthorizationService(Protocol):
    """Decides whether a principal holds a permission on a resource."""

    def authorize(self, principal: Any, permission: str, resource: Any) -> bool:
        """Returns True if the principal holds the permission on the resource."""
        ...


class ContentInstantiator(Protocol):
    """Creates new, unsaved content items."""

    def new(self, type_name: str) -> Any:
        """Returns a transient content item of the given type."""
        ...


class Localizer(Protocol):
    """Translates static labels."""

    def translate(self, key: str) -> str:
        """Returns the translation of key for the active language."""
        ...


class ModelContentDefinitionStore:
    """Reads the content type definitions from the database."""

    def list_type_definitions(self) -> list[ContentTypeDefinition]:
        """Returns the stored definitions as read-only ContentTypeDefinition objects."""
        return [
            ContentTypeDefinition(
                name=definition.name,
                display_name=definition.display_name,
                settings=ContentTypeSettings.from_dict(definition.settings),
            )
            for definition in ContentTypeDefinitionModel.objects.all()
        ]


class PermissionAuthorizationService:
    """Delegates authorization to Django's permission system, including object permissions."""

    def authorize(self, principal: AbstractBaseUser, permission: str, resource: Any) -> bool:
        """Checks permission on resource through the configured authentication backends.

        Args:
            principal: The user to check.
            permission: The permission string, e.g. 'contents.edit_content'.
            resource: The object the permission is checked against.

        Returns:
            True if any backend grants the permission.
        """
        return bool(principal.has_perm(permission, resource))


class ContentManager:
    """Instantiates content items."""

    def new(self, type_name: str) -> ContentItemModel:
        """Returns an unsaved ContentItemModel of the given content type."""
        return ContentItemModel(content_type=type_name)


class GettextLocalizer:
    """Localizes labels through Django's translation machinery."""

    def translate(self, key: str) -> str:
        """Returns the gettext translation of key for the active language."""
        return gettext(key)


class RequestPrincipalResolver:
    """Resolves the authenticated user of a request."""

    @staticmethod
    def resolve(request: HttpRequest | None) -> AbstractBaseUser | None:
        """Returns the authenticated user of the request.

        Args:
            request: The current request, may be None outside of a request cycle.

        Returns:
            The user, or None if there is no request, no user or the user is anonymous.
        """
        user = getattr(request, 'user', None)
        if user is None or not user.is_authenticated:
            return None
        return user
