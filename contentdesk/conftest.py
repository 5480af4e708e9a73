"""pytest configuration and shared fixtures for the contentdesk tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Permission

from contents.models import ContentTypeDefinitionModel

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.contrib.auth.models import AbstractUser


# ----------------------------
# User Fixtures
# ----------------------------


def _grant(user: AbstractUser, *codenames: str) -> AbstractUser:
    """Grants the contents permissions and returns a fresh instance, bypassing the permission cache."""
    permissions = Permission.objects.filter(content_type__app_label='contents', codename__in=codenames)
    user.user_permissions.add(*permissions)
    return get_user_model().objects.get(pk=user.pk)


@pytest.fixture
def plain_user(db: None) -> AbstractUser:
    """A user without any permission."""
    return get_user_model().objects.create_user(username='reader', password='reader-password')  # noqa: S106


@pytest.fixture
def editor(db: None) -> AbstractUser:
    """A user allowed to edit all content."""
    user = get_user_model().objects.create_user(username='editor', password='editor-password')  # noqa: S106
    return _grant(user, 'edit_content')


@pytest.fixture
def author(db: None) -> AbstractUser:
    """A user allowed to edit only their own content."""
    user = get_user_model().objects.create_user(username='author', password='author-password')  # noqa: S106
    return _grant(user, 'edit_own_content')


# ----------------------------
# Content Type Definition Fixtures
# ----------------------------


@pytest.fixture
def create_type_definition(db: None) -> Callable[..., ContentTypeDefinitionModel]:
    """Factory fixture storing a content type definition."""

    def _create(name: str, display_name: str | None = None, **type_settings: Any) -> ContentTypeDefinitionModel:
        return ContentTypeDefinitionModel.objects.create(
            name=name,
            display_name=display_name or name.title(),
            settings=type_settings,
        )

    return _create
