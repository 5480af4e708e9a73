"""Authentication backend answering object permission checks on content items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.contrib.auth.backends import BaseBackend

from contents.conf import settings
from contents.models import ContentItemModel
from contents.services import Permissions

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractBaseUser, AnonymousUser


class ContentPermissionBackend(BaseBackend):
    """Grants the edit permission on single content items.

    Model level permissions are left to django.contrib.auth.backends.ModelBackend, which must be configured as well.
    A user may edit a content item if they hold the edit permission configured in CONTENTS_EDIT_PERMISSION
    (contents.edit_content by default), or if they hold contents.edit_own_content and the item is theirs.
    Items without an owner are new items that will belong to whoever saves them.
    """

    def has_perm(self, user_obj: AbstractBaseUser | AnonymousUser, perm: str, obj: Any = None) -> bool:
        """Returns True if user_obj may edit the content item obj.

        The edit permission is the one configured in CONTENTS_EDIT_PERMISSION.
        """
        edit_permission = settings.CONTENTS_EDIT_PERMISSION
        if perm != edit_permission or not isinstance(obj, ContentItemModel):
            return False
        if not user_obj.is_active:
            return False

        if user_obj.has_perm(edit_permission):
            return True

        if not user_obj.has_perm(Permissions.EDIT_OWN_CONTENT):
            return False
        return obj.owner_id is None or obj.owner_id == user_obj.pk
