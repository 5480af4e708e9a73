"""Test cases for the content permission backend."""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser, Group, Permission
from django.test import TestCase, override_settings

from contents.backends import ContentPermissionBackend
from contents.models import ContentItemModel
from contents.services import Permissions

User = get_user_model()


class ContentPermissionBackendTests(TestCase):
    """Test cases for the object level edit permission on content items."""

    @classmethod
    def setUpTestData(cls) -> None:
        """Create users with different edit permissions."""
        edit_content = Permission.objects.get(content_type__app_label='contents', codename='edit_content')
        edit_own_content = Permission.objects.get(content_type__app_label='contents', codename='edit_own_content')

        cls.editor = User.objects.create_user(username='editor')
        cls.editor.user_permissions.add(edit_content)

        cls.author = User.objects.create_user(username='author')
        cls.author.user_permissions.add(edit_own_content)

        authors = Group.objects.create(name='authors')
        authors.permissions.add(edit_own_content)
        cls.group_author = User.objects.create_user(username='group-author')
        cls.group_author.groups.add(authors)

        cls.reader = User.objects.create_user(username='reader')
        cls.admin = User.objects.create_superuser(username='admin')

    def setUp(self) -> None:
        """Reload the users so that no permission cache is carried over."""
        self.backend = ContentPermissionBackend()
        for name in ('editor', 'author', 'group_author', 'reader', 'admin'):
            setattr(self, name, User.objects.get(pk=getattr(self, name).pk))

    def test_editor_may_edit_any_item(self) -> None:
        """edit_content covers items of other users."""
        item = ContentItemModel(content_type='article', owner=self.author)

        assert self.backend.has_perm(self.editor, Permissions.EDIT_CONTENT, item)

    def test_author_may_edit_new_item(self) -> None:
        """A new item without owner may be edited by users with edit_own_content."""
        assert self.backend.has_perm(self.author, Permissions.EDIT_CONTENT, ContentItemModel(content_type='article'))

    def test_author_may_edit_own_item(self) -> None:
        """Own items may be edited with edit_own_content."""
        item = ContentItemModel(content_type='article', owner=self.author)

        assert self.backend.has_perm(self.author, Permissions.EDIT_CONTENT, item)

    def test_author_may_not_edit_foreign_item(self) -> None:
        """Items of other users need edit_content."""
        item = ContentItemModel(content_type='article', owner=self.editor)

        assert not self.backend.has_perm(self.author, Permissions.EDIT_CONTENT, item)

    def test_group_permission(self) -> None:
        """Permissions granted through a group count as well."""
        assert self.backend.has_perm(
            self.group_author, Permissions.EDIT_CONTENT, ContentItemModel(content_type='article')
        )

    def test_reader_may_not_edit(self) -> None:
        """Users without any edit permission are denied."""
        assert not self.backend.has_perm(self.reader, Permissions.EDIT_CONTENT, ContentItemModel(content_type='page'))

    def test_inactive_user_is_denied(self) -> None:
        """Inactive users never pass."""
        self.editor.is_active = False

        assert not self.backend.has_perm(self.editor, Permissions.EDIT_CONTENT, ContentItemModel(content_type='page'))

    def test_anonymous_user_is_denied(self) -> None:
        """Anonymous users never pass."""
        assert not self.backend.has_perm(
            AnonymousUser(), Permissions.EDIT_CONTENT, ContentItemModel(content_type='page')
        )

    def test_other_permissions_are_not_answered(self) -> None:
        """Only the edit permission is handled by this backend."""
        item = ContentItemModel(content_type='page')

        assert not self.backend.has_perm(self.editor, 'contents.delete_contentitemmodel', item)

    def test_other_objects_are_not_answered(self) -> None:
        """Model level checks and foreign objects are left to the other backends."""
        assert not self.backend.has_perm(self.editor, Permissions.EDIT_CONTENT)
        assert not self.backend.has_perm(self.editor, Permissions.EDIT_CONTENT, object())

    def test_user_has_perm_goes_through_backend(self) -> None:
        """With both backends configured, user.has_perm answers object checks."""
        item = ContentItemModel(content_type='page')

        assert self.author.has_perm(Permissions.EDIT_CONTENT, item)
        assert not self.reader.has_perm(Permissions.EDIT_CONTENT, item)
        assert self.admin.has_perm(Permissions.EDIT_CONTENT, item)

    @override_settings(CONTENTS_EDIT_PERMISSION='contents.change_contentitemmodel')
    def test_configured_edit_permission(self) -> None:
        """The backend answers the permission configured in CONTENTS_EDIT_PERMISSION."""
        changer = User.objects.create_user(username='changer')
        changer.user_permissions.add(
            Permission.objects.get(content_type__app_label='contents', codename='change_contentitemmodel')
        )
        changer = User.objects.get(pk=changer.pk)
        item = ContentItemModel(content_type='page', owner=self.editor)

        assert self.backend.has_perm(changer, 'contents.change_contentitemmodel', item)
        assert not self.backend.has_perm(self.reader, 'contents.change_contentitemmodel', item)
        assert not self.backend.has_perm(self.editor, Permissions.EDIT_CONTENT, item)
        assert self.author.has_perm('contents.change_contentitemmodel', ContentItemModel(content_type='page'))
