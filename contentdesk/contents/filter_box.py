"""Builds the option lists of the filter box shown above the content list.

The filter box offers four drop-downs: the contents status, the sort field, the sort direction and the content type.
The content types are limited to the listable types the current user may edit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from contentdesk.logger import LoggerMixin
from contents.conf import settings
from contents.options import ContentsOrder, ContentsStatus, SortDirection

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from contents.options import ContentOptions
    from contents.services import (
        AuthorizationService,
        ContentDefinitionStore,
        ContentInstantiator,
        ContentTypeDefinition,
        Localizer,
    )


@dataclass(frozen=True)
class SelectListItem:
    """A single option of a drop-down."""

    text: str
    value: str
    selected: bool = False


@dataclass(frozen=True)
class FilterBoxViewModel:
    """Everything the filter box template needs."""

    options: ContentOptions
    content_sorts: tuple[SelectListItem, ...]
    sort_directions: tuple[SelectListItem, ...]
    content_statuses: tuple[SelectListItem, ...]
    content_types: tuple[SelectListItem, ...]


# (label, value) pairs in display order. The labels are translation keys.
CONTENT_STATUS_LABELS: tuple[tuple[str, str], ...] = (
    ('latest', ContentsStatus.LATEST),
    ('owned by me', ContentsStatus.OWNER),
    ('published', ContentsStatus.PUBLISHED),
    ('unpublished', ContentsStatus.DRAFT),
    ('all versions', ContentsStatus.ALL_VERSIONS),
)

CONTENT_SORT_LABELS: tuple[tuple[str, str], ...] = (
    ('recently created', ContentsOrder.CREATED),
    ('recently modified', ContentsOrder.MODIFIED),
    ('recently published', ContentsOrder.PUBLISHED),
)

SORT_DIRECTION_LABELS: tuple[tuple[str, str], ...] = (
    ('Descending', SortDirection.DESCENDING),
    ('Ascending', SortDirection.ASCENDING),
)

ALL_CONTENT_TYPES_LABEL = 'All content types'


def find_selected_index(values: Iterable[str], selected: str | None) -> int | None:
    """Returns the index of the first value equal to selected, or None if there is none."""
    if selected is None:
        return None
    return next((index for index, value in enumerate(values) if value == str(selected)), None)


def filter_authorized(
    definitions: Iterable[ContentTypeDefinition], predicate: Callable[[ContentTypeDefinition], bool]
) -> list[ContentTypeDefinition]:
    """Returns the definitions for which predicate holds, keeping their order.

    The predicate is called once per definition, one after the other.
    """
    return [definition for definition in definitions if predicate(definition)]


class FilterBoxBuilder(LoggerMixin):
    """Assembles the FilterBoxViewModel for one request."""

    def __init__(
        self,
        definition_store: ContentDefinitionStore,
        authorization_service: AuthorizationService,
        content_manager: ContentInstantiator,
        localizer: Localizer,
        edit_permission: str | None = None,
    ) -> None:
        """Initializes the builder with its collaborators.

        Args:
            definition_store: Source of the content type definitions.
            authorization_service: Decides whether the user may edit an item of a type.
            content_manager: Creates the transient items passed to the authorization service.
            localizer: Translates the static labels.
            edit_permission: The permission checked per content type. Defaults to CONTENTS_EDIT_PERMISSION.
        """
        self.definition_store = definition_store
        self.authorization_service = authorization_service
        self.content_manager = content_manager
        self.localizer = localizer
        self.edit_permission = edit_permission or settings.CONTENTS_EDIT_PERMISSION

    @classmethod
    def from_settings(cls) -> FilterBoxBuilder:
        """Creates a builder with the collaborators configured in CONTENTS_FILTER_BOX.

        Raises:
            ImproperlyConfigured: If a configured import path cannot be imported.
        """
        collaborators: dict[str, Any] = {}
        for argument, role in (
            ('definition_store', 'DEFINITION_STORE'),
            ('authorization_service', 'AUTHORIZATION_SERVICE'),
            ('content_manager', 'CONTENT_MANAGER'),
            ('localizer', 'LOCALIZER'),
        ):
            path = settings.filter_box_path(role)
            try:
                collaborator_class = import_string(path)
            except ImportError as exception:
                exc_msg = f'CONTENTS_FILTER_BOX[{role!r}] refers to {path!r}, which cannot be imported.'
                raise ImproperlyConfigured(exc_msg) from exception
            collaborators[argument] = collaborator_class()
        return cls(**collaborators)

    def build(self, options: ContentOptions | None, principal: Any) -> FilterBoxViewModel | None:
        """Builds the view model of the filter box.

        Args:
            options: The currently applied filter options.
            principal: The current user.

        Returns:
            The view model, or None if there are no options or no user. Nothing is rendered in that case.
        """
        if options is None:
            self.logger.debug('No filter options given, the filter box is not rendered.')
            return None
        if principal is None:
            self.logger.debug('No authenticated user, the filter box is not rendered.')
            return None

        return FilterBoxViewModel(
            options=options,
            content_sorts=self.content_sort_options(options.order_by),
            sort_directions=self.sort_direction_options(options.sort_direction),
            content_statuses=self.content_status_options(options.contents_status),
            content_types=self.content_type_options(options.type_name, principal),
        )

    def content_status_options(self, selected: str | None) -> tuple[SelectListItem, ...]:
        """Returns the contents status options, marking selected."""
        return self._fixed_options(CONTENT_STATUS_LABELS, selected)

    def content_sort_options(self, selected: str | None) -> tuple[SelectListItem, ...]:
        """Returns the sort field options, marking selected."""
        return self._fixed_options(CONTENT_SORT_LABELS, selected)

    def sort_direction_options(self, selected: str | None) -> tuple[SelectListItem, ...]:
        """Returns the sort direction options, descending first, marking selected."""
        return self._fixed_options(SORT_DIRECTION_LABELS, selected)

    def content_type_options(self, selected_type_name: str | None, principal: Any) -> tuple[SelectListItem, ...]:
        """Returns the content types the principal may edit, preceded by an 'All content types' option.

        Only listable types are offered. Each one costs a call to the authorization service, made sequentially.
        Errors of the definition store or the authorization service are not handled here.

        Args:
            selected_type_name: The type name to mark as selected. Empty or None selects 'All content types'.
            principal: The user whose edit permission is checked.

        Returns:
            The options, ordered by type name after the leading 'All content types' option.
        """
        listable = [
            definition
            for definition in self.definition_store.list_type_definitions()
            if definition.settings.listable
        ]

        def can_edit(definition: ContentTypeDefinition) -> bool:
            authorized = self.authorization_service.authorize(
                principal, self.edit_permission, self.content_manager.new(definition.name)
            )
            if not authorized:
                self.logger.debug('Content type %s is hidden from %s.', definition.name, principal)
            return authorized

        editable = sorted(filter_authorized(listable, can_edit), key=lambda definition: definition.name)

        return (
            SelectListItem(
                text=self.localizer.translate(ALL_CONTENT_TYPES_LABEL), value='', selected=not selected_type_name
            ),
            *(
                SelectListItem(
                    text=definition.display_name,
                    value=definition.name,
                    selected=definition.name == selected_type_name,
                )
                for definition in editable
            ),
        )

    def _fixed_options(self, labels: tuple[tuple[str, str], ...], selected: str | None) -> tuple[SelectListItem, ...]:
        selected_index = find_selected_index((value for _, value in labels), selected)
        return tuple(
            SelectListItem(text=self.localizer.translate(label), value=str(value), selected=index == selected_index)
            for index, (label, value) in enumerate(labels)
        )
