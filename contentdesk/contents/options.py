"""Filter options of the content list and their parsing from the query string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from django import forms
from django.db import models
from django.utils.translation import gettext_lazy as _

if TYPE_CHECKING:
    from collections.abc import Mapping


class ContentsOrder(models.TextChoices):
    """Field the content list is sorted by."""

    CREATED = 'Created', _('Created')
    MODIFIED = 'Modified', _('Modified')
    PUBLISHED = 'Published', _('Published')


class SortDirection(models.TextChoices):
    """Direction the content list is sorted in."""

    ASCENDING = 'Ascending', _('Ascending')
    DESCENDING = 'Descending', _('Descending')


class ContentsStatus(models.TextChoices):
    """Which versions of the content items are listed."""

    LATEST = 'Latest', _('Latest')
    OWNER = 'Owner', _('Owner')
    PUBLISHED = 'Published', _('Published')
    DRAFT = 'Draft', _('Draft')
    ALL_VERSIONS = 'AllVersions', _('All versions')


class ContentOptionsForm(forms.Form):
    """Validates the filter options submitted by the filter box."""

    order_by = forms.ChoiceField(choices=ContentsOrder.choices, required=False)
    sort_direction = forms.ChoiceField(choices=SortDirection.choices, required=False)
    contents_status = forms.ChoiceField(choices=ContentsStatus.choices, required=False)
    type_name = forms.CharField(max_length=100, required=False, strip=True)


@dataclass(frozen=True)
class ContentOptions:
    """The currently applied filter options of the content list."""

    order_by: str = ContentsOrder.MODIFIED
    sort_direction: str = SortDirection.DESCENDING
    contents_status: str = ContentsStatus.LATEST
    type_name: str = ''

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> ContentOptions:
        """Builds the options from request query parameters.

        Missing or unknown values fall back to the defaults of the dataclass fields.

        Args:
            query: The query parameters, usually request.GET.

        Returns:
            The parsed ContentOptions.
        """
        form = ContentOptionsForm(data=query)
        # Invalid fields are dropped from cleaned_data, the valid ones are still usable.
        form.is_valid()
        cleaned = form.cleaned_data
        defaults = cls()
        return cls(
            order_by=cleaned.get('order_by') or defaults.order_by,
            sort_direction=cleaned.get('sort_direction') or defaults.sort_direction,
            contents_status=cleaned.get('contents_status') or defaults.contents_status,
            type_name=cleaned.get('type_name') or defaults.type_name,
        )
