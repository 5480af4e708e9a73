"""This module contains the template tag rendering the filter box of the content list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from django import template

from contents.filter_box import FilterBoxBuilder
from contents.services import RequestPrincipalResolver

if TYPE_CHECKING:
    from typing import Any

    from contents.options import ContentOptions


register = template.Library()


@register.inclusion_tag('contents/filter_box.html', takes_context=True)
def filter_box(context: dict[str, Any], options: ContentOptions | None) -> dict[str, Any]:
    """Renders the filter box for the given options and the user of the current request.

    Args:
        context: The template context, expected to contain the request.
        options: The currently applied filter options.

    Returns:
        The context of the filter box template. Its 'filter_box' entry is None if nothing should be rendered.
    """
    principal = RequestPrincipalResolver.resolve(context.get('request'))
    view_model = FilterBoxBuilder.from_settings().build(options, principal)
    return {'filter_box': view_model}
