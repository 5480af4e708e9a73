"""Views of the contents application."""

from __future__ import annotations

from typing import Any

from django.views.generic.base import TemplateView

from contentdesk.logger import LoggerMixin
from contents.options import ContentOptions


class ContentListView(LoggerMixin, TemplateView):
    """Renders the content list page with its filter box."""

    template_name = 'contents/content_list.html'
    http_method_names = ('get',)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        """Adds the filter options parsed from the query string.

        Args:
            **kwargs: Keyword arguments passed to super().get_context_data.

        Returns:
            The context to render the page.
        """
        context = super().get_context_data(**kwargs)
        options = ContentOptions.from_query(self.request.GET)
        self.logger.debug('Rendering content list with %s.', options)
        context['options'] = options
        context['page_category'] = 'contents'
        context['page_name'] = 'list'
        return context
