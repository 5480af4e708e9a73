"""Class loggers for the contentdesk project.

Every logger handed out here is a child of the contentdesk logger. Its level is set through
CONTENTDESK_LOG_LEVEL in the LOGGING setting, and its records reach the console handler of the root logger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

ROOT_LOGGER_NAME = 'contentdesk'


class LoggerMixin:
    """Gives classes such as the filter box builder and the content list view their own logger.

    Subclasses log through cls.logger, which is named contentdesk.<module>.<class>.
    For example, FilterBoxBuilder logs to contentdesk.contents.filter_box.FilterBoxBuilder
    when a content type is hidden from a user.
    """

    logger: logging.Logger

    @classmethod
    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Creates the contentdesk.<module>.<class> logger for the new subclass."""
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(ROOT_LOGGER_NAME).getChild(cls.__module__).getChild(cls.__name__)
