"""Attach handlers to a python-telegram-bot Application for a bounded lifetime."""
import logging
from typing import Callable, List, Sequence

from telegram.ext import Application, BaseHandler, MessageHandler, filters

from .urls import link_regex


logger = logging.getLogger(__name__)


def link_message_filter(scheme: str, base_url: str) -> filters.BaseFilter:
    """Plain text messages (not commands) that contain at least one deep link."""
    return filters.TEXT & ~filters.COMMAND & filters.Regex(link_regex(scheme, base_url))


def link_message_handler(callback, scheme: str, base_url: str) -> MessageHandler:
    return MessageHandler(link_message_filter(scheme, base_url), callback)


def register_routes(
    app: Application, handlers: Sequence[BaseHandler], group: int = 0
) -> Callable[[], None]:
    """Add *handlers* to *app* and return a callable that removes them again.

    The release callable is safe to call more than once.
    """
    registered: List[BaseHandler] = list(handlers)
    for handler in registered:
        app.add_handler(handler, group)
    logger.info("Registered %d handlers in group %d", len(registered), group)

    def release() -> None:
        while registered:
            app.remove_handler(registered.pop(), group)
        logger.info("Released handlers in group %d", group)

    return release
