import logging
from typing import Callable

from telegram.ext import Application, CommandHandler, ContextTypes

from constants import messages
from deeplink_router.registrar import link_message_handler, register_routes
from src.bot.urls import DeepLinks
from src.bot.views.check import CheckView
from src.bot.views.links import HelpView, LinkMessageView, OpenLinkView, StartView
from src.bot.views.share import ShareView


logger = logging.getLogger(__name__)


def register_all_handlers(app: Application, deep_links: DeepLinks) -> Callable[[], None]:
    """Wire the bot entry points; returns a callable that detaches them."""
    app.bot_data["deep_links"] = deep_links
    handlers = [
        CommandHandler("start", StartView.as_handler()),
        CommandHandler("open", OpenLinkView.as_handler()),
        CommandHandler("share", ShareView.as_handler()),
        CommandHandler("check", CheckView.as_handler()),
        CommandHandler("help", HelpView.as_handler()),
        link_message_handler(
            LinkMessageView.as_handler(), deep_links.router.scheme, deep_links.base_url
        ),
    ]
    return register_routes(app, handlers)


async def log_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Application error handler: a failing view must not stop the bot."""
    update_id = getattr(update, "update_id", None)
    logger.error("Error while handling update %s", update_id, exc_info=context.error)
    message = getattr(update, "effective_message", None)
    if message is not None:
        await message.reply_text(messages.MSG_UNKNOWN_ERROR)
