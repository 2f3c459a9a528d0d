import asyncio
import os
import sys


project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

if project_root not in sys.path:
    sys.path.insert(0, project_root)

import logging

from dotenv import load_dotenv
from telegram.ext import Application

load_dotenv()

from src.bot.handlers import log_error, register_all_handlers
from src.bot.urls import build_deep_links
from src.settings.config import CONFIG, log_environment_config, validate_environment


if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# --- Logging Setup ---
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.DEBUG if CONFIG.debug else logging.INFO,
)
# httpx logs every Telegram polling request at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def build_application() -> Application:
    deep_links = build_deep_links(
        scheme=CONFIG.deep_linking.scheme,
        base_url=CONFIG.deep_linking.base_url,
        app_name=CONFIG.app.name,
        bot_username=CONFIG.telegram.bot_username,
    )
    release = None

    async def _post_shutdown(_: Application) -> None:
        if release is not None:
            release()

    app = Application.builder().token(CONFIG.telegram.token).post_shutdown(_post_shutdown).build()
    release = register_all_handlers(app, deep_links)
    app.add_error_handler(log_error)
    return app


# --- Main Application Setup ---
if __name__ == "__main__":
    logger.info("Starting bot...")
    log_environment_config(CONFIG)

    is_valid, errors = validate_environment(CONFIG)
    if not is_valid:
        for error in errors:
            logger.critical(error)
        sys.exit(1)

    app = build_application()
    logger.info("Bot is running...")
    app.run_polling()
