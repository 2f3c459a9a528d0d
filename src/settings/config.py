import logging
import re
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
_PLACEHOLDERS = {"", "your_telegram_bot_token", "changeme"}


class Telegram(BaseModel):
    token: str | None = Field(None, description="Telegram Bot Token")
    bot_username: str | None = Field(
        None, description="Bot username, enables t.me start links in shared messages"
    )


class App(BaseModel):
    name: str = Field("NetPay", description="Product name shown to users")
    version: str = Field("1.0.0", description="Client version")


class DeepLinking(BaseModel):
    scheme: str = Field("netpay", description="Custom application URI scheme")
    base_url: str = Field("https://www.netpayy.ng", description="Web origin for links")

    @field_validator("scheme")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not _SCHEME_RE.match(value):
            raise ValueError(f"{value!r} is not a valid URI scheme")
        if value.lower() in ("http", "https"):
            raise ValueError("application scheme must differ from http/https")
        return value

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith("https://") or len(value.rstrip("/")) <= len("https://"):
            raise ValueError("base_url must be an absolute https:// URL")
        return value.rstrip("/")


class BaseConfiguration(BaseSettings):
    telegram: Telegram = Telegram()
    app: App = App()
    deep_linking: DeepLinking = DeepLinking()
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


def validate_environment(config: BaseConfiguration) -> Tuple[bool, List[str]]:
    """Check the settings the bot needs at runtime but that may be absent at import."""
    errors = []
    if (config.telegram.token or "").strip().lower() in _PLACEHOLDERS:
        errors.append("TELEGRAM__TOKEN is not set or is using a placeholder value")
    if not config.app.name or config.app.name == "your_app_name":
        errors.append("APP__NAME is not set or is using a placeholder value")
    username = config.telegram.bot_username
    if username is not None and not re.match(r"^[A-Za-z0-9_]{5,32}$", username.lstrip("@")):
        errors.append(f"TELEGRAM__BOT_USERNAME {username!r} is not a valid bot username")
    return not errors, errors


def log_environment_config(config: BaseConfiguration) -> None:
    if not config.debug:
        return
    logger.info("App: %s v%s", config.app.name, config.app.version)
    logger.info("Scheme: %s", config.deep_linking.scheme)
    logger.info("URL: %s", config.deep_linking.base_url)
    logger.info("Telegram token: %s", "set" if config.telegram.token else "not set")
    logger.info("Debug mode: enabled")


CONFIG = BaseConfiguration()
