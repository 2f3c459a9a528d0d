from typing import Mapping, Optional

from constants import messages
from deeplink_router.generator import LinkGenerator
from deeplink_router.urls import encode_start_payload


def start_link(bot_username: str, path: str) -> Optional[str]:
    """``https://t.me/<bot>?start=<payload>`` for *path*, or None if it does not fit."""
    payload = encode_start_payload(path)
    if payload is None:
        return None
    return f"https://t.me/{bot_username.lstrip('@')}?start={payload}"


def compose_share_message(
    generator: LinkGenerator,
    link_type: str,
    params: Optional[Mapping[str, str]] = None,
    message: str = messages.MSG_SHARE_DEFAULT,
    show_app_scheme: bool = False,
    bot_username: Optional[str] = None,
) -> str:
    web_url = generator.web_link(link_type, params)
    if show_app_scheme:
        app_url = generator.app_link(link_type, params)
        content = f"{message}\n\nWeb: {web_url}\nApp: {app_url}"
    else:
        content = f"{message}\n\n{web_url}"

    path = generator.path_for(link_type, params)
    if bot_username and path:
        tg_url = start_link(bot_username, path)
        if tg_url:
            content += f"\nTelegram: {tg_url}"
    return content
