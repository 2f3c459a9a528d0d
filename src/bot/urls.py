"""Deep link configuration for the NetPay bot.

One table drives both directions: the router that turns incoming links into
screen requests, and the generator that builds shareable links.
"""
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

from deeplink_router.generator import LinkGenerator
from deeplink_router.router import Params, Router, path
from src.bot.navigation import Navigator, ScreenQueue


class LinkTarget(NamedTuple):
    type: str
    template: str
    screen: str
    query: Optional[Dict[str, str]] = None  # fixed values added to the screen params


LINKS = (
    # Auth
    LinkTarget("verify-email", "verify-email/:token", "auth/email-verification"),
    LinkTarget("email-verification", "email-verification/:token", "auth/email-verification"),
    LinkTarget("reset-password", "reset-password/:token", "auth/reset-password"),
    LinkTarget("password-reset", "password-reset/:token", "auth/reset-password"),
    # Transactions
    LinkTarget("payment", "payment/:id", "transaction-details"),
    LinkTarget("transfer", "transfer/:id", "transaction-details", {"type": "transfer"}),
    LinkTarget("referral", "referral/:code", "referral"),
    # Purchases
    LinkTarget("airtime", "airtime/:network", "airtime-purchase"),
    LinkTarget("data", "data/:network", "data-purchase"),
    LinkTarget("cable", "cable/:provider", "cable-tv-purchase"),
    LinkTarget("electricity", "electricity/:provider", "electricity-purchase"),
    LinkTarget("betting", "betting/:provider", "betting-purchase"),
    LinkTarget("education", "education/:exam", "education-purchase"),
    # Plain screens
    LinkTarget("profile", "profile", "tabs/profile"),
    LinkTarget("transactions", "transactions", "tabs/transactions"),
    LinkTarget("dashboard", "dashboard", "tabs/index"),
    LinkTarget("add-money", "add-money", "add-money"),
    LinkTarget("transfer", "transfer", "transfer"),
    LinkTarget("earnings", "earnings", "earnings"),
    LinkTarget("referral", "referral", "referral"),
    LinkTarget("support", "support", "help-support"),
    LinkTarget("contact", "contact", "contact-us"),
    LinkTarget("about", "about", "about-netpay"),
    LinkTarget("terms", "terms", "terms-conditions"),
    LinkTarget("privacy", "privacy", "privacy-policy"),
)


def navigate(navigator: Navigator, screen: str, query: Optional[Dict[str, str]] = None):
    """Handler that asks *navigator* for *screen* with the link params plus *query*."""

    def _handler(params: Params) -> None:
        navigator.push(screen, {**params, **(query or {})})

    return _handler


def build_router(navigator: Navigator, scheme: str) -> Router:
    router = Router(scheme=scheme)
    for target in LINKS:
        path(router, target.template, navigate(navigator, target.screen, target.query), name=target.type)
    return router


def build_generator(router: Router, base_url: str) -> LinkGenerator:
    return LinkGenerator.from_router(router, base_url)


@dataclass
class DeepLinks:
    """Everything the bot views need to open and share links, kept in ``bot_data``."""

    router: Router
    generator: LinkGenerator
    navigator: ScreenQueue
    app_name: str
    base_url: str
    bot_username: Optional[str] = None


def build_deep_links(
    scheme: str,
    base_url: str,
    app_name: str = "NetPay",
    bot_username: Optional[str] = None,
) -> DeepLinks:
    navigator = ScreenQueue()
    router = build_router(navigator, scheme)
    return DeepLinks(
        router=router,
        generator=build_generator(router, base_url),
        navigator=navigator,
        app_name=app_name,
        base_url=base_url.rstrip("/"),
        bot_username=bot_username,
    )
