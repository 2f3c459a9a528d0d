"""Render screen requests produced by deep links into chat replies."""
import logging
from typing import Callable, Dict, Optional, Tuple

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from constants import messages
from src.bot.navigation import ScreenRequest


logger = logging.getLogger(__name__)

Rendered = Tuple[str, Optional[InlineKeyboardMarkup]]

TITLES = {
    "auth/email-verification": "Email verification",
    "auth/reset-password": "Reset password",
    "transaction-details": "Transaction details",
    "referral": "Refer & earn",
    "airtime-purchase": "Buy airtime",
    "data-purchase": "Buy data",
    "cable-tv-purchase": "Cable TV subscription",
    "electricity-purchase": "Pay electricity bill",
    "betting-purchase": "Fund betting wallet",
    "education-purchase": "Pay school fees",
    "tabs/profile": "Profile",
    "tabs/transactions": "Transactions",
    "tabs/index": "Dashboard",
    "add-money": "Add money",
    "transfer": "Transfer",
    "earnings": "Earnings",
    "help-support": "Help & support",
    "contact-us": "Contact us",
    "about-netpay": "About NetPay",
    "terms-conditions": "Terms & conditions",
    "privacy-policy": "Privacy policy",
}

NETWORKS = {"mtn": "MTN", "airtel": "Airtel", "glo": "Glo", "9mobile": "9mobile"}
PROVIDERS = {
    "dstv": "DSTV",
    "gotv": "GOtv",
    "startimes": "StarTimes",
    "ikeja": "Ikeja Electric",
    "ekedc": "Eko Electricity",
    "ibedc": "IBEDC",
    "kedco": "KEDCO",
    "kaedco": "KAEDCO",
    "bedc": "BEDC",
    "bet9ja": "Bet9ja",
    "nairabet": "Nairabet",
    "sportybet": "SportyBet",
    "betking": "BetKing",
    "merrybet": "MerryBet",
    "betway": "Betway",
}
EXAMS = {
    "unilag": "University of Lagos",
    "ui": "University of Ibadan",
    "oau": "Obafemi Awolowo University",
    "uniben": "University of Benin",
}


def mask(value: str, visible: int = 4) -> str:
    """Hide all but the last characters of a secret such as a reset token."""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def _render_token(r: ScreenRequest) -> str:
    token = r.params.get("token")
    return f"Token: {mask(token)}" if token else ""


def _render_transaction(r: ScreenRequest) -> str:
    kind = "Transfer" if r.params.get("type") == "transfer" else "Payment"
    return f"{kind} reference: {r.params.get('id', '')}"


def _render_referral(r: ScreenRequest) -> str:
    code = r.params.get("code")
    return f"Referral code: {code}" if code else ""


def _lookup(key: str, names: Dict[str, str], label: str) -> Callable[[ScreenRequest], str]:
    def _render(r: ScreenRequest) -> str:
        value = r.params.get(key)
        if not value:
            return ""
        return f"{label}: {names.get(value.lower(), value)}"

    return _render


DETAILS: Dict[str, Callable[[ScreenRequest], str]] = {
    "auth/email-verification": _render_token,
    "auth/reset-password": _render_token,
    "transaction-details": _render_transaction,
    "referral": _render_referral,
    "airtime-purchase": _lookup("network", NETWORKS, "Network"),
    "data-purchase": _lookup("network", NETWORKS, "Network"),
    "cable-tv-purchase": _lookup("provider", PROVIDERS, "Provider"),
    "electricity-purchase": _lookup("provider", PROVIDERS, "Provider"),
    "betting-purchase": _lookup("provider", PROVIDERS, "Provider"),
    "education-purchase": _lookup("exam", EXAMS, "Institution"),
}


def render(request: ScreenRequest, app_name: str, base_url: str) -> Rendered:
    """Convert a screen request to text/markup for Telegram."""
    title = TITLES.get(request.screen)
    if title is None:
        logger.warning("No renderer for screen %r", request.screen)
        return messages.MSG_SCREEN_UNKNOWN, None

    lines = [title]
    detail = DETAILS.get(request.screen, lambda _: "")(request)
    if detail:
        lines.append(detail)
    lines.append(messages.MSG_SCREEN_OPEN_IN_APP.format(app_name=app_name))

    markup = InlineKeyboardMarkup([[InlineKeyboardButton(f"Open {app_name}", url=base_url)]])
    return "\n\n".join(lines), markup
