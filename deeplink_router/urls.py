"""Helpers that reduce incoming links to bare, slash-delimited paths."""
import base64
import binascii
import logging
import re
from typing import List, Optional
from urllib.parse import urlsplit


logger = logging.getLogger(__name__)

WEB_PREFIX = "https://"

# Telegram accepts at most 64 characters from [A-Za-z0-9_-] after ?start=
MAX_START_PAYLOAD = 64
_URLSAFE_TO_STD = str.maketrans("-_", "+/")


def normalize_url(url: str, scheme: str) -> str:
    """Strip the app scheme or the web origin from *url*.

    ``netpay://referral/ABC`` and ``https://www.netpayy.ng/referral/ABC``
    both become ``referral/ABC``. Anything else is taken as a path already.
    A malformed ``https://`` URL yields an empty path instead of an error.
    """
    prefix = f"{scheme}://"
    if url.startswith(prefix):
        path = url[len(prefix):]
    elif url.startswith(WEB_PREFIX):
        try:
            path = urlsplit(url).path
        except ValueError:
            logger.warning("Could not parse deep link URL (%d chars), ignoring it", len(url))
            return ""
    else:
        path = url

    if path.startswith("/"):
        path = path[1:]
    return path


def split_path(path: str) -> List[str]:
    """Split a normalized path into its non-empty segments."""
    return [part for part in path.split("/") if part]


def encode_start_payload(path: str) -> Optional[str]:
    """Encode a link path for a ``t.me/<bot>?start=`` link.

    Returns ``None`` when the encoded payload would not fit in a Telegram
    start parameter.
    """
    encoded = base64.urlsafe_b64encode(path.encode("utf-8")).decode("ascii").rstrip("=")
    if len(encoded) > MAX_START_PAYLOAD:
        return None
    return encoded


def decode_start_payload(payload: str) -> str:
    """Inverse of :func:`encode_start_payload`; ``""`` if *payload* is not valid."""
    padded = payload + "=" * (-len(payload) % 4)
    try:
        raw = base64.b64decode(padded.translate(_URLSAFE_TO_STD), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        logger.info("Ignoring undecodable start payload")
        return ""


def link_regex(scheme: str, base_url: str) -> "re.Pattern[str]":
    """Regex finding app-scheme links and links on the configured web host in free text."""
    host = re.escape(base_url.rstrip("/"))
    return re.compile(rf"(?<![A-Za-z0-9+.-])(?:{re.escape(scheme)}://|{host}(?=[/?#\s]|$))[^\s<>\"']*")


def find_links(text: str, scheme: str, base_url: str) -> List[str]:
    return [m.group(0).rstrip(".,;:!?)") for m in link_regex(scheme, base_url).finditer(text)]
