from typing import Dict, List, Tuple


def get_message_text(update) -> str:
    """
    Returns the text of the 'active' message of the update:
    - update.message.text (plain messages)
    - update.effective_message.text (edited messages, channel posts)
    """
    msg = getattr(update, "message", None) or getattr(update, "effective_message", None)
    return getattr(msg, "text", None) or ""


def parse_key_values(args: List[str]) -> Tuple[Dict[str, str], List[str]]:
    """Split ``["code=ABC", "junk"]`` into ``({"code": "ABC"}, ["junk"])``."""
    params: Dict[str, str] = {}
    invalid: List[str] = []
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            invalid.append(arg)
            continue
        params[key] = value
    return params, invalid
