"""User-facing texts of the NetPay bot."""

MSG_GREETING = (
    "Welcome to {app_name}! Open a NetPay link here, or send /help to see what I can do."
)
MSG_HELP = (
    "Send me any NetPay link (netpay://... or {base_url}/...) and I will take you to the right screen.\n\n"
    "/open <link> - open a NetPay link\n"
    "/share <type> [key=value ...] - get a shareable link\n"
    "/check <kind> <value> - check a PIN, password, email, phone or amount before using it in the app\n"
    "/help - show this message"
)
MSG_OPEN_USAGE = "Usage: /open <link>, for example /open {example}"
MSG_SHARE_USAGE = "Usage: /share <type> [key=value ...]\nAvailable types: {types}"
MSG_SHARE_UNKNOWN_TYPE = "Unknown link type {link_type!r}.\nAvailable types: {types}"
MSG_SHARE_BAD_PARAM = "Parameters must look like key=value, got {arg!r}."
MSG_SHARE_DEFAULT = "Check out this feature on NetPay!"
MSG_UNKNOWN_ERROR = "Something went wrong, please try again."

MSG_SCREEN_OPEN_IN_APP = "Continue in the {app_name} app."
MSG_SCREEN_UNKNOWN = "This screen is not available here yet."

MSG_CHECK_USAGE = "Usage: /check <kind> <value>\nAvailable kinds: {kinds}"
MSG_CHECK_UNKNOWN_KIND = "Unknown check {kind!r}.\nAvailable kinds: {kinds}"
MSG_CHECK_OK = "Looks good."
