"""Deep link routing for chat clients of app-style products.

This package provides:
    • Router / path() — ordered ``segment/:param`` patterns, first match wins.
    • LinkGenerator — the inverse: link type + params -> web or app-scheme URL.
    • normalize_url() — reduces ``app://`` and ``https://`` links to bare paths.
    • Helpers to attach link entry points to python-telegram-bot handlers.

Usage example::

    from deeplink_router.router import Router, path
    from deeplink_router.generator import LinkGenerator

    router = Router(scheme="netpay")
    path(router, "referral/:code", open_referral, name="referral")

    router.dispatch("netpay://referral/ABC123")   # -> True
    LinkGenerator.from_router(router, "https://www.netpayy.ng").web_link(
        "referral", {"code": "ABC123"}
    )

"""
