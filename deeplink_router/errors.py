"""Configuration-time errors raised while building a deep link router.

Dispatching and generating links never raise for untrusted input; these
errors only surface while routes are being registered at startup.
"""


class DeepLinkError(Exception):
    """Base class for deeplink_router errors."""


class InvalidPatternError(DeepLinkError, ValueError):
    """A path template cannot be parsed into a usable pattern."""


class RouteConflictError(DeepLinkError):
    """A route with the same shape is already registered."""

    def __init__(self, template: str, existing: str):
        self.template = template
        self.existing = existing
        super().__init__(
            f"Pattern {template!r} has the same shape as already registered {existing!r}"
        )
