import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import unquote

from .errors import InvalidPatternError, RouteConflictError
from .urls import normalize_url, split_path


logger = logging.getLogger(__name__)

Params = Dict[str, str]
Handler = Callable[[Params], None]


@dataclass(frozen=True)
class Segment:
    """One position of a pattern: a literal (``profile``) or a parameter (``:code``)."""

    value: str
    is_param: bool = False


@dataclass(frozen=True)
class Pattern:
    template: str
    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, template: str) -> "Pattern":
        """Parse ``reset-password/:token`` into a literal and a parameter segment."""
        segments = []
        seen = set()
        for part in split_path(template):
            if not part.startswith(":"):
                segments.append(Segment(part))
                continue
            name = part[1:]
            if not name:
                raise InvalidPatternError(f"Empty parameter name in {template!r}")
            if name in seen:
                raise InvalidPatternError(
                    f"Parameter {name!r} appears twice in {template!r}"
                )
            seen.add(name)
            segments.append(Segment(name, is_param=True))
        if not segments:
            raise InvalidPatternError("Pattern template must have at least one segment")
        return cls(template, tuple(segments))

    @property
    def param_names(self) -> List[str]:
        return [seg.value for seg in self.segments if seg.is_param]

    @property
    def shape(self) -> Tuple[Optional[str], ...]:
        """Literal values by position, ``None`` where a parameter sits."""
        return tuple(None if seg.is_param else seg.value for seg in self.segments)

    def match(self, parts: List[str]) -> Optional[Params]:
        if len(parts) != len(self.segments):
            return None
        params: Params = {}
        for seg, part in zip(self.segments, parts):
            if seg.is_param:
                params[seg.value] = unquote(part)
            elif seg.value != part:
                return None
        return params


@dataclass
class Route:
    pattern: Pattern
    handler: Handler
    name: Optional[str] = None  # link type, e.g. "referral"


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    params: Params


class Router:
    """Ordered registry of deep link patterns; the first match wins.

    A strict router refuses two routes with the same shape, since the later
    one could never be reached. ``strict=False`` keeps plain append-only
    registration where the earlier route shadows the later one.
    """

    def __init__(self, scheme: str, strict: bool = True):
        self.scheme = scheme
        self.strict = strict
        self._routes: List[Route] = []

    def add(self, template: str, handler: Handler, name: Optional[str] = None) -> Route:
        pattern = Pattern.parse(template)
        if self.strict:
            for existing in self._routes:
                if existing.pattern.shape == pattern.shape:
                    raise RouteConflictError(template, existing.pattern.template)
        route = Route(pattern, handler, name)
        self._routes.append(route)
        return route

    def all_routes(self) -> List[Route]:
        return list(self._routes)

    def resolve(self, path: str) -> Optional[RouteMatch]:
        """Find the first route matching an already normalized *path*."""
        parts = split_path(path)
        for route in self._routes:
            params = route.pattern.match(parts)
            if params is not None:
                return RouteMatch(route, params)
        return None

    def redact(self, path: str) -> str:
        """*path* with every segment that is not a registered literal masked, for logs."""
        literals = {seg.value for route in self._routes for seg in route.pattern.segments if not seg.is_param}
        return "/".join(part if part in literals else "***" for part in split_path(path))

    def dispatch(self, url: str) -> bool:
        """Run the handler of the first route matching *url*.

        Returns ``False`` without raising when nothing matches.
        """
        path = normalize_url(url, self.scheme)
        logger.debug("Handling deep link: %r", self.redact(path))
        match = self.resolve(path)
        if match is None:
            logger.info("No handler found for deep link path %r", self.redact(path))
            return False
        logger.info(
            "Matched deep link pattern %r (params: %s)",
            match.route.pattern.template,
            ", ".join(sorted(match.params)) or "none",
        )
        match.route.handler(match.params)
        return True


def path(router: Router, template: str, handler: Handler, name: Optional[str] = None):
    """Django-like helper to register a deep link route on the given router."""
    router.add(template, handler, name)
    return handler
