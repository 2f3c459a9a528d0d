"""Build shareable links from the same routes the router matches."""
from typing import Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

from .router import Pattern, Route, Router


class LinkGenerator:
    """Inverse of :class:`Router`: link type + params -> web or app-scheme URL.

    Every route registered with a ``name`` becomes a link type. A type may own
    several templates (``transfer/:id`` and ``transfer``); the first one whose
    parameters are all supplied is used, then the bare one.
    """

    def __init__(self, routes: Iterable[Route], scheme: str, base_url: str):
        self.scheme = scheme
        self.base_url = base_url.rstrip("/")
        self._patterns: Dict[str, List[Pattern]] = {}
        for route in routes:
            if route.name:
                self._patterns.setdefault(route.name, []).append(route.pattern)

    @classmethod
    def from_router(cls, router: Router, base_url: str) -> "LinkGenerator":
        return cls(router.all_routes(), router.scheme, base_url)

    @property
    def types(self) -> List[str]:
        return list(self._patterns)

    def __contains__(self, link_type: str) -> bool:
        return link_type in self._patterns

    def path_for(self, link_type: str, params: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """Relative path for *link_type*, or ``None`` for an unknown type."""
        patterns = self._patterns.get(link_type)
        if not patterns:
            return None
        params = params or {}
        pattern = self._select(patterns, params)
        parts = []
        for seg in pattern.segments:
            if seg.is_param:
                parts.append(quote(str(params.get(seg.value) or ""), safe=""))
            else:
                parts.append(seg.value)
        return "/".join(parts)

    def web_link(self, link_type: str, params: Optional[Mapping[str, str]] = None) -> str:
        path = self.path_for(link_type, params)
        if path is None:
            return self.base_url
        return f"{self.base_url}/{path}"

    def app_link(self, link_type: str, params: Optional[Mapping[str, str]] = None) -> str:
        root = f"{self.scheme}://"
        path = self.path_for(link_type, params)
        if path is None:
            return root
        return root + path

    @staticmethod
    def _select(patterns: List[Pattern], params: Mapping[str, str]) -> Pattern:
        for pattern in patterns:
            names = pattern.param_names
            if names and all(params.get(name) for name in names):
                return pattern
        for pattern in patterns:
            if not pattern.param_names:
                return pattern
        return patterns[0]
