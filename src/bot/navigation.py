from dataclasses import dataclass, field
from typing import Dict, List, Protocol


@dataclass(frozen=True)
class ScreenRequest:
    screen: str  # e.g. "transaction-details"
    params: Dict[str, str] = field(default_factory=dict)


class Navigator(Protocol):
    def push(self, screen: str, params: Dict[str, str]) -> None: ...


class ScreenQueue:
    """Navigator that records screen requests for the caller to render.

    Deep link handlers run synchronously inside ``Router.dispatch``, so a view
    that drains the queue right after dispatching sees exactly the requests
    produced by its own link.
    """

    def __init__(self):
        self._pending: List[ScreenRequest] = []

    def push(self, screen: str, params: Dict[str, str]) -> None:
        self._pending.append(ScreenRequest(screen, dict(params)))

    def drain(self) -> List[ScreenRequest]:
        pending, self._pending = self._pending, []
        return pending

    def __len__(self) -> int:
        return len(self._pending)
