import sys, pathlib

# Ensure project root is importable
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from types import SimpleNamespace

from deeplink_router.router import Router
from src.bot.navigation import ScreenQueue
from src.bot.urls import build_deep_links

SCHEME = "netpay"
BASE_URL = "https://www.netpayy.ng"


# --- Pytest fixtures ---

@pytest.fixture
def navigator():
    return ScreenQueue()


@pytest.fixture
def calls():
    """List collecting (route label, params) pairs from recording handlers."""
    return []


@pytest.fixture
def record(calls):
    """Factory for handlers that append their label and params to ``calls``."""
    def _make(label):
        def _handler(params):
            calls.append((label, params))
        return _handler
    return _make


@pytest.fixture
def router():
    return Router(scheme=SCHEME)


@pytest.fixture
def deep_links():
    return build_deep_links(scheme=SCHEME, base_url=BASE_URL, bot_username="NetPayBot")


class DummyMessage:
    def __init__(self, text=""):
        self.text = text
        self.replies = []

    async def reply_text(self, text, reply_markup=None):
        self.replies.append((text, reply_markup))


class DummyUpdate:
    def __init__(self, text=""):
        self.update_id = 123
        self.message = DummyMessage(text)
        self.effective_message = self.message
        self.effective_user = SimpleNamespace(id=1)


@pytest.fixture
def make_update():
    return DummyUpdate


@pytest.fixture
def test_context(deep_links):
    """Return a minimal stand-in for telegram.ext.ContextTypes.DEFAULT_TYPE."""
    ctx = SimpleNamespace()
    ctx.args = []
    ctx.user_data = {}
    ctx.bot_data = {"deep_links": deep_links}
    return ctx
