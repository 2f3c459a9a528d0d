import pytest

from deeplink_router.router import Pattern
from src.bot.navigation import ScreenRequest
from src.bot.urls import LINKS, build_router

PARAM_VALUES = ["NETPAY123ABC", "x", "tok_3f9a-77", "a b", "Ünïcode"]


def _concrete(template, value):
    return "/".join(value if part.startswith(":") else part for part in template.split("/"))


@pytest.mark.parametrize("target", LINKS, ids=lambda t: t.template)
@pytest.mark.parametrize("value", PARAM_VALUES)
def test_every_template_dispatches_to_its_screen(navigator, target, value):
    router = build_router(navigator, "netpay")
    pattern = Pattern.parse(target.template)

    assert router.dispatch("netpay://" + _concrete(target.template, value))

    expected = {name: value for name in pattern.param_names}
    expected.update(target.query or {})
    assert navigator.drain() == [ScreenRequest(target.screen, expected)]


@pytest.mark.parametrize("target", LINKS, ids=lambda t: t.template)
def test_web_and_scheme_links_agree(navigator, target):
    router = build_router(navigator, "netpay")
    concrete = _concrete(target.template, "v1")
    router.dispatch("netpay://" + concrete)
    router.dispatch("https://www.netpayy.ng/" + concrete)
    first, second = navigator.drain()
    assert first == second


@pytest.mark.parametrize("target", LINKS, ids=lambda t: t.template)
def test_generated_links_round_trip(deep_links, target):
    pattern = Pattern.parse(target.template)
    params = {name: "ABC123" for name in pattern.param_names}

    for url in (
        deep_links.generator.app_link(target.type, params),
        deep_links.generator.web_link(target.type, params),
    ):
        assert deep_links.router.dispatch(url)
        (request,) = deep_links.navigator.drain()
        assert request.screen == target.screen
        for name in pattern.param_names:
            assert request.params[name] == "ABC123"


def test_transfer_links():
    from src.bot.navigation import ScreenQueue

    navigator = ScreenQueue()
    router = build_router(navigator, "netpay")
    router.dispatch("netpay://transfer/TRX-1")
    router.dispatch("netpay://transfer")
    assert navigator.drain() == [
        ScreenRequest("transaction-details", {"id": "TRX-1", "type": "transfer"}),
        ScreenRequest("transfer", {}),
    ]


def test_unknown_links_push_nothing(navigator):
    router = build_router(navigator, "netpay")
    assert router.dispatch("netpay://unknown/path/segment") is False
    assert router.dispatch("netpay://Profile") is False
    assert len(navigator) == 0


def test_link_types(deep_links):
    types = deep_links.generator.types
    assert len(types) == len(set(types))
    assert {t.type for t in LINKS} == set(types)
    assert deep_links.generator.web_link("not-a-real-type") == "https://www.netpayy.ng"
