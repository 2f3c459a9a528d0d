import pytest

from deeplink_router.generator import LinkGenerator
from deeplink_router.router import Router, path

BASE_URL = "https://www.netpayy.ng"


@pytest.fixture
def generator(router, record):
    path(router, "referral/:code", record("referral-code"), name="referral")
    path(router, "referral", record("referral"), name="referral")
    path(router, "payment/:id", record("payment"), name="payment")
    path(router, "profile", record("profile"), name="profile")
    path(router, "internal/:x", record("unnamed"))
    return LinkGenerator.from_router(router, BASE_URL + "/")


def test_web_and_app_links(generator):
    assert generator.web_link("referral", {"code": "ABC123"}) == f"{BASE_URL}/referral/ABC123"
    assert generator.app_link("referral", {"code": "ABC123"}) == "netpay://referral/ABC123"
    assert generator.web_link("profile") == f"{BASE_URL}/profile"
    assert generator.app_link("profile") == "netpay://profile"


def test_bare_template_used_without_params(generator):
    assert generator.app_link("referral") == "netpay://referral"
    assert generator.app_link("referral", {"code": ""}) == "netpay://referral"


def test_missing_param_without_bare_template(generator):
    assert generator.app_link("payment") == "netpay://payment/"
    assert generator.web_link("payment", {}) == f"{BASE_URL}/payment/"


def test_unknown_type_falls_back_to_base(generator):
    assert generator.web_link("not-a-real-type") == BASE_URL
    assert generator.app_link("not-a-real-type") == "netpay://"
    assert generator.path_for("not-a-real-type") is None


def test_unnamed_routes_are_not_link_types(generator):
    assert "internal" not in generator
    assert generator.types == ["referral", "payment", "profile"]


def test_values_are_percent_encoded(generator):
    assert generator.app_link("referral", {"code": "A/B C"}) == "netpay://referral/A%2FB%20C"


def test_extra_params_are_ignored(generator):
    assert generator.app_link("profile", {"code": "X"}) == "netpay://profile"


def test_round_trip_through_router(generator, router, calls):
    assert router.dispatch(generator.app_link("referral", {"code": "ABC123"}))
    assert router.dispatch(generator.web_link("referral", {"code": "A/B?#"}))
    assert calls == [
        ("referral-code", {"code": "ABC123"}),
        ("referral-code", {"code": "A/B?#"}),
    ]


def test_generator_uses_router_scheme(record):
    router = Router(scheme="paynet")
    path(router, "profile", record("profile"), name="profile")
    assert LinkGenerator.from_router(router, BASE_URL).app_link("profile") == "paynet://profile"
