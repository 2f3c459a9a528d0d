from src.bot import screens
from src.bot.navigation import ScreenRequest
from src.bot.urls import LINKS


def test_every_linked_screen_has_a_title():
    assert {t.screen for t in LINKS} <= set(screens.TITLES)


def test_render_transaction_transfer():
    text, markup = screens.render(
        ScreenRequest("transaction-details", {"id": "TRX-1", "type": "transfer"}),
        "NetPay",
        "https://www.netpayy.ng",
    )
    assert text.startswith("Transaction details")
    assert "Transfer reference: TRX-1" in text
    assert markup.inline_keyboard[0][0].url == "https://www.netpayy.ng"


def test_render_provider_name_lookup():
    text, _ = screens.render(ScreenRequest("cable-tv-purchase", {"provider": "DSTV"}), "NetPay", "https://x.ng")
    assert "Provider: DSTV" in text
    text, _ = screens.render(ScreenRequest("airtime-purchase", {"network": "glo"}), "NetPay", "https://x.ng")
    assert "Network: Glo" in text


def test_render_unknown_provider_shows_raw_value():
    text, _ = screens.render(ScreenRequest("education-purchase", {"exam": "waec"}), "NetPay", "https://x.ng")
    assert "Institution: waec" in text


def test_render_masks_tokens():
    text, _ = screens.render(
        ScreenRequest("auth/reset-password", {"token": "supersecrettoken"}), "NetPay", "https://x.ng"
    )
    assert "supersecrettoken" not in text
    assert "oken" in text


def test_mask():
    assert screens.mask("abcdef") == "**cdef"
    assert screens.mask("abc") == "***"


def test_render_unknown_screen(caplog):
    caplog.set_level("WARNING")
    text, markup = screens.render(ScreenRequest("nowhere"), "NetPay", "https://x.ng")
    assert markup is None
    assert "not available" in text
    assert any("nowhere" in r.message for r in caplog.records)
