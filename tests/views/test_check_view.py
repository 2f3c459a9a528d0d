import pytest

from src.bot.views.check import CheckView


class TestCheckView:
    @pytest.mark.asyncio
    async def test_valid_pin(self, make_update, test_context):
        test_context.args = ["pin", "1234"]
        view = CheckView(make_update(), test_context)
        await view.command()
        (text, _), = view.update.message.replies
        assert text.startswith("Looks good.")
        assert "1234" not in text

    @pytest.mark.asyncio
    async def test_weak_password_lists_failed_rules(self, make_update, test_context):
        test_context.args = ["strong-password", "weakpass"]
        view = CheckView(make_update(), test_context)
        await view.command()
        (text, _), = view.update.message.replies
        assert text.startswith("Password must be at least 8 characters")
        assert "✅ has lower" in text
        assert "❌ has upper" in text
        assert "weakpass" not in text

    @pytest.mark.asyncio
    async def test_phone_with_spaces(self, make_update, test_context):
        test_context.args = ["phone", "0803", "123", "4567"]
        view = CheckView(make_update(), test_context)
        await view.command()
        (text, _), = view.update.message.replies
        assert text.startswith("Looks good.")

    @pytest.mark.asyncio
    async def test_amount_below_minimum(self, make_update, test_context):
        test_context.args = ["amount", "20"]
        view = CheckView(make_update(), test_context)
        await view.command()
        (text, _), = view.update.message.replies
        assert "minimum ₦50" in text

    @pytest.mark.asyncio
    async def test_unknown_kind(self, make_update, test_context):
        test_context.args = ["bvn", "123"]
        view = CheckView(make_update(), test_context)
        await view.command()
        (text, _), = view.update.message.replies
        assert "Unknown check 'bvn'" in text
        assert "email" in text

    @pytest.mark.asyncio
    async def test_usage(self, make_update, test_context):
        test_context.args = ["pin"]
        view = CheckView(make_update(), test_context)
        await view.command()
        (text, _), = view.update.message.replies
        assert text.startswith("Usage: /check")
