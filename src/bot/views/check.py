"""View checking form input the same way the NetPay app does (``/check pin 1234``)."""
from constants import messages
from deeplink_router.views import View
from src import validators

CHECKS = {
    "pin": validators.validate_pin,
    "password": validators.validate_password,
    "strong-password": validators.validate_strong_password,
    "email": validators.validate_email,
    "phone": validators.validate_phone_number,
    "amount": validators.validate_amount,
}


def render(result: validators.ValidationResult) -> str:
    """Checklist of individual rules; the checked value itself is never echoed."""
    lines = [messages.MSG_CHECK_OK if result else result.error]
    lines.extend(
        f"{'✅' if passed else '❌'} {name.replace('_', ' ')}" for name, passed in result.checks.items()
    )
    return "\n".join(lines)


class CheckView(View):
    async def command(self):
        kinds = ", ".join(CHECKS)
        if len(self.args) < 2:
            await self.reply(messages.MSG_CHECK_USAGE.format(kinds=kinds))
            return

        kind, *values = self.args
        check = CHECKS.get(kind)
        if check is None:
            await self.reply(messages.MSG_CHECK_UNKNOWN_KIND.format(kind=kind, kinds=kinds))
            return

        await self.reply(render(check(" ".join(values))))
