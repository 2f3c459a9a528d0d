"""View building shareable NetPay links (``/share referral code=ABC123``)."""
from constants import messages
from deeplink_router.views import View
from src import utils
from src.bot.share import compose_share_message
from src.bot.urls import DeepLinks


class ShareView(View):
    async def command(self):
        links: DeepLinks = self.context.bot_data["deep_links"]
        types = ", ".join(links.generator.types)
        if not self.args:
            await self.reply(messages.MSG_SHARE_USAGE.format(types=types))
            return

        link_type, *rest = self.args
        if link_type not in links.generator:
            await self.reply(messages.MSG_SHARE_UNKNOWN_TYPE.format(link_type=link_type, types=types))
            return

        params, invalid = utils.parse_key_values(rest)
        if invalid:
            await self.reply(messages.MSG_SHARE_BAD_PARAM.format(arg=invalid[0]))
            return

        await self.reply(
            compose_share_message(
                links.generator,
                link_type,
                params,
                show_app_scheme=True,
                bot_username=links.bot_username,
            )
        )
