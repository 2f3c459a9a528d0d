"""Views that feed incoming deep links into the router."""
import logging

from constants import messages
from deeplink_router.urls import decode_start_payload, find_links
from deeplink_router.views import View
from src import utils
from src.bot import screens
from src.bot.urls import DeepLinks


logger = logging.getLogger(__name__)


class LinkView(View):
    @property
    def deep_links(self) -> DeepLinks:
        return self.context.bot_data["deep_links"]

    async def open_link(self, url: str) -> bool:
        """Dispatch *url* and reply with every screen it asked for.

        An unrecognised link is not an error for the user: nothing is sent.
        """
        links = self.deep_links
        matched = links.router.dispatch(url)
        # drain before the first await so the queue only holds this link's requests
        requests = links.navigator.drain()
        for request in requests:
            text, markup = screens.render(request, links.app_name, links.base_url)
            await self.reply(text, reply_markup=markup)
        return matched


class StartView(LinkView):
    """``/start`` with an optional deep link payload (cold start from t.me)."""

    async def command(self):
        if self.args:
            path = decode_start_payload(self.args[0])
            if path and await self.open_link(path):
                return
            logger.info("Start payload did not resolve to a screen, sending greeting")
        await self.reply(messages.MSG_GREETING.format(app_name=self.deep_links.app_name))


class OpenLinkView(LinkView):
    async def command(self):
        if not self.args:
            example = self.deep_links.generator.app_link("dashboard")
            await self.reply(messages.MSG_OPEN_USAGE.format(example=example))
            return
        await self.open_link(self.args[0])


class LinkMessageView(LinkView):
    """Plain text messages containing one or more NetPay links."""

    async def command(self):
        links = self.deep_links
        text = utils.get_message_text(self.update)
        for url in find_links(text, links.router.scheme, links.base_url):
            await self.open_link(url)


class HelpView(LinkView):
    async def command(self):
        await self.reply(messages.MSG_HELP.format(base_url=self.deep_links.base_url))
