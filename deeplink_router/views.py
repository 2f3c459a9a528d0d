from typing import Any, Callable, Coroutine, List, Optional

from telegram import InlineKeyboardMarkup, Update
from telegram.ext import ContextTypes


class View:
    """Base View: instance stores `update` & `context`; override `command()`."""

    def __init__(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        self.update = update
        self.context = context

    @property
    def args(self) -> List[str]:
        """Command arguments (``/open netpay://profile`` -> ``["netpay://profile"]``)."""
        return list(getattr(self.context, "args", None) or [])

    async def reply(self, text: str, reply_markup: Optional[InlineKeyboardMarkup] = None):
        await self.update.effective_message.reply_text(text, reply_markup=reply_markup)

    async def command(self):  # noqa: D401
        """Handle command (override in subclass)."""
        raise NotImplementedError("View must implement command()")

    @classmethod
    def as_handler(
        cls,
    ) -> Callable[[Update, ContextTypes.DEFAULT_TYPE], Coroutine[Any, Any, None]]:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
            self = cls(update, context)
            await self.command()

        return _handler
