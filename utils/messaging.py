import logging
from typing import Optional, Union

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest
from aiogram.types import InaccessibleMessage, InlineKeyboardMarkup, Message

logger = logging.getLogger("messaging")


# ───────────────────────────────────────────────
# Safe edit helper
# ───────────────────────────────────────────────
async def safe_edit(
    message: Union[Message, InaccessibleMessage],
    text: str,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
    bot: Optional[Bot] = None,
) -> bool:
    """
    Edits a status message, logging Telegram errors instead of raising them.

    Buttons on old messages arrive with an InaccessibleMessage, which only
    carries chat and message ids, so those are edited through the bot.
    """
    try:
        if isinstance(message, InaccessibleMessage):
            await (bot or message.bot).edit_message_text(
                text=text,
                chat_id=message.chat.id,
                message_id=message.message_id,
                reply_markup=reply_markup,
            )
        else:
            await message.edit_text(text, reply_markup=reply_markup)
        return True
    except TelegramBadRequest as e:
        if "message is not modified" in str(e).lower():
            return True
        logger.warning(f"⚠️ Edit text failed: {e}")
    except TelegramAPIError:
        logger.exception("❌ Edit text failed.")
    return False
