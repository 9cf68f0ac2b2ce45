import logging
from html import escape

from aiogram import Router, F
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

from templates.buttons import results_kb
from templates.messages import NO_RESULTS_TEXT, RESULTS_TEXT, SEARCHING_TEXT
from utils.downloader import search_tracks
from utils.messaging import safe_edit
from utils.session_store import SessionStore

router = Router(name="search")
logger = logging.getLogger("search")


# ───────────────────────────────────────────────
# 🔍 Free-text search
# ───────────────────────────────────────────────
@router.message(F.text, ~F.text.startswith("/"))
async def handle_search(message: Message, sessions: SessionStore):
    """
    Handles plain text messages like "Bohemian Rhapsody".
    - Searches YouTube via yt-dlp.
    - Stores the results for the sender and lists them as buttons.
    """
    query = (message.text or "").strip()
    if not query:
        return

    user_id = message.from_user.id if message.from_user else message.chat.id
    logger.info(f"🔍 [SEARCH] User: {user_id}, Query: {query}")

    try:
        status_msg = await message.answer(SEARCHING_TEXT.format(query=escape(query)))

        tracks = await search_tracks(query)
        if not tracks:
            await safe_edit(status_msg, NO_RESULTS_TEXT)
            return

        sessions.store(user_id, tracks)

        await safe_edit(
            status_msg,
            RESULTS_TEXT.format(count=len(tracks), query=escape(query)),
            reply_markup=results_kb(tracks),
        )
    except TelegramAPIError:
        logger.exception(f"❌ Telegram error while searching for: {query}")
