import os
import shutil
import asyncio
import logging
import tempfile
from html import escape

from aiogram import Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import BufferedInputFile, CallbackQuery

from templates.buttons import DownloadCallback
from templates.messages import (
    AUDIO_CAPTION,
    DOWNLOAD_FAILED_TEXT,
    DOWNLOADING_TEXT,
    SENDING_TEXT,
    SESSION_EXPIRED_TEXT,
)
from utils.downloader import download_mp3
from utils.messaging import safe_edit
from utils.session_store import SessionStore

router = Router(name="buttons")
logger = logging.getLogger("buttons")


def tmpdir_for(video_id: str) -> str:
    return os.path.join(tempfile.gettempdir(), f"mbot_{video_id}")


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


# ───────────────────────────────────────────────
# 🎵 Result selected
# ───────────────────────────────────────────────
@router.callback_query(DownloadCallback.filter())
async def cb_download(c: CallbackQuery, callback_data: DownloadCallback, sessions: SessionStore):
    """Downloads the selected search result and sends it as MP3."""
    try:
        await c.answer()
    except TelegramAPIError:
        logger.exception("❌ Failed to answer callback query.")

    video_id = callback_data.video_id
    user_id = c.from_user.id
    logger.info(f"🎵 [DOWNLOAD] User: {c.from_user.username or user_id}, Video: {video_id}")

    # may be an InaccessibleMessage when the result list is too old
    status = c.message
    if status is None:
        logger.warning(f"⚠️ Callback without a message from user {user_id}")
        return

    track = sessions.fetch(user_id, video_id)
    if track is None:
        await safe_edit(status, SESSION_EXPIRED_TEXT, bot=c.bot)
        return

    await safe_edit(status, DOWNLOADING_TEXT.format(title=escape(track.title)), bot=c.bot)

    tmpdir = tmpdir_for(video_id)
    try:
        os.makedirs(tmpdir, exist_ok=True)
        mp3_path = await download_mp3(track.url, tmpdir)

        await safe_edit(status, SENDING_TEXT.format(title=escape(track.title)), bot=c.bot)

        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(None, _read_bytes, mp3_path)

        await c.bot.send_audio(
            chat_id=status.chat.id,
            audio=BufferedInputFile(data, filename=os.path.basename(mp3_path)),
            caption=AUDIO_CAPTION.format(title=track.title),
            title=track.title,
            parse_mode=None,
        )
        try:
            await c.bot.delete_message(chat_id=status.chat.id, message_id=status.message_id)
        except TelegramAPIError as e:
            logger.warning(f"⚠️ Could not delete status message: {e}")
        logger.info(f"✅ Audio sent successfully to user {user_id}")

    except Exception as e:
        logger.exception(f"❌ Download failed for {track.url}")
        await safe_edit(status, DOWNLOAD_FAILED_TEXT.format(error=escape(str(e)[:200])), bot=c.bot)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


# ───────────────────────────────────────────────
# Anything else: just stop the loading spinner
# ───────────────────────────────────────────────
@router.callback_query()
async def cb_ignore(c: CallbackQuery):
    try:
        await c.answer()
    except TelegramAPIError:
        logger.exception("❌ Failed to answer callback query.")
