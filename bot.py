import asyncio
import logging
import os
import shutil
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from dotenv import load_dotenv

from utils.logger import configure_logging
from utils.session_store import SessionStore
from handlers.start import router as start_router
from handlers.buttons import router as buttons_router
from handlers.search import router as search_router


# ───────────────────────────────────────────────
# ENV + SETUP
# ───────────────────────────────────────────────
load_dotenv()

TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

logger = logging.getLogger("MusicBot")

# ───────────────────────────────────────────────
# BOT FACTORY
# ───────────────────────────────────────────────
def make_bot(token: str) -> Bot:
    return Bot(
        token=token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )

def make_dispatcher(sessions: SessionStore) -> Dispatcher:
    dp = Dispatcher()
    # injected into handlers as the `sessions` argument
    dp["sessions"] = sessions
    dp.include_router(start_router)
    dp.include_router(buttons_router)
    dp.include_router(search_router)
    return dp


# ───────────────────────────────────────────────
# HEALTH CHECK
# ───────────────────────────────────────────────
def health_check(token):
    print("\n═════════════ 🎵 MusicBot Startup Check ═════════════")
    print(f"💬 Telegram Token: {'✅ Loaded' if token else '❌ Missing'}")
    print(f"🎼 ffmpeg binary: {'✅ Found' if shutil.which('ffmpeg') else '❌ Not Found'}")
    print(f"🎥 yt-dlp: {'✅ Installed' if shutil.which('yt-dlp') else '⚠️ Not Found (will use python module)'}")
    print("═════════════════════════════════════════════════════\n")

    # Critical checks
    if not token:
        raise SystemExit("ERROR: TELEGRAM_BOT_TOKEN env var not set.")

    if not shutil.which('ffmpeg'):
        logger.warning("⚠️ ffmpeg not found - MP3 extraction will fail!")


# ───────────────────────────────────────────────
# MAIN
# ───────────────────────────────────────────────
async def main():
    configure_logging()
    health_check(TELEGRAM_BOT_TOKEN)

    bot = make_bot(TELEGRAM_BOT_TOKEN)
    dp = make_dispatcher(SessionStore())

    me = await bot.get_me()
    logger.info(f"🤖 Bot username: @{me.username}")
    logger.info("🚀 Polling…")
    await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())


if __name__ == "__main__":
    asyncio.run(main())
