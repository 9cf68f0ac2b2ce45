# templates/messages.py

START_TEXT = (
    "🎵 <b>Music Bot</b>\n\n"
    "Type a song name or artist and I'll search YouTube.\n\n"
    "Example: <code>Bohemian Rhapsody Queen</code>"
)

HELP_TEXT = (
    "Send any text to search for music.\n"
    "Tap a result to download and receive the MP3. 🎧"
)

SEARCHING_TEXT = "🔍 Searching for <b>{query}</b>…"

NO_RESULTS_TEXT = "❌ No results found. Try a different search term."

RESULTS_TEXT = (
    "Found <b>{count}</b> results for <i>{query}</i>.\n"
    "Choose one to download 👇"
)

SESSION_EXPIRED_TEXT = "⚠️ Session expired. Please search again."

DOWNLOADING_TEXT = "⬇️ Downloading <b>{title}</b>…\nThis may take a moment."

SENDING_TEXT = "📤 Sending <b>{title}</b>…"

DOWNLOAD_FAILED_TEXT = "❌ Download failed: {error}"

AUDIO_CAPTION = "🎵 {title}"
