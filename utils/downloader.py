"""
yt-dlp wrappers: YouTube search and MP3 extraction.

Both run yt-dlp as a subprocess with an explicit argument list (no shell),
so queries and titles never need quoting.
"""
import asyncio
import json
import os
import sys
import logging
from typing import List

from utils.track import Track

logger = logging.getLogger("downloader")

# ───────────────────────────────────────────────
# ⚙️ Constants
# ───────────────────────────────────────────────
YTDLP_BIN = sys.executable
YTDLP_ARGS = ["-m", "yt_dlp"]
MAX_RESULTS = 5
MAX_DURATION_SEC = 600  # 10 min cap
AUDIO_QUALITY = "192"
AUDIO_EXTENSIONS = (".mp3",)
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={id}"
LIVE_STATUSES = ("is_live", "is_upcoming", "post_live")


# ───────────────────────────────────────────────
# ❌ Errors
# ───────────────────────────────────────────────
class DownloadError(RuntimeError):
    """Base class for failed downloads."""


class ProcessError(DownloadError):
    """yt-dlp exited with a non-zero status."""


class AudioNotFoundError(DownloadError):
    """yt-dlp finished but left no audio file behind."""


# ───────────────────────────────────────────────
# ⚙️ Async subprocess runner
# ───────────────────────────────────────────────
async def _run(cmd: List[str]) -> tuple[str, str]:
    """Executes an async subprocess and captures output."""
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE
    )
    stdout, stderr = await proc.communicate()

    if proc.returncode != 0:
        error_msg = stderr.decode(errors="ignore").strip()
        logger.error(f"Command failed (rc={proc.returncode}): {' '.join(cmd)}\n{error_msg}")
        raise ProcessError(error_msg or f"yt-dlp exited with code {proc.returncode}")

    return stdout.decode(errors="ignore"), stderr.decode(errors="ignore")


# ───────────────────────────────────────────────
# 🔍 Search
# ───────────────────────────────────────────────
def parse_search_output(raw: str) -> List[Track]:
    """
    Parses yt-dlp --dump-json output (one JSON object per line).

    Malformed lines, entries without an id and live streams are skipped.
    A missing duration counts as 0, a null or non-numeric one drops the
    entry. Entries longer than MAX_DURATION_SEC are dropped and at most
    MAX_RESULTS are kept.
    """
    results: List[Track] = []

    for line in raw.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            info = json.loads(line)
        except json.JSONDecodeError:
            logger.debug(f"Skipping malformed line: {line[:100]}")
            continue
        if not isinstance(info, dict):
            continue

        # live streams report a null duration and never finish downloading
        if info.get("is_live") or info.get("live_status") in LIVE_STATUSES:
            continue
        try:
            duration = int(info.get("duration", 0))
        except (TypeError, ValueError):
            continue
        if duration > MAX_DURATION_SEC:
            continue

        video_id = info.get("id") or ""
        if not video_id:
            continue

        results.append(Track(
            id=str(video_id),
            title=info.get("title") or "Unknown",
            url=YOUTUBE_WATCH_URL.format(id=video_id),
            duration=duration,
        ))
        if len(results) >= MAX_RESULTS:
            break

    return results


async def search_tracks(query: str) -> List[Track]:
    """
    Searches YouTube for up to MAX_RESULTS tracks.

    Any failure is logged and reported as an empty list.
    """
    cmd = [
        YTDLP_BIN, *YTDLP_ARGS,
        "--quiet",
        "--no-warnings",
        "--skip-download",
        "--flat-playlist",
        "--dump-json",
        f"ytsearch{MAX_RESULTS}:{query}",
    ]

    try:
        stdout, _ = await _run(cmd)
    except Exception as e:
        logger.warning(f"⚠️ Search failed for '{query}': {e}")
        return []

    results = parse_search_output(stdout)
    logger.info(f"🔍 '{query}' -> {len(results)} result(s)")
    return results


# ───────────────────────────────────────────────
# 🎧 MP3 download
# ───────────────────────────────────────────────
def find_audio_file(tmpdir: str) -> str:
    """Returns the first audio file in tmpdir or raises AudioNotFoundError."""
    for name in sorted(os.listdir(tmpdir)):
        if name.lower().endswith(AUDIO_EXTENSIONS):
            return os.path.join(tmpdir, name)
    raise AudioNotFoundError("MP3 not found after download")


async def download_mp3(url: str, tmpdir: str) -> str:
    """
    Downloads the audio track of `url` into `tmpdir` as an MP3.

    Returns:
        Path to the MP3 file. The caller owns tmpdir and must remove it.
    """
    logger.info(f"⬇️ Running yt-dlp for: {url}")

    cmd = [
        YTDLP_BIN, *YTDLP_ARGS,
        "--quiet",
        "--no-warnings",
        "--no-playlist",
        "--no-color",
        "--format", "bestaudio/best",
        "--extract-audio",
        "--audio-format", "mp3",
        "--audio-quality", f"{AUDIO_QUALITY}K",
        "--output", os.path.join(tmpdir, "%(title)s.%(ext)s"),
        url,
    ]

    await _run(cmd)

    mp3_path = find_audio_file(tmpdir)
    logger.info(f"✅ Extracted audio to {mp3_path}")
    return mp3_path
