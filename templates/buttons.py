from typing import Sequence

from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from utils.downloader import MAX_RESULTS
from utils.track import Track

MAX_LABEL_TITLE = 50


class DownloadCallback(CallbackData, prefix="dl"):
    """Packs as 'dl:<video_id>'."""
    video_id: str


def track_label(track: Track) -> str:
    return f"🎵 {track.title[:MAX_LABEL_TITLE]}  [{track.duration_fmt}]"


def results_kb(tracks: Sequence[Track]):
    """One button per search result, one result per row."""
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text=track_label(track),
                    callback_data=DownloadCallback(video_id=track.id).pack(),
                )
            ]
            for track in tracks[:MAX_RESULTS]
        ]
    )
