from dataclasses import dataclass


def format_duration(seconds: int) -> str:
    """Formats seconds as M:SS (600 -> '10:00')."""
    minutes, secs = divmod(max(int(seconds), 0), 60)
    return f"{minutes}:{secs:02d}"


@dataclass(frozen=True)
class Track:
    """A single search result as reported by yt-dlp."""
    id: str
    title: str
    url: str
    duration: int

    @property
    def duration_fmt(self) -> str:
        return format_duration(self.duration)
