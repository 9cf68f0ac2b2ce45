# tests/conftest.py
import pytest

from utils.track import Track


@pytest.fixture
def make_track():
    """Builds a Track with a YouTube-style URL."""
    def _make(video_id="abc123", title="Some Song", duration=200):
        return Track(
            id=video_id,
            title=title,
            url=f"https://www.youtube.com/watch?v={video_id}",
            duration=duration,
        )
    return _make
