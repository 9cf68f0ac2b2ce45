"""
Per-user search results, kept in memory for the lifetime of the process.

Each user has at most one result set: a new search replaces the previous
one wholesale, so a button from an older result list stops resolving.
"""
import threading
from typing import Dict, Iterable, Optional

from utils.track import Track


class SessionStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._results: Dict[int, Dict[str, Track]] = {}

    def store(self, user_id: int, tracks: Iterable[Track]) -> None:
        """Replaces the user's results. Duplicate ids keep the last track."""
        results = {track.id: track for track in tracks}
        with self._lock:
            self._results[user_id] = results

    def fetch(self, user_id: int, track_id: str) -> Optional[Track]:
        """Returns the track from the user's latest search, or None."""
        with self._lock:
            return self._results.get(user_id, {}).get(track_id)
