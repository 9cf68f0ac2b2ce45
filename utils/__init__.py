"""
utils package

Utility modules for bot internals:
- logger.py: logging setup
- downloader.py: yt-dlp search and MP3 extraction
- track.py: search result model
- session_store.py: per-user search results
- messaging.py: safe message editing
"""
