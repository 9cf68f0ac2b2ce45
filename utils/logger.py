import logging
import os
from typing import Optional

# asyncio logs every subprocess spawn at DEBUG, aiogram.event logs every update
NOISY_LOGGERS = ("aiogram.event", "asyncio")


def configure_logging(level: Optional[str] = None) -> str:
    """Sets up root logging at `level` (or LOG_LEVEL). Returns the level used."""
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not isinstance(logging.getLevelName(name), int):
        name = "INFO"

    logging.basicConfig(
        level=name,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("MusicBot").info(f"📝 Logging initialized ({name})")
    return name
