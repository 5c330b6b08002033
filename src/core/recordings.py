"""Lookup of a player's ttyrec recordings under the dgamelaunch userdata tree."""
import logging
import os
from typing import Optional

from config import hall_config

logger = logging.getLogger(__name__)


def recording_dir(userdata_dir: str, name: str) -> str:
    return os.path.join(userdata_dir, name, hall_config.TTYREC_SUBDIR)


def most_recent_recording(userdata_dir: str, name: str) -> Optional[str]:
    """Return the player's most recently modified recording, or None."""
    if not name or os.sep in name or name in (".", ".."):
        logger.warning(f"refusing recording lookup for player name {name!r}")
        return None
    path = recording_dir(userdata_dir, name)
    if not os.path.isdir(path):
        logger.warning(f"no recording directory for {name}: {path}")
        return None
    candidates = [entry for entry in os.scandir(path) if entry.is_file()]
    if not candidates:
        return None
    return max(candidates, key=lambda entry: entry.stat().st_mtime).path
