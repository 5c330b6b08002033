"""Find the death screen in a ttyrec and the window of frames leading up to it."""
from dataclasses import dataclass
import logging
from typing import Optional

from config import hall_config
from replay.ttyrec import FrameStore

logger = logging.getLogger(__name__)

CURSOR_HOME = b"\x1b[H"

# Screens NetHack draws when a game ends in death.
DEATH_MARKERS = (
    CURSOR_HOME + b"You die...",
    CURSOR_HOME + b"You drown.",
    CURSOR_HOME + b"Do you want your possessions identified?",
)


@dataclass(frozen=True)
class ReplayWindow:
    first: int  # inclusive frame indices
    last: int

    def __post_init__(self) -> None:
        if not 0 <= self.first <= self.last:
            raise ValueError(f"invalid replay window {self.first}..{self.last}")

    def __len__(self) -> int:
        return self.last - self.first + 1


def has_death_marker(payload: bytes) -> bool:
    return any(marker in payload for marker in DEATH_MARKERS)


def window_start(frame_timing: list[int], last: int, lookback_ms: int) -> int:
    """Index of the earliest frame within lookback_ms before frame `last`.

    Finds the latest frame at or before the lookback boundary and steps one
    forward. When every earlier frame is inside the lookback, the window
    starts at the first frame of the recording.
    """
    find_time = frame_timing[last] - lookback_ms
    for i in range(last - 1, -1, -1):
        if frame_timing[i] <= find_time:
            return i + 1
    return 0


def locate_death_window(store: FrameStore,
                        lookback_ms: int = hall_config.DEATH_LOOKBACK_MS) -> Optional[ReplayWindow]:
    """Scan a recording once for the first death screen.

    Returns:
        The window ending at the death frame, or None when the recording has
        no death screen. On success the store is rewound for replay.

    Raises:
        TruncatedRecordingError: The recording is cut short before a death screen
    """
    store.rewind()
    frame_timing: list[int] = []
    for last, frame in enumerate(store):
        frame_timing.append(frame.at_ms)
        if has_death_marker(frame.payload):
            first = window_start(frame_timing, last, lookback_ms)
            logger.info(f"{store.name}: death at frame {last}, replaying from frame {first}")
            store.rewind()
            return ReplayWindow(first, last)
    logger.info(f"{store.name}: no death frame in {len(frame_timing)} frames")
    return None
