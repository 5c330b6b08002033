"""Plays a window of a ttyrec back at the pace it was recorded."""
import logging
from typing import Protocol

from config import hall_config
from core.errors import TruncatedRecordingError
from replay.death_locator import ReplayWindow
from replay.ttyrec import FrameStore
from systems.time_provider import TimeProvider

logger = logging.getLogger(__name__)


class ByteSink(Protocol):
    def write(self, data: bytes) -> object: ...


class SequentialReplayer:
    """Re-reads a recording from the start and emits the frames of a window.

    Inside the window the first frame is written at once and every later
    frame waits for its recorded delta to the previous one. Frames before
    the window are skipped, or written without delay when fast_forward is set
    so the terminal holds the screen the window starts from.
    """

    def __init__(self, time_provider: TimeProvider,
                 trailing_pause_s: float = hall_config.TRAILING_PAUSE_S,
                 fast_forward: bool = False) -> None:
        self.time_provider = time_provider
        self.trailing_pause_s = trailing_pause_s
        self.fast_forward = fast_forward

    async def replay(self, store: FrameStore, window: ReplayWindow, sink: ByteSink) -> int:
        """Replay frames window.first..window.last into sink.

        Returns:
            Number of frames written from inside the window

        Raises:
            TruncatedRecordingError: The recording ends or is cut short before
                window.last
        """
        store.rewind()
        baseline_us = None
        emitted = 0
        for index in range(window.last + 1):
            frame = store.next_frame()
            if frame is None:
                raise TruncatedRecordingError(
                    f"{store.name}: recording ended at frame {index}, window ends at {window.last}")
            if index < window.first:
                if self.fast_forward:
                    sink.write(frame.payload)
                continue
            if baseline_us is not None:
                await self.time_provider.sleep_us(max(0, frame.at_us - baseline_us))
            baseline_us = frame.at_us
            sink.write(frame.payload)
            emitted += 1

        await self.time_provider.sleep_s(self.trailing_pause_s)
        logger.info(f"{store.name}: replayed {emitted} frames")
        return emitted
