import logging
from typing import Optional

from config import hall_config
from core.errors import TruncatedRecordingError
from core.highscores import HighscoreTracker
from core.log_tailer import LogTailer
from core.recordings import most_recent_recording
from core.records import GameRecord
from game_logging.hall_loggers import HallLogger
from rendering.console import Console, VT_WHITE
from replay.death_locator import locate_death_window
from replay.replayer import SequentialReplayer
from replay.ttyrec import FrameStore
from systems.time_provider import TimeProvider
from ui.hall_display import Announcer, HallDisplay

logger = logging.getLogger(__name__)


def should_replay(record: GameRecord) -> bool:
    return record.death != hall_config.QUIT_DEATH


class HallOfFame:
    """Owns the xlogfile cursor and highscores and drives the screen.

    Games already in the xlogfile at startup are loaded silently; every game
    appended afterwards gets its death replayed (unless the player quit) and
    a "new record" announcement when it beats a highscore.
    """

    def __init__(self, tailer: LogTailer, console: Console, sound_manager,
                 time_provider: TimeProvider, userdata_dir: str,
                 replayer: Optional[SequentialReplayer] = None,
                 hall_logger: Optional[HallLogger] = None) -> None:
        self.tailer = tailer
        self.tracker = HighscoreTracker()
        self.console = console
        self.time_provider = time_provider
        self.userdata_dir = userdata_dir
        self.replayer = replayer or SequentialReplayer(time_provider)
        self.hall_logger = hall_logger or HallLogger(None)
        self.display = HallDisplay(console)
        self.announcer = Announcer(console, sound_manager, time_provider)
        self.replay_triggers = 0
        self._first_time = True

    def start(self) -> None:
        """Load the games already in the xlogfile without announcing them."""
        result = self.tailer.poll()
        for record in result.records:
            self._observe(record)
        logger.info(f"loaded {len(self.tracker)} existing games")

    async def run_once(self) -> bool:
        """Poll the xlogfile, handle new games and redraw when anything changed.

        Returns:
            True when the screen was redrawn
        """
        self.console.go_to(0, 0)
        self.console.hide_cursor()

        result = self.tailer.poll()
        for record in result.records:
            await self.handle_new_game(record)

        if not self._first_time and not result.changed:
            return False
        self._first_time = False
        self.display.render(self.tracker)
        return True

    async def handle_new_game(self, record: GameRecord) -> None:
        try:
            if should_replay(record):
                await self.play_death(record.name)
            else:
                logger.info(f"{record.name} quit, no replay")
        finally:
            # Count the game even if its replay failed or was cancelled.
            improved = self._observe(record)

        if improved:
            await self.announcer.show_new_highscore(record.name)

    def _observe(self, record: GameRecord) -> bool:
        improved = self.tracker.observe(record)
        index = len(self.tracker) - 1
        now_ms = self.time_provider.get_ticks()
        logger.debug(f"game {index}: {record.name} {record.death}")
        self.hall_logger.log_record(index, record, now_ms)
        if improved:
            self.hall_logger.log_new_highscore(index, record.name, improved, now_ms)
        return bool(improved)

    async def play_death(self, name: str) -> bool:
        """Replay the end of the player's most recent recording.

        Returns:
            True when a death was found and replayed
        """
        self.replay_triggers += 1
        try:
            recording = most_recent_recording(self.userdata_dir, name)
        except OSError as e:
            logger.error(f"cannot list recordings for {name}: {e}")
            return False
        if recording is None:
            logger.warning(f"no recording found for {name}")
            return False

        await self.announcer.show_player_dead(name)
        try:
            with FrameStore.open(recording) as store:
                window = locate_death_window(store)
                self.hall_logger.log_replay(name, recording, window, self.time_provider.get_ticks())
                if window is None:
                    return False
                self.console.set_color(VT_WHITE)
                self.console.clear()
                self.console.show_cursor()
                try:
                    await self.replayer.replay(store, window, self.console)
                finally:
                    self.console.hide_cursor()
        except (TruncatedRecordingError, OSError) as e:
            logger.error(f"skipping replay for {name}: {e}")
            return False
        return True
