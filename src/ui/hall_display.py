"""The hall of fame screen and its full-screen announcements."""
from typing import Optional

from config import hall_config
from core.highscores import HighscoreEntry, HighscoreTracker, Metric
from rendering.console import (Console, VT_CYAN, VT_GREEN, VT_MAGENTA, VT_RED,
                               VT_WHITE, VT_YELLOW)
from systems.time_provider import TimeProvider

HIGHSCORE_ROWS = (
    ("MOST TURNS SURVIVED", Metric.TURNS),
    ("DEEPEST DUNGEON LEVEL", Metric.MAXLVL),
    ("MOST POINTS SCORED", Metric.POINTS),
)


class HallDisplay:
    """Draws the highscores and the most recent games."""

    def __init__(self, console: Console, title: str = hall_config.TITLE) -> None:
        self.console = console
        self.title = title

    def render(self, tracker: HighscoreTracker) -> None:
        c = self.console
        hs_y = hall_config.HIGHSCORE_Y
        c.go_to(0, 0)
        c.hide_cursor()
        c.clear()
        c.print_big(28, 2, VT_WHITE, self.title)
        c.print_big(3, 10, VT_YELLOW, "HALL OF FAME")

        for row, (title, metric) in enumerate(HIGHSCORE_ROWS):
            self.print_highscore(tracker, title, hs_y + row * 2, tracker.holder(metric))

        c.go_to(40, hs_y + 7)
        c.set_color(VT_RED)
        c.text(f"FALLEN HEROES ({len(tracker)} TOTAL)")
        newest = range(len(tracker) - 1, -1, -1)
        for count, index in enumerate(newest[:hall_config.FALLEN_HEROES_SHOWN]):
            self.print_game(tracker, hs_y + 8 + count, index)
        c.hide_cursor()

    def print_game(self, tracker: HighscoreTracker, y: int, index: Optional[int]) -> None:
        c = self.console
        if index is None or not 0 <= index < len(tracker):
            c.set_color(VT_WHITE)
            c.go_to(8, y + 1)
            c.text("---")
            return

        game = tracker.record_at(index)
        c.go_to(8, y)
        c.set_color(VT_GREEN if tracker.is_record_holder(index) else VT_RED)
        c.text(game.name)
        c.set_color(VT_CYAN)
        c.text(f" {game.death}")
        c.set_color(VT_WHITE)
        c.text(f" - {game.summary()}")

    def print_highscore(self, tracker: HighscoreTracker, title: str, y: int,
                        entry: Optional[HighscoreEntry]) -> None:
        c = self.console
        c.set_color(VT_YELLOW)
        c.go_to(35, y)
        c.text(title)
        if entry is None:
            self.print_game(tracker, y + 1, None)
            return
        c.set_color(VT_WHITE)
        c.text(" - ")
        c.set_color(VT_GREEN)
        c.text(f"{entry.value} by {tracker.record_at(entry.index).name}")
        self.print_game(tracker, y + 1, entry.index)


class Announcer:
    """Typed-out full screen messages with sound cues."""

    def __init__(self, console: Console, sound_manager, time_provider: TimeProvider) -> None:
        self.console = console
        self.sound_manager = sound_manager
        self.time_provider = time_provider

    async def typeout(self, color: int, msg: str) -> None:
        for i in range(len(msg)):
            self.console.print_big(4, 6, color, msg[:i + 1])
            self.sound_manager.play_type()
            await self.time_provider.sleep_ms(hall_config.TYPEOUT_DELAY_MS)

    async def _announce(self, headline: str, headline_color: int, play_cue,
                        caption: str, caption_color: int) -> None:
        self.console.clear()
        await self.typeout(headline_color, headline)
        await self.time_provider.sleep_s(hall_config.ANNOUNCE_PAUSE_S)
        play_cue()
        self.console.print_big(14, 16, caption_color, caption)
        await self.time_provider.sleep_s(hall_config.ANNOUNCE_HOLD_S)

    async def show_new_highscore(self, name: str) -> None:
        await self._announce("NEW RECORD!", VT_MAGENTA, self.sound_manager.play_record,
                             name, VT_GREEN)

    async def show_player_dead(self, name: str) -> None:
        await self._announce(name, VT_GREEN, self.sound_manager.play_dead,
                             "DED.", VT_RED)
