from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional

from core.records import GameRecord

logger = logging.getLogger(__name__)


class Metric(str, Enum):
    """The three categories of the hall of fame, valued by GameRecord attribute."""
    POINTS = "points"
    TURNS = "turns"
    MAXLVL = "maxlvl"


@dataclass(frozen=True)
class HighscoreEntry:
    index: int  # position of the holder in the tracker history
    value: int


UNSET = HighscoreEntry(0, 0)


class HighscoreTracker:
    """Running maxima over every game seen so far.

    History is append-only, so an entry's index stays valid for the lifetime
    of the tracker. Ties never replace the current holder.
    """

    def __init__(self) -> None:
        self._history: list[GameRecord] = []
        self._entries: dict[Metric, HighscoreEntry] = {metric: UNSET for metric in Metric}

    def __len__(self) -> int:
        return len(self._history)

    @property
    def history(self) -> tuple[GameRecord, ...]:
        return tuple(self._history)

    def record_at(self, index: int) -> GameRecord:
        return self._history[index]

    def observe(self, record: GameRecord) -> set[Metric]:
        """Add a game to the history and update every metric it beats.

        Returns:
            The metrics for which this game set a new record (possibly empty)
        """
        self._history.append(record)
        index = len(self._history) - 1
        improved = set()
        for metric in Metric:
            value = getattr(record, metric.value)
            if value > self._entries[metric].value:
                self._entries[metric] = HighscoreEntry(index, value)
                improved.add(metric)
        if improved:
            logger.info(f"{record.name} set new {sorted(m.value for m in improved)} records")
        return improved

    def holder(self, metric: Metric) -> Optional[HighscoreEntry]:
        entry = self._entries[metric]
        if entry.value == 0:
            return None
        return entry

    def is_record_holder(self, index: int) -> bool:
        if index >= len(self._history):
            return False
        return any(entry.value != 0 and entry.index == index
                   for entry in self._entries.values())
