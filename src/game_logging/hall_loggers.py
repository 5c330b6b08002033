"""JSONL trace of what the hall of fame saw and did."""

import json
import logging
from typing import Iterable, Optional

from core.highscores import Metric
from core.records import GameRecord
from replay.death_locator import ReplayWindow

logger = logging.getLogger(__name__)


class BaseLogger:
    """Base class for all JSONL-based loggers."""
    def __init__(self, log_file: Optional[str]):
        self.log_file = log_file
        self.log_f = None

    def start_logging(self):
        """Open the log file for appending."""
        if self.log_file:
            logger.info(f"writing event log to {self.log_file}")
            self.log_f = open(self.log_file, "a")

    def stop_logging(self):
        """Close the log file."""
        if self.log_f:
            self.log_f.close()
            self.log_f = None

    def _write_event(self, event: dict):
        """Write a dictionary as a JSON line to the log file."""
        if not self.log_f:
            return
        self.log_f.write(json.dumps(event) + "\n")
        self.log_f.flush()


class HallLogger(BaseLogger):
    """Logs games, new records and replays."""
    def log_record(self, index: int, record: GameRecord, now_ms: int):
        event = {
            "time": now_ms,
            "event_type": "game",
            "index": index,
            "name": record.name,
            "points": record.points,
            "turns": record.turns,
            "maxlvl": record.maxlvl,
            "death": record.death,
        }
        self._write_event(event)

    def log_new_highscore(self, index: int, name: str, metrics: Iterable[Metric], now_ms: int):
        event = {
            "time": now_ms,
            "event_type": "new_highscore",
            "index": index,
            "name": name,
            "metrics": sorted(metric.value for metric in metrics),
        }
        self._write_event(event)

    def log_replay(self, name: str, recording: str, window: Optional[ReplayWindow], now_ms: int):
        event = {
            "time": now_ms,
            "event_type": "replay",
            "name": name,
            "recording": recording,
            "first": window.first if window else None,
            "last": window.last if window else None,
        }
        self._write_event(event)
