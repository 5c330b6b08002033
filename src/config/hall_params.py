"""Run parameters for one hall of fame process."""
import argparse
from dataclasses import dataclass
import os
from typing import Optional

from config import hall_config


@dataclass
class HallParams:
    """Configuration parameters for a hall of fame instance."""
    dgl_root: str = "."
    poll_interval_s: float = hall_config.POLL_INTERVAL_S
    sound_dir: str = hall_config.SOUND_DIR
    sound: bool = False
    fast_forward: bool = False
    event_log: Optional[str] = None
    font_file: str = hall_config.FONT_FILE

    @property
    def xlogfile(self) -> str:
        return os.path.join(self.dgl_root, hall_config.XLOGFILE_PATH)

    @property
    def userdata_dir(self) -> str:
        return os.path.join(self.dgl_root, hall_config.USERDATA_DIR)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'HallParams':
        """Create HallParams from argparse Namespace.

        Args:
            args: Parsed command-line arguments

        Returns:
            HallParams instance with values from args
        """
        return cls(
            dgl_root=args.dglroot,
            poll_interval_s=args.poll_interval,
            sound_dir=args.sound_dir,
            sound=not args.no_sound,
            fast_forward=args.fast_forward,
            event_log=args.event_log,
            font_file=args.font
        )

    def __str__(self) -> str:
        """Return string representation for logging."""
        return (f"HallParams(root={self.dgl_root}, poll={self.poll_interval_s}, "
                f"sound={self.sound}, fast_forward={self.fast_forward}, "
                f"event_log={self.event_log})")
