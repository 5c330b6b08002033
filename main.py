#!/usr/bin/env python3

import argparse
import asyncio
import logging
import os
import signal
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from config import hall_config
from config.hall_params import HallParams
from core.app import HallOfFame
from core.errors import RecordParseError
from core.log_tailer import LogTailer
from game_logging.hall_loggers import HallLogger
from rendering.console import Console
from replay.replayer import SequentialReplayer
from systems.sound_manager import NullSoundManager, SoundManager
from systems.time_provider import SystemTimeProvider

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="NetHack hall of fame with death replays")
    parser.add_argument("dglroot", help="dgamelaunch root directory")
    parser.add_argument("--poll-interval", type=float, default=hall_config.POLL_INTERVAL_S,
                        help="seconds between xlogfile checks")
    parser.add_argument("--sound-dir", default=hall_config.SOUND_DIR, help="directory with cue .wav files")
    parser.add_argument("--no-sound", action="store_true", help="disable sound cues")
    parser.add_argument("--fast-forward", action="store_true",
                        help="draw frames before the replay window instantly")
    parser.add_argument("--event-log", default=None, help="append a JSONL event trace to this file")
    parser.add_argument("--font", default=hall_config.FONT_FILE, help="big letter font file")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def make_sound_manager(params: HallParams):
    if not params.sound:
        return NullSoundManager()
    import pygame
    try:
        pygame.mixer.init()
    except pygame.error as e:
        logger.warning(f"sound disabled: {e}")
        return NullSoundManager()
    return SoundManager(params.sound_dir)


def install_stop_handlers(stop: asyncio.Event) -> None:
    """Stop on SIGINT/SIGTERM or on any key press."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)
    if sys.stdin.isatty():
        loop.add_reader(sys.stdin.fileno(), stop.set)


async def poll_forever(hall: HallOfFame, poll_interval_s: float) -> None:
    while True:
        await hall.run_once()
        await asyncio.sleep(poll_interval_s)


async def main(params: HallParams) -> int:
    time_provider = SystemTimeProvider()
    console = Console.with_font_file(params.font_file)
    hall_logger = HallLogger(params.event_log)
    sound_manager = make_sound_manager(params)

    stop = asyncio.Event()
    install_stop_handlers(stop)

    hall_logger.start_logging()
    try:
        with LogTailer.open(params.xlogfile) as tailer:
            hall = HallOfFame(tailer, console, sound_manager, time_provider, params.userdata_dir,
                              SequentialReplayer(time_provider, fast_forward=params.fast_forward),
                              hall_logger)
            hall.start()
            poller = asyncio.create_task(poll_forever(hall, params.poll_interval_s), name="xlogfile poller")
            stopper = asyncio.create_task(stop.wait(), name="stop waiter")
            await asyncio.wait({poller, stopper}, return_when=asyncio.FIRST_COMPLETED)
            # Cancelling the poller interrupts a replay in progress.
            poller.cancel()
            stopper.cancel()
            try:
                await poller
            except asyncio.CancelledError:
                pass
    except RecordParseError as e:
        logger.error(f"corrupt xlogfile: {e}")
        return 1
    finally:
        console.show_cursor()
        sound_manager.stop()
        hall_logger.stop_logging()
    return 0


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else getattr(logging, hall_config.LOG_LEVEL),
                        format=hall_config.LOG_FORMAT)
    params = HallParams.from_args(args)
    logger.info(f"starting with {params}")
    sys.exit(asyncio.run(main(params)))
