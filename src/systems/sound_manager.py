"""Sound cues for the hall of fame announcements."""

import asyncio
import io
import logging
import os
import random

import aiofiles
import pygame

from config import hall_config

logger = logging.getLogger(__name__)


class NullSoundManager:
    """Silent sound manager, used when sound is disabled."""

    def play_type(self) -> None:
        pass

    def play_record(self) -> None:
        pass

    def play_dead(self) -> None:
        pass

    def stop(self) -> None:
        pass


class SoundManager(NullSoundManager):
    """Plays cue files through pygame.mixer from a background queue.

    Cue files are read asynchronously the first time they are played and
    kept for later plays, so the announcement loop never blocks on disk.
    """

    def __init__(self, sound_dir: str = hall_config.SOUND_DIR):
        self.sound_dir = sound_dir
        self.sound_queue: asyncio.Queue = asyncio.Queue()
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self.sound_queue_task = asyncio.create_task(self.play_sounds_in_queue(), name="cue sound player")

    async def _load(self, soundfile: str) -> pygame.mixer.Sound:
        if soundfile not in self._sounds:
            async with aiofiles.open(os.path.join(self.sound_dir, soundfile), mode='rb') as f:
                self._sounds[soundfile] = pygame.mixer.Sound(file=io.BytesIO(await f.read()))
        return self._sounds[soundfile]

    async def play_sounds_in_queue(self) -> None:
        """Background task playing queued cues in order."""
        while True:
            soundfile = await self.sound_queue.get()
            try:
                sound = await self._load(soundfile)
                channel = pygame.mixer.find_channel(force=True)
                channel.play(sound)
            except (OSError, pygame.error) as e:
                logger.warning(f"error playing sound {soundfile}: {e}")
            finally:
                self.sound_queue.task_done()

    def play_type(self) -> None:
        """Play one of the typewriter clicks."""
        self.sound_queue.put_nowait(random.choice(hall_config.TYPE_SOUNDS))

    def play_record(self) -> None:
        """Play the new record fanfare."""
        self.sound_queue.put_nowait(hall_config.RECORD_SOUND)

    def play_dead(self) -> None:
        """Play the player death sound."""
        self.sound_queue.put_nowait(hall_config.DEAD_SOUND)

    def stop(self) -> None:
        self.sound_queue_task.cancel()
