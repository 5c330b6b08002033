"""Time provider abstraction for testability."""
from abc import ABC, abstractmethod
import asyncio
import time


class TimeProvider(ABC):
    """Abstract time provider for replay pacing and screen pauses."""

    @abstractmethod
    def get_micros(self) -> int:
        """Get current time in microseconds.

        Returns:
            Microseconds on a monotonic clock
        """
        pass

    @abstractmethod
    async def sleep_us(self, us: int) -> None:
        """Suspend the caller for the given number of microseconds.

        Cancelling the awaiting task interrupts the sleep.
        """
        pass

    def get_ticks(self) -> int:
        """Get current time in milliseconds."""
        return self.get_micros() // 1000

    def get_seconds(self) -> float:
        """Get current time in seconds."""
        return self.get_micros() / 1_000_000

    async def sleep_ms(self, ms: int) -> None:
        await self.sleep_us(ms * 1000)

    async def sleep_s(self, seconds: float) -> None:
        await self.sleep_us(int(seconds * 1_000_000))


class SystemTimeProvider(TimeProvider):
    """Production time provider using the monotonic clock and asyncio."""

    def get_micros(self) -> int:
        return time.monotonic_ns() // 1000

    async def sleep_us(self, us: int) -> None:
        await asyncio.sleep(max(0, us) / 1_000_000)


class MockTimeProvider(TimeProvider):
    """Test time provider with controllable time.

    Sleeping advances the virtual clock immediately and is recorded in
    `sleeps` (microseconds) so tests can assert exact delay sequences.
    """

    def __init__(self, initial_ms: int = 0):
        """Initialize with specific time.

        Args:
            initial_ms: Starting time in milliseconds
        """
        self._current_us = initial_ms * 1000
        self.sleeps: list[int] = []

    def get_micros(self) -> int:
        """Get mocked time."""
        return self._current_us

    async def sleep_us(self, us: int) -> None:
        us = max(0, us)
        self.sleeps.append(us)
        self._current_us += us

    def advance(self, ms: int) -> None:
        """Advance time by specified milliseconds.

        Args:
            ms: Milliseconds to advance
        """
        self._current_us += ms * 1000

    def set_time(self, ms: int) -> None:
        """Set absolute time.

        Args:
            ms: Absolute time in milliseconds
        """
        self._current_us = ms * 1000
