"""Tests for finding the replay window that ends at a death screen."""
import io

import pytest

from core.errors import TruncatedRecordingError
from replay.ttyrec import FrameStore
from replay.death_locator import (DEATH_MARKERS, ReplayWindow, has_death_marker,
                                  locate_death_window, window_start)
from tests.fixtures.ttyrec_helpers import (encode, frame_at_ms, frames_with_death,
                                           store_for)


def expected_first(times_ms, k, lookback_ms=30000):
    """Smallest i with times[k] - times[i] < lookback, for increasing times."""
    for i in range(k + 1):
        if times_ms[k] - times_ms[i] < lookback_ms:
            return i
    return k


@pytest.mark.parametrize("marker", DEATH_MARKERS)
def test_each_marker_is_recognised(marker):
    assert has_death_marker(b"junk" + marker + b"more junk")


def test_marker_needs_cursor_home_prefix():
    assert not has_death_marker(b"You die...")
    assert not has_death_marker(b"\x1b[HYou DIE...")


def test_no_death_frame_returns_none():
    store = store_for([frame_at_ms(ms) for ms in range(0, 5000, 1000)])
    assert locate_death_window(store) is None


def test_short_recording_window_starts_at_zero():
    times = [0, 1000, 2000, 3000]
    store = store_for(frames_with_death(times, 3))
    assert locate_death_window(store) == ReplayWindow(0, 3)


def test_window_covers_last_thirty_seconds():
    times = list(range(0, 100_000, 5000))  # 20 frames, 5 s apart
    k = 15
    window = locate_death_window(store_for(frames_with_death(times, k)))
    assert window.last == k
    assert window.first == expected_first(times, k)
    assert times[k] - times[window.first] < 30000
    assert times[k] - times[window.first - 1] >= 30000


def test_frame_exactly_on_boundary_is_outside_window():
    times = [0, 10_000, 40_000, 50_000]
    window = locate_death_window(store_for(frames_with_death(times, 3)))
    # 50000 - 30000 = 20000, frame 1 (10000) is the last at or before it
    assert window == ReplayWindow(2, 3)
    times = [0, 20_000, 40_000, 50_000]
    assert locate_death_window(store_for(frames_with_death(times, 3))) == ReplayWindow(2, 3)


def test_first_death_frame_wins():
    times = [0, 1000, 2000, 3000]
    frames = frames_with_death(times, 1)
    frames[3] = frame_at_ms(3000, DEATH_MARKERS[1])
    assert locate_death_window(store_for(frames)) == ReplayWindow(0, 1)


@pytest.mark.parametrize("k", [0, 1, 2])
def test_death_near_start_of_recording(k):
    times = [0, 40_000, 80_000]
    window = locate_death_window(store_for(frames_with_death(times, k)))
    assert window == ReplayWindow(k, k)
    assert window.first == expected_first(times, k)


def test_only_first_frame_outside_lookback():
    # Frame 0 is the only one at or before the boundary, so the window starts at 1.
    times = [0, 35_000, 40_000, 45_000]
    window = locate_death_window(store_for(frames_with_death(times, 3)))
    assert window == ReplayWindow(1, 3)
    assert window.first == expected_first(times, 3)


@pytest.mark.parametrize("k", range(8))
def test_matches_brute_force(k):
    times = [0, 3000, 20_000, 31_000, 33_000, 60_000, 61_000, 95_000]
    window = locate_death_window(store_for(frames_with_death(times, k)))
    assert window == ReplayWindow(expected_first(times, k), k)


def test_store_is_rewound_after_success():
    frames = frames_with_death([0, 1000, 2000], 1)
    store = store_for(frames)
    locate_death_window(store)
    assert store.index == 0
    assert store.next_frame() == frames[0]


def test_truncated_before_death_raises():
    data = encode(frames_with_death([0, 1000, 2000], 2))[:-3]
    with pytest.raises(TruncatedRecordingError):
        locate_death_window(FrameStore(io.BytesIO(data)))


def test_window_start_scans_down_to_index_zero():
    assert window_start([0, 35_000], 1, 30000) == 1
    assert window_start([10_000, 35_000], 1, 30000) == 0
    assert window_start([5], 0, 30000) == 0


def test_invalid_window_rejected():
    with pytest.raises(ValueError):
        ReplayWindow(3, 2)
    assert len(ReplayWindow(2, 5)) == 4
