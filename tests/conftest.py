import sys
import os
import pytest

# Ensure src and project root are in the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from systems.time_provider import MockTimeProvider
from testing.mock_sound_manager import MockSoundManager


@pytest.fixture
def time_provider():
    return MockTimeProvider()


@pytest.fixture
def sound_manager():
    return MockSoundManager()


@pytest.fixture
def dgl_root(tmp_path):
    """An empty dgamelaunch tree with an empty xlogfile."""
    xlog = tmp_path / "nh361" / "var" / "xlogfile"
    xlog.parent.mkdir(parents=True)
    xlog.touch()
    (tmp_path / "dgldir" / "userdata").mkdir(parents=True)
    return tmp_path
