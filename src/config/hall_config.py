"""Centralized configuration for the hall of fame: paths, timing and display."""

import os

# ============================================================================
# PATH SETTINGS (relative to the dgamelaunch root)
# ============================================================================
XLOGFILE_PATH = os.path.join("nh361", "var", "xlogfile")
USERDATA_DIR = os.path.join("dgldir", "userdata")
TTYREC_SUBDIR = "ttyrec"

FONT_FILE = os.environ.get("HALLOFFAME_FONT", "font.txt")
SOUND_DIR = os.environ.get("HALLOFFAME_SOUNDS", "sounds")

# ============================================================================
# TIMING SETTINGS
# ============================================================================
POLL_INTERVAL_S = 1.0  # How often the xlogfile is checked for new games
DEATH_LOOKBACK_MS = 30000  # How much play before the death screen is replayed
TRAILING_PAUSE_S = 2.0  # Time the final replay screen stays up
TYPEOUT_DELAY_MS = 150  # Delay between letters of a typed-out announcement
ANNOUNCE_PAUSE_S = 1.0  # Pause before the announcement sound
ANNOUNCE_HOLD_S = 3.0  # Time an announcement stays on screen

# ============================================================================
# GAME SETTINGS
# ============================================================================
QUIT_DEATH = "quit"  # Ending cause of a voluntary exit, never replayed

# ============================================================================
# DISPLAY SETTINGS
# ============================================================================
TITLE = "NH2018"
FONT_HEIGHT = 6  # Rows per big-font glyph
HIGHSCORE_Y = 17
FALLEN_HEROES_SHOWN = 8

# Sound cue files, inside SOUND_DIR
TYPE_SOUNDS = ("type0.wav", "type1.wav")
RECORD_SOUND = "record.wav"
DEAD_SOUND = "dead.wav"

# ============================================================================
# LOGGING SETTINGS
# ============================================================================
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
