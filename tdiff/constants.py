"""Shared constants for tdiff dot-directories and defaults."""

TDIFF_HOME_EXT = ".tdiff"  # user-level state/config directory suffix

TDIFF_HOME_DISPLAY = f"~/{TDIFF_HOME_EXT}"  # user-readable path hint

# Default per-case timeout for program mode
DEFAULT_TIMEOUT_SECONDS = 10.0

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
