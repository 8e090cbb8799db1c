"""
Logging utilities for swipe gestures.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DIRECTION_ICONS = {
    'up': '⬆️',
    'down': '⬇️',
    'left': '⬅️',
    'right': '➡️',
}


class SwipeLogger:
    """Prints recognized swipes and mirrors them to an optional debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_swipe(self, direction, offset, live: bool = False):
        """Log a recognized swipe and its displacement."""
        timestamp = self._timestamp()
        name = direction.value
        icon = DIRECTION_ICONS.get(name, '👋')
        prefix = "LIVE SWIPE" if live else "SWIPE"

        print(f"[{timestamp}] {icon} {prefix}: {name} [{int(offset.distance)}px]")
        print(f"   Offset: ({offset.dx:.0f}, {offset.dy:.0f})")

        self._write_debug(f"[{timestamp}] {prefix.lower()} {name} {offset!r}")

    def log_gesture_start(self, position):
        """Log the first contact of a gesture."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] 👆 GESTURE START: ({int(position.dx)}, {int(position.dy)})")
        self._write_debug(f"[{timestamp}] start {position!r}")

    def _write_debug(self, message: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(message + "\n")
            self.debug_file.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not write debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
