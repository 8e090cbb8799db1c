"""
Device management for touch input discovery and initialization.
"""

import evdev
from evdev import InputDevice, ecodes
import logging
from typing import Optional

from ..config.settings import SwipeConfig

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds a touchscreen or touchpad that can drive swipe gestures."""

    def __init__(self, device_path: Optional[str] = None):
        self.device_path = device_path
        self.device = None
        self.multitouch = False
        self.screen_width = SwipeConfig.DEFAULT_SCREEN_WIDTH
        self.screen_height = SwipeConfig.DEFAULT_SCREEN_HEIGHT

    def find_device(self):
        """Find and configure a touch device, preferring ``device_path`` if given."""
        if self.device_path:
            try:
                candidates = [InputDevice(self.device_path)]
            except OSError as e:
                logger.error(f"Cannot open {self.device_path}: {e}")
                return None
        else:
            candidates = [InputDevice(path) for path in evdev.list_devices()]

        for device in candidates:
            if self._configure(device):
                logger.info(f"Found touch device: {device.name}")
                logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
                return device

        logger.error("No touch device found")
        return None

    def _configure(self, device) -> bool:
        """Adopt ``device`` if it reports absolute touch positions."""
        caps = device.capabilities()
        if ecodes.EV_ABS not in caps:
            return False

        abs_info = {code: info for code, info in caps.get(ecodes.EV_ABS, [])}
        keys = caps.get(ecodes.EV_KEY, [])

        if ecodes.ABS_MT_SLOT in abs_info or ecodes.ABS_MT_POSITION_X in abs_info:
            self.multitouch = True
            x_code, y_code = ecodes.ABS_MT_POSITION_X, ecodes.ABS_MT_POSITION_Y
        elif ecodes.ABS_X in abs_info and ecodes.BTN_TOUCH in keys:
            self.multitouch = False
            x_code, y_code = ecodes.ABS_X, ecodes.ABS_Y
        else:
            return False

        if x_code in abs_info:
            self.screen_width = abs_info[x_code].max + 1
        if y_code in abs_info:
            self.screen_height = abs_info[y_code].max + 1

        self.device = device
        return True

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'multitouch': self.multitouch,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
        }
