"""
Touch listener that turns evdev touch input into swipe gestures.
"""

import logging
import threading
from typing import Optional

from evdev import ecodes

from ..config.settings import SwipeConfig
from ..device.device_manager import DeviceManager
from ..gestures.events import GestureEvent
from ..gestures.swipe_detector import SwipeDetector
from ..utils.logger import SwipeLogger

logger = logging.getLogger(__name__)

SINGLE_TOUCH_SLOT = 0


class TouchListener:
    """
    Reads a touch device and feeds a single-pointer pan gesture to a
    SwipeDetector.

    Only the first contact of a gesture is followed; further fingers are
    ignored until it lifts. Events are buffered until SYN_REPORT, then at most
    one START, UPDATE or END is delivered for the whole batch.
    """

    def __init__(self, detector: SwipeDetector,
                 device_manager: Optional[DeviceManager] = None,
                 swipe_logger: Optional[SwipeLogger] = None):
        self.detector = detector
        self.device_manager = device_manager or DeviceManager()
        self.swipe_logger = swipe_logger
        self.multitouch = True

        # Contact state
        self.running = False
        self.current_slot = 0
        self.primary_slot = None
        self.touching = False
        self.tracking = False
        self.moved = False
        self.slot_data = {}  # slot -> {'x', 'y'}

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the touch listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touch device found")
            return False

        device_info = self.device_manager.get_device_info()
        self.multitouch = device_info['multitouch']

        self.running = True
        self._print_startup_info(device_info)

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touch listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=SwipeConfig.THREAD_JOIN_TIMEOUT)
        if self.swipe_logger:
            self.swipe_logger.close()

    def _print_startup_info(self, device_info):
        mode = "multitouch" if device_info['multitouch'] else "single touch"
        print(f"✅ Found: {device_info['device'].name} ({mode})")
        print(f"📺 Surface: {device_info['screen_width']}x{device_info['screen_height']}")
        print(f"⚡ Live feedback: {'on' if self.detector.live_feedback else 'off'}")
        print("🎯 Ready! Swipe up, down, left or right.")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except Exception:
            logger.exception("Error in event loop")

    def _process_event_batch(self, event_batch):
        """Apply a SYN_REPORT batch and deliver the resulting gesture event."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
            elif ev.type == ecodes.EV_KEY and ev.code == ecodes.BTN_TOUCH and not self.multitouch:
                self.touching = ev.value != 0

        self._emit_gesture_event()

    def _handle_abs_event(self, ev):
        """Handle absolute axis events."""
        if not self.multitouch:
            if ev.code == ecodes.ABS_X:
                self._set_position(SINGLE_TOUCH_SLOT, 'x', ev.value)
            elif ev.code == ecodes.ABS_Y:
                self._set_position(SINGLE_TOUCH_SLOT, 'y', ev.value)
            return

        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._set_position(self.current_slot, 'x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._set_position(self.current_slot, 'y', ev.value)

    def _handle_tracking_id(self, value: int):
        """A tracking id of -1 lifts the finger in the current slot."""
        if value == -1:
            if self.current_slot == self.primary_slot:
                self.primary_slot = None
                self.touching = False
        elif self.primary_slot is None:
            self.primary_slot = self.current_slot
            self.touching = True

    def _set_position(self, slot: int, axis: str, value: int):
        """Record a coordinate for ``slot``; the kernel only resends changed values."""
        position = self.slot_data.setdefault(slot, {'x': None, 'y': None})
        if position[axis] != value:
            position[axis] = value
            if slot == self._gesture_slot():
                self.moved = True

    def _gesture_slot(self):
        return self.primary_slot if self.multitouch else SINGLE_TOUCH_SLOT

    def _gesture_position(self):
        position = self.slot_data.get(self._gesture_slot())
        if position is None or position['x'] is None or position['y'] is None:
            return None
        return position['x'], position['y']

    def _emit_gesture_event(self):
        if self.touching and not self.tracking:
            position = self._gesture_position()
            if position is None:
                return
            self.tracking = True
            self.moved = False
            event = GestureEvent.start(*position)
            if self.swipe_logger:
                self.swipe_logger.log_gesture_start(event.position)
            self.detector.on_gesture_event(event)
        elif self.touching and self.moved:
            self.moved = False
            self.detector.on_gesture_event(GestureEvent.update(*self._gesture_position()))
        elif not self.touching and self.tracking:
            self.tracking = False
            self.moved = False
            self.detector.on_gesture_event(GestureEvent.end())
