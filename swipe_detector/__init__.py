"""
Swipe Detector Package
Four-way swipe recognition over pan gestures, with touchscreen and pygame hosts.
"""

from .gestures.swipe_detector import SwipeDetector, SwipeSession
from .gestures.direction import SwipeDirection, classify_swipe
from .gestures.events import GestureEvent, GestureEventKind, GestureRegion, HitTestBehavior
from .utils.gesture_utils import Offset

__version__ = "1.0.0"
__all__ = [
    "SwipeDetector",
    "SwipeSession",
    "SwipeDirection",
    "classify_swipe",
    "GestureEvent",
    "GestureEventKind",
    "GestureRegion",
    "HitTestBehavior",
    "Offset",
]
