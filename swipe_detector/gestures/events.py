"""
Gesture events delivered by a host and the render node handed back to it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

from ..utils.gesture_utils import Offset

if TYPE_CHECKING:
    from .swipe_detector import SwipeDetector


class GestureEventKind(Enum):
    """Pointer lifecycle stage of a pan gesture."""
    START = 'start'
    UPDATE = 'update'
    END = 'end'


class HitTestBehavior(Enum):
    """How a gesture region behaves during hit testing."""
    DEFER_TO_CHILD = 'deferToChild'
    OPAQUE = 'opaque'
    TRANSLUCENT = 'translucent'


@dataclass(frozen=True)
class GestureEvent:
    """A single pointer event. ``position`` may be None for END."""
    kind: GestureEventKind
    position: Optional[Offset] = None

    @classmethod
    def start(cls, x: float, y: float) -> 'GestureEvent':
        return cls(GestureEventKind.START, Offset(x, y))

    @classmethod
    def update(cls, x: float, y: float) -> 'GestureEvent':
        return cls(GestureEventKind.UPDATE, Offset(x, y))

    @classmethod
    def end(cls) -> 'GestureEvent':
        return cls(GestureEventKind.END)


@dataclass
class GestureRegion:
    """
    What a SwipeDetector renders: its child plus the gesture-detection
    region laid over it.

    The host owns layout and drawing. It asks the region whether a pointer
    hits it and forwards the events of hitting pointers to ``handle``.
    """
    child: Any
    detector: 'SwipeDetector'
    behavior: Optional[HitTestBehavior] = None

    @property
    def effective_behavior(self) -> HitTestBehavior:
        if self.behavior is not None:
            return self.behavior
        if self.child is not None:
            return HitTestBehavior.DEFER_TO_CHILD
        return HitTestBehavior.TRANSLUCENT

    def hit_test(self, inside_bounds: bool, child_hit: bool = False) -> bool:
        """Whether a pointer at a given location should reach the detector."""
        if self.effective_behavior is HitTestBehavior.DEFER_TO_CHILD:
            return child_hit
        return inside_bounds

    def handle(self, event: GestureEvent):
        return self.detector.on_gesture_event(event)
