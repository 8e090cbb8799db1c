"""
Swipe detection over a single pan gesture.

A SwipeDetector receives the start/update/end events of one pointer drag at
a time, keeps the start and latest position in a SwipeSession, and when the
gesture ends (or on every update with live feedback) classifies the
displacement and invokes the matching callbacks.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..config.settings import SwipeConfig
from ..utils.gesture_utils import Offset
from .direction import SwipeDirection, axis_value, classify_offset
from .events import GestureEvent, GestureEventKind, GestureRegion, HitTestBehavior

logger = logging.getLogger(__name__)

SwipeCallback = Callable[[SwipeDirection, Offset], Any]
AxisCallback = Callable[[float], Any]


class SwipeSession:
    """Start and latest pointer position of the gesture in progress."""

    def __init__(self, start: Offset):
        self.start = start
        self.latest = start

    def update(self, position: Offset):
        self.latest = position

    @property
    def displacement(self) -> Offset:
        return self.latest - self.start

    def __repr__(self):
        return f"SwipeSession(start={self.start!r}, latest={self.latest!r})"


class SwipeDetector:
    """
    Detects user swipes.

    Attempts to recognize swipes that correspond to its registered callbacks:

    - ``on_swipe(direction, offset)`` is called first with the direction and
      the full displacement since the gesture started.
    - then exactly one of ``on_swipe_up``, ``on_swipe_down``,
      ``on_swipe_left`` or ``on_swipe_right`` is called with the signed
      displacement along the swipe's axis (``dy`` for up/down, ``dx`` for
      left/right).

    Callbacks left as None are skipped. With ``live_feedback`` the callbacks
    also run on every update, not only when the gesture ends.
    """

    def __init__(self,
                 on_swipe: Optional[SwipeCallback] = None,
                 on_swipe_up: Optional[AxisCallback] = None,
                 on_swipe_down: Optional[AxisCallback] = None,
                 on_swipe_left: Optional[AxisCallback] = None,
                 on_swipe_right: Optional[AxisCallback] = None,
                 live_feedback: bool = SwipeConfig.LIVE_FEEDBACK,
                 behavior: Optional[HitTestBehavior] = SwipeConfig.HIT_TEST_BEHAVIOR):
        self.on_swipe = on_swipe
        self.on_swipe_up = on_swipe_up
        self.on_swipe_down = on_swipe_down
        self.on_swipe_left = on_swipe_left
        self.on_swipe_right = on_swipe_right
        self.live_feedback = live_feedback
        self.behavior = behavior

        self.session: Optional[SwipeSession] = None

    @property
    def updatable(self) -> bool:
        """Alias of ``live_feedback``."""
        return self.live_feedback

    @updatable.setter
    def updatable(self, value: bool):
        self.live_feedback = value

    @property
    def is_tracking(self) -> bool:
        return self.session is not None

    def render(self, child: Any) -> GestureRegion:
        """Wrap ``child`` in a gesture region handled by this detector."""
        return GestureRegion(child=child, detector=self, behavior=self.behavior)

    def on_gesture_event(self, event: GestureEvent) -> Optional[SwipeDirection]:
        """Route a host pointer event to the matching lifecycle handler."""
        if event.kind in (GestureEventKind.START, GestureEventKind.UPDATE) and event.position is None:
            raise ValueError(f"{event.kind.value} event requires a position")
        if event.kind is GestureEventKind.START:
            return self.on_pan_start(event.position)
        if event.kind is GestureEventKind.UPDATE:
            return self.on_pan_update(event.position)
        if event.kind is GestureEventKind.END:
            return self.on_pan_end(event.position)
        raise ValueError(f"Unknown gesture event kind: {event.kind!r}")

    def on_pan_start(self, position: Offset) -> None:
        if self.session is not None:
            logger.debug("Gesture started before previous one ended, dropping %r", self.session)
        self.session = SwipeSession(position)

    def on_pan_update(self, position: Offset) -> Optional[SwipeDirection]:
        if self.session is None:
            logger.debug("Ignoring pan update without a started gesture")
            return None

        self.session.update(position)
        if self.live_feedback:
            return self.dispatch(self.session.displacement)
        return None

    def on_pan_end(self, position: Optional[Offset] = None) -> Optional[SwipeDirection]:
        """
        Finish the gesture and dispatch its final displacement.

        The end position is not used: the last update is the final position.
        """
        session = self.session
        if session is None:
            logger.debug("Ignoring pan end without a started gesture")
            return None

        self.session = None
        return self.dispatch(session.displacement)

    def dispatch(self, offset: Offset) -> SwipeDirection:
        """Classify ``offset`` and call the generic then the directional callback."""
        direction = classify_offset(offset)
        logger.debug("Swipe %s %r", direction.value, offset)

        if self.on_swipe is not None:
            self.on_swipe(direction, offset)

        callback = self._directional_callbacks()[direction]
        if callback is not None:
            callback(axis_value(direction, offset))

        return direction

    def _directional_callbacks(self) -> Dict[SwipeDirection, Optional[AxisCallback]]:
        return {
            SwipeDirection.UP: self.on_swipe_up,
            SwipeDirection.DOWN: self.on_swipe_down,
            SwipeDirection.LEFT: self.on_swipe_left,
            SwipeDirection.RIGHT: self.on_swipe_right,
        }
