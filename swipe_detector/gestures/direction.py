"""
Direction classification for swipe gestures.
"""

from enum import Enum

from ..utils.gesture_utils import Offset


class SwipeDirection(Enum):
    """The direction in which the user swiped."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def is_horizontal(self) -> bool:
        return self in (SwipeDirection.LEFT, SwipeDirection.RIGHT)


def classify_swipe(dx: float, dy: float) -> SwipeDirection:
    """
    Classify a displacement into one of the four cardinal directions.

    The dominant axis wins. The horizontal check is strict, so a diagonal
    with ``abs(dx) == abs(dy)`` (and the zero vector) is treated as vertical.
    Screen coordinates grow downwards, so a positive ``dy`` is DOWN.

    Args:
        dx: Horizontal displacement
        dy: Vertical displacement

    Returns:
        The SwipeDirection of the displacement
    """
    if abs(dx) > abs(dy):
        return SwipeDirection.RIGHT if dx > 0 else SwipeDirection.LEFT
    return SwipeDirection.DOWN if dy > 0 else SwipeDirection.UP


def classify_offset(offset: Offset) -> SwipeDirection:
    """Classify an Offset displacement."""
    return classify_swipe(offset.dx, offset.dy)


def axis_value(direction: SwipeDirection, offset: Offset) -> float:
    """Signed component of ``offset`` along the axis of ``direction``."""
    if direction.is_horizontal:
        return offset.dx
    return offset.dy
