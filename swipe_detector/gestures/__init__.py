"""
Swipe detection and direction classification.

This module provides the four-way direction classifier and the detector
that turns pan gesture events into swipe callbacks.
"""

from .direction import SwipeDirection, classify_swipe, classify_offset, axis_value
from .events import GestureEvent, GestureEventKind, GestureRegion, HitTestBehavior
from .swipe_detector import SwipeDetector, SwipeSession

__all__ = [
    'SwipeDirection',
    'classify_swipe',
    'classify_offset',
    'axis_value',
    'GestureEvent',
    'GestureEventKind',
    'GestureRegion',
    'HitTestBehavior',
    'SwipeDetector',
    'SwipeSession'
]
