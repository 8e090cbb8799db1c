"""
Utilities package for swipe recognition.

This package provides the geometry type and the console/debug-file
swipe logger shared by the detector and its hosts.
"""

from .gesture_utils import Offset
from .logger import SwipeLogger

__all__ = [
    'Offset',
    'SwipeLogger'
]
