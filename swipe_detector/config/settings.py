"""
Configuration settings for the swipe detector.
"""


class SwipeConfig:
    """Configuration constants for swipe recognition and its hosts."""

    # Detector defaults
    LIVE_FEEDBACK = False
    HIT_TEST_BEHAVIOR = None  # None lets GestureRegion pick from its child

    # Logging
    DEBUG_LOG_FILE = 'swipe_debug.log'

    # Touch device fallbacks (in device units)
    DEFAULT_SCREEN_WIDTH = 1920
    DEFAULT_SCREEN_HEIGHT = 1080

    # Listener thread
    THREAD_JOIN_TIMEOUT = 1.0

    # Demo application
    SWIPE_HISTORY_LIMIT = 4
    DEMO_WINDOW_SIZE = (800, 800)
    DEMO_BOX_FRACTION = 0.5
    DEMO_FPS = 60
