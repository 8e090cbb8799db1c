#!/usr/bin/env python3
"""
Swipe Detector - Main Entry Point
Listens on a touch device and logs every recognized swipe.
"""

import argparse
import logging
import time

from swipe_detector.config.settings import SwipeConfig
from swipe_detector.core.listener import TouchListener
from swipe_detector.device.device_manager import DeviceManager
from swipe_detector.gestures.swipe_detector import SwipeDetector
from swipe_detector.utils.logger import SwipeLogger


def build_listener(live_feedback: bool = False, device_path: str = None,
                   debug_file: str = SwipeConfig.DEBUG_LOG_FILE) -> TouchListener:
    """Wire a logging SwipeDetector to a touch device listener."""
    swipe_logger = SwipeLogger(debug_file)
    detector = SwipeDetector(
        on_swipe=lambda direction, offset: swipe_logger.log_swipe(
            direction, offset, live=detector.is_tracking
        ),
        live_feedback=live_feedback,
    )
    return TouchListener(detector, DeviceManager(device_path), swipe_logger)


def main():
    """Main entry point for the swipe listener."""
    parser = argparse.ArgumentParser(description="Log swipes from a touch device.")
    parser.add_argument('--live', action='store_true',
                        help="report the swipe direction on every move, not only on release")
    parser.add_argument('--device', help="evdev device path, e.g. /dev/input/event5")
    parser.add_argument('--verbose', action='store_true', help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    listener = build_listener(live_feedback=args.live, device_path=args.device)

    if not listener.start():
        return

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()


if __name__ == "__main__":
    main()
