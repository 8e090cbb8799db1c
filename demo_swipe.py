#!/usr/bin/env python3
"""Swipe Detector Demo with Visual Feedback.

Drag the mouse across the green box. Every recognized swipe is added to
the history shown inside the box, newest first, keeping the last few.
Press L to toggle live feedback, C to clear the history.
"""

from typing import List, Optional, Tuple

import pygame

from swipe_detector.config.settings import SwipeConfig
from swipe_detector.gestures.direction import SwipeDirection
from swipe_detector.gestures.events import GestureEvent
from swipe_detector.gestures.swipe_detector import SwipeDetector


class SwipeHistory:
    """Bounded list of the most recent swipe directions, newest first."""

    def __init__(self, limit: int = SwipeConfig.SWIPE_HISTORY_LIMIT) -> None:
        self.limit = limit
        self.items: List[SwipeDirection] = []

    def add(self, direction: SwipeDirection) -> None:
        self.items.insert(0, direction)
        if len(self.items) > self.limit:
            self.items.pop()

    def clear(self) -> None:
        self.items = []


class SwipeDemo:
    """Interactive demo for the swipe detector."""

    def __init__(self) -> None:
        pygame.init()
        width, height = SwipeConfig.DEMO_WINDOW_SIZE
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Swipe Detector Demo")

        self.history = SwipeHistory()
        self.last_offset: Optional[Tuple[float, float]] = None
        self.pressed = False

        self.detector = SwipeDetector(
            on_swipe_up=lambda dy: self.history.add(SwipeDirection.UP),
            on_swipe_down=lambda dy: self.history.add(SwipeDirection.DOWN),
            on_swipe_left=lambda dx: self.history.add(SwipeDirection.LEFT),
            on_swipe_right=lambda dx: self.history.add(SwipeDirection.RIGHT),
            on_swipe=self.show_offset,
        )

        side = int(width * SwipeConfig.DEMO_BOX_FRACTION)
        box = pygame.Rect(0, 0, side, side)
        box.center = (width // 2, height // 2)
        self.region = self.detector.render(box)

        # Colors
        self.WHITE = (255, 255, 255)
        self.BLACK = (0, 0, 0)
        self.GREEN = (105, 240, 174)
        self.GRAY = (128, 128, 128)

        # Fonts
        self.font = pygame.font.Font(None, 40)
        self.small_font = pygame.font.Font(None, 28)

    def show_offset(self, direction: SwipeDirection, offset) -> None:
        self.last_offset = (offset.dx, offset.dy)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:  # Left click
                        self.press(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.pressed:
                        self.region.handle(GestureEvent.update(*event.pos))
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1 and self.pressed:
                        self.pressed = False
                        self.region.handle(GestureEvent.end())
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_l:
                        self.detector.live_feedback = not self.detector.live_feedback
                    elif event.key == pygame.K_c:
                        self.history.clear()
                        self.last_offset = None

            self.draw()
            clock.tick(SwipeConfig.DEMO_FPS)

    def press(self, pos: Tuple[int, int]) -> None:
        """Start a gesture if the press lands on the swipe region."""
        box = self.region.child
        inside = box.collidepoint(pos)
        if self.region.hit_test(inside_bounds=inside, child_hit=inside):
            self.pressed = True
            self.region.handle(GestureEvent.start(*pos))

    def draw(self) -> None:
        """Render the box, the swipe history and the controls."""
        self.screen.fill(self.WHITE)
        box = self.region.child
        pygame.draw.rect(self.screen, self.GREEN, box, border_radius=16)

        title = self.font.render("Swipe me!", True, self.BLACK)
        self.screen.blit(title, title.get_rect(midtop=(box.centerx, box.top + 16)))

        y = box.top + 64
        for direction in self.history.items:
            txt = self.small_font.render(direction.value, True, self.BLACK)
            self.screen.blit(txt, txt.get_rect(midtop=(box.centerx, y)))
            y += 32

        mode = "on" if self.detector.live_feedback else "off"
        lines = [f"L: live feedback ({mode})   C: clear"]
        if self.last_offset is not None:
            lines.append(f"Last offset: ({self.last_offset[0]:.0f}, {self.last_offset[1]:.0f})")
        y = 10
        for line in lines:
            self.screen.blit(self.small_font.render(line, True, self.GRAY), (10, y))
            y += 30

        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = SwipeDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
