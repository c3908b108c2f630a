from __future__ import annotations
import pygame
from typing import Dict, List, Tuple

from zenpop.api.frame_data import Point

_BTN_NAME = {1: "left", 2: "middle", 3: "right"}


class DebugPointInjector:
    """
    Direct-manipulation pointers from the mouse and touch screen:
    - While a mouse button is down, emit a point at the cursor every frame.
    - Each finger on a touch screen is its own point until lifted.
    Points are already in surface coordinates and skip normalization.
    """

    def __init__(self, enabled: bool = True, buttons: Tuple[str, ...] = ("left",)):
        self.enabled = enabled
        self.buttons = set(buttons)
        # held pointers by key ("left", "finger:3", ...) -> (x, y)
        self._points: Dict[str, Tuple[float, float]] = {}

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        if not self.enabled:
            return
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            btn_name = _BTN_NAME.get(event.button)
            if btn_name in self.buttons:
                self._points[btn_name] = (float(event.pos[0]), float(event.pos[1]))

        elif event.type == pygame.MOUSEBUTTONUP:
            btn_name = _BTN_NAME.get(event.button)
            self._points.pop(btn_name, None)

        elif event.type == pygame.MOUSEMOTION:
            for btn_name in self.buttons:
                if btn_name in self._points:
                    self._points[btn_name] = (float(event.pos[0]), float(event.pos[1]))

        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # touch coordinates arrive normalized to the window
            self._points[f"finger:{event.finger_id}"] = (event.x * w, event.y * h)

        elif event.type == pygame.FINGERUP:
            self._points.pop(f"finger:{event.finger_id}", None)

        elif event.type == pygame.WINDOWFOCUSLOST:
            self._points.clear()

    def emit_points(self) -> List[Point]:
        """Pointers held down right now; nothing persists after release."""
        if not self.enabled:
            return []
        return [Point(x, y) for (x, y) in self._points.values()]
