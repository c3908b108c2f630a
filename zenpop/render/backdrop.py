from __future__ import annotations
from typing import Tuple

import cv2
import numpy as np
import pygame

from zenpop.input.pointer_normalizer import CoverFit


def cover_crop(frame_bgr: np.ndarray, screen_size: Tuple[int, int], mirror: bool = True) -> np.ndarray | None:
    """
    Scale the camera frame so it covers the screen, crop the centered
    screen-sized window and mirror it horizontally. Uses the same CoverFit as
    PointerNormalizer so landmarks line up with what is shown.
    """
    h, w = frame_bgr.shape[:2]
    fit = CoverFit.compute((w, h), screen_size)
    if fit is None:
        return None
    cw, ch = screen_size
    sw = max(cw, int(round(fit.scaled_w)))
    sh = max(ch, int(round(fit.scaled_h)))
    scaled = cv2.resize(frame_bgr, (sw, sh), interpolation=cv2.INTER_LINEAR)
    x0 = (sw - cw) // 2
    y0 = (sh - ch) // 2
    out = scaled[y0:y0 + ch, x0:x0 + cw]
    if mirror:
        out = cv2.flip(out, 1)
    return out


def cv2_to_pygame_surface(img_bgr: np.ndarray) -> pygame.Surface:
    """Convert a BGR OpenCV image to a PyGame Surface (RGB)."""
    img_rgb = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB)
    # make_surface wants (W, H, 3)
    return pygame.surfarray.make_surface(np.ascontiguousarray(img_rgb.swapaxes(0, 1)))


def draw_backdrop(surface: pygame.Surface, frame_bgr: np.ndarray | None, alpha: float = 0.8,
                  mirror: bool = True) -> bool:
    if frame_bgr is None:
        return False
    cropped = cover_crop(frame_bgr, surface.get_size(), mirror=mirror)
    if cropped is None:
        return False
    surf = cv2_to_pygame_surface(cropped)
    surf.set_alpha(int(max(0.0, min(1.0, alpha)) * 255))
    surface.blit(surf, (0, 0))
    return True
