import pygame
from typing import Sequence, Tuple

from zenpop.field.bubble import GOLD_HIGHLIGHT, GOLD_SHADOW, BubbleKind, BubbleSprite

_fonts: dict[int, pygame.font.Font] = {}


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def _mix(a, b, t: float):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def draw_bubble(surface: pygame.Surface, sprite: BubbleSprite) -> None:
    """
    Filled circle shaded from a top-left highlight to a darker rim, plus a
    small glossy reflection. Drawn on a scratch surface so alpha applies.
    """
    r = int(round(sprite.radius))
    a = int(max(0.0, min(1.0, sprite.alpha)) * 255)
    if r <= 0 or a <= 0:
        return

    if sprite.kind is BubbleKind.Golden:
        inner, outer = GOLD_HIGHLIGHT, GOLD_SHADOW
    else:
        inner, outer = (255, 255, 255), _mix(sprite.color, (0, 0, 0), 0.35)

    size = r * 2 + 4
    bubble_surf = pygame.Surface((size, size), pygame.SRCALPHA)
    c = size // 2
    hx, hy = c - int(r * 0.3), c - int(r * 0.3)

    # concentric rings shrinking toward the highlight point
    steps = max(4, min(16, r // 3))
    for i in range(steps):
        t = i / (steps - 1)
        rr = max(1, int(r * (1.0 - t * 0.9)))
        cx = int(c + (hx - c) * t)
        cy = int(c + (hy - c) * t)
        if t < 0.3:
            col = _mix(outer, sprite.color, t / 0.3)
        else:
            col = _mix(sprite.color, inner, (t - 0.3) / 0.7)
        pygame.draw.circle(bubble_surf, (*col, a), (cx, cy), rr)

    gloss = (255, 255, 255, int(a * 0.4))
    pygame.draw.circle(bubble_surf, gloss, (hx, hy), max(1, int(r * 0.2)))
    surface.blit(bubble_surf, (int(sprite.x) - c, int(sprite.y) - c))


def draw_hand(surface: pygame.Surface, hand: Sequence[Tuple[float, float]], color=(0, 255, 0)) -> None:
    for x, y in hand:
        pygame.draw.circle(surface, color, (int(x), int(y)), 3)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.SysFont(None, size)
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=center))
