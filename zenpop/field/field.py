from __future__ import annotations
import logging
import math
import random
from typing import Callable, Iterable, List, Optional, Protocol, Sequence

from zenpop.api.frame_data import Point

from .bubble import (
    GOLD_COLOR,
    Bubble,
    BubbleKind,
    BubbleSprite,
    BubbleState,
    random_hue_color,
)

log = logging.getLogger(__name__)

DEFAULT_TILE_RADIUS = 40.0
GAP_RATIO = 0.12            # visual gap, as a fraction of the tile radius
GOLDEN_PROBABILITY = 0.05
HIT_MULTIPLIER = 1.2        # forgiving hit box around the drawn circle
POP_STEP = 0.1              # progress added per frame while popping


class PopListener(Protocol):
    def on_pop(self) -> None: ...
    def on_golden_pop(self) -> None: ...


class _CallbackListener:
    def __init__(self, on_pop: Optional[Callable[[], None]], on_golden_pop: Optional[Callable[[], None]]):
        self._on_pop = on_pop
        self._on_golden_pop = on_golden_pop

    def on_pop(self) -> None:
        if self._on_pop is not None:
            self._on_pop()

    def on_golden_pop(self) -> None:
        if self._on_golden_pop is not None:
            self._on_golden_pop()


def grid_centers(width: float, height: float, tile_radius: float) -> List[tuple[int, int, float, float]]:
    """
    Staggered (honeycomb) centers covering the surface plus one tile of margin.
    Returns (row, col, x, y) in row-major order. Pure function of its inputs.
    """
    if width <= 0 or height <= 0 or tile_radius <= 0:
        return []

    dx = 2.0 * tile_radius
    dy = math.sqrt(3.0) * tile_radius
    lo_x, hi_x = -tile_radius, width + tile_radius
    hi_y = height + tile_radius

    out = []
    row = 0
    y = 0.0
    while y <= hi_y:
        offset = dx / 2.0 if row % 2 else 0.0
        k = math.ceil((lo_x - offset) / dx)
        x = offset + k * dx
        col = 0
        while x <= hi_x:
            out.append((row, col, x, y))
            col += 1
            x = offset + (k + col) * dx
        row += 1
        y = row * dy
    return out


def generate(
    width: float,
    height: float,
    tile_radius: float = DEFAULT_TILE_RADIUS,
    rng: Optional[random.Random] = None,
    golden_probability: float = GOLDEN_PROBABILITY,
) -> List[Bubble]:
    rng = rng or random.Random()
    radius = tile_radius * (1.0 - GAP_RATIO)
    bubbles: List[Bubble] = []
    for row, col, x, y in grid_centers(width, height, tile_radius):
        golden = rng.random() < golden_probability
        color = GOLD_COLOR if golden else random_hue_color(rng)
        bubbles.append(Bubble(
            id=f"{row}-{col}",
            x=x,
            y=y,
            radius=radius,
            kind=BubbleKind.Golden if golden else BubbleKind.Normal,
            color=color,
        ))
    return bubbles


class Field:
    """
    Owns the bubbles for one surface size.

    `resize` throws away every bubble and lays out a fresh grid; `advance`
    is the per-frame step that ages popping bubbles, hit tests the alive ones
    against the frame's pointers and reports pops to the listener.
    """

    def __init__(
        self,
        listener: Optional[PopListener] = None,
        *,
        on_pop: Optional[Callable[[], None]] = None,
        on_golden_pop: Optional[Callable[[], None]] = None,
        tile_radius: float = DEFAULT_TILE_RADIUS,
        hit_multiplier: float = HIT_MULTIPLIER,
        pop_step: float = POP_STEP,
        golden_probability: float = GOLDEN_PROBABILITY,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        if hit_multiplier < 1.0:
            raise ValueError("hit_multiplier must be >= 1")
        if pop_step <= 0:
            raise ValueError("pop_step must be > 0")
        if listener is not None and (on_pop is not None or on_golden_pop is not None):
            raise ValueError("pass either a listener or on_pop/on_golden_pop callbacks, not both")
        self.listener: PopListener = listener or _CallbackListener(on_pop, on_golden_pop)
        self.tile_radius = float(tile_radius)
        self.hit_multiplier = float(hit_multiplier)
        self.pop_step = float(pop_step)
        self.golden_probability = float(golden_probability)
        self.rng = rng if rng is not None else random.Random(seed)

        self.width = 0
        self.height = 0
        self.bubbles: List[Bubble] = []

    # ------------- generation -------------
    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.bubbles = generate(self.width, self.height, self.tile_radius,
                                self.rng, self.golden_probability)
        log.debug("Field %dx%d -> %d bubbles", self.width, self.height, len(self.bubbles))

    # ------------- per frame -------------
    def advance(self, pointers: Iterable[Point] | Sequence[tuple[float, float]]) -> List[Bubble]:
        """
        Step the pop animation and hit test pointers. Returns the bubbles that
        were popped during this call, in field order.
        """
        pts = [_xy(p) for p in pointers]

        for b in self.bubbles:
            if b.state is BubbleState.Popping:
                b.step_pop(self.pop_step)

        popped: List[Bubble] = []
        if not pts:
            return popped

        for b in self.bubbles:
            if not b.alive:
                continue
            if any(b.hit_by(px, py, self.hit_multiplier) for px, py in pts):
                b.start_pop()
                popped.append(b)
                self.listener.on_pop()
                if b.kind is BubbleKind.Golden:
                    self.listener.on_golden_pop()
        return popped

    def snapshot(self) -> List[BubbleSprite]:
        return [b.sprite() for b in self.bubbles if b.state is not BubbleState.Removed]

    def count(self, state: BubbleState) -> int:
        return sum(1 for b in self.bubbles if b.state is state)


def _xy(p) -> tuple[float, float]:
    if isinstance(p, Point):
        return p.x, p.y
    x, y = p
    return float(x), float(y)
