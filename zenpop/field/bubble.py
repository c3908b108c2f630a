from __future__ import annotations
import colorsys
import random
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Color = Tuple[int, int, int]

GOLD_COLOR: Color = (255, 215, 0)
GOLD_HIGHLIGHT: Color = (255, 245, 225)
GOLD_SHADOW: Color = (184, 134, 11)

# Normal bubbles pick a hue in this band (degrees): blues through violets
HUE_RANGE = (190.0, 250.0)
SATURATION = 0.90
LIGHTNESS = 0.65

POP_GROWTH = 0.3     # visual scale at the end of the pop is 1 + POP_GROWTH
BASE_ALPHA = 0.8     # opacity of an untouched bubble


class BubbleKind(Enum):
    Normal = 1
    Golden = 2


class BubbleState(Enum):
    Alive = 1
    Popping = 2
    Removed = 3


def random_hue_color(rng: random.Random) -> Color:
    lo, hi = HUE_RANGE
    hue = lo + rng.random() * (hi - lo)
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, LIGHTNESS, SATURATION)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


@dataclass
class BubbleSprite:
    """What a renderer needs to draw one bubble this frame."""
    id: str
    x: float
    y: float
    radius: float
    color: Color
    kind: BubbleKind
    alpha: float


@dataclass
class Bubble:
    id: str
    x: float
    y: float
    radius: float
    kind: BubbleKind = BubbleKind.Normal
    color: Color = (255, 255, 255)
    state: BubbleState = BubbleState.Alive
    progress: float = 0.0
    visual_scale: float = 1.0

    @property
    def alive(self) -> bool:
        return self.state is BubbleState.Alive

    @property
    def alpha(self) -> float:
        if self.state is BubbleState.Alive:
            return BASE_ALPHA
        return BASE_ALPHA * (1.0 - self.progress)

    def hit_by(self, px: float, py: float, hit_multiplier: float) -> bool:
        dx = px - self.x
        dy = py - self.y
        hit_r = self.radius * hit_multiplier
        return dx * dx + dy * dy <= hit_r * hit_r

    def start_pop(self) -> bool:
        """Alive -> Popping. Returns False (and does nothing) otherwise."""
        if self.state is not BubbleState.Alive:
            return False
        self.state = BubbleState.Popping
        self.progress = 0.0
        self.visual_scale = 1.0
        return True

    def step_pop(self, step: float) -> None:
        if self.state is not BubbleState.Popping:
            return
        # round so ten steps of 0.1 land on exactly 1.0
        self.progress = min(1.0, round(self.progress + step, 9))
        self.visual_scale = 1.0 + POP_GROWTH * self.progress
        if self.progress >= 1.0:
            self.state = BubbleState.Removed

    def sprite(self) -> BubbleSprite:
        return BubbleSprite(
            id=self.id,
            x=self.x,
            y=self.y,
            radius=self.radius * self.visual_scale,
            color=self.color,
            kind=self.kind,
            alpha=self.alpha,
        )
