from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    cam_index: int
    hands: bool = True
    max_hands: int = 2
    mirror: bool = True
    mouse: bool = False
    fps: int = 60
